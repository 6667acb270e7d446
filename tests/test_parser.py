"""Tests for habitctl/parser.py — legacy line parsing."""

from datetime import date

import pytest

from chronic.entries import EntryStatus
from chronic.errors import LegacyStoreError, MalformedDateError
from chronic.habitctl.parser import (
    Catalog,
    entry_description,
    parse_entry_line,
    parse_habit_line,
    read_legacy_lines,
)
from chronic.habits import Habit, HabitType


@pytest.mark.parametrize(
    ("code", "expected"),
    [("0", HabitType.JUST_TRACK), ("1", HabitType.DAILY), ("7", HabitType.WEEKLY)],
)
def test_parse_habit_line_cadence(code, expected):
    habit = parse_habit_line(f"{code}Exercise")

    assert habit is not None
    assert habit.type is expected
    assert habit.description == "Exercise"


@pytest.mark.parametrize("code", ["2", "5", "9", "x", "-", "#"])
def test_parse_habit_line_unknown_cadence(code):
    assert parse_habit_line(f"{code}Exercise") is None


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_parse_habit_line_blank(line):
    assert parse_habit_line(line) is None


def test_parse_habit_line_trims_description():
    habit = parse_habit_line("  7   Clean house  \n")

    assert habit.description == "Clean house"


def test_parse_habit_line_assigns_distinct_ids():
    a = parse_habit_line("1Exercise")
    b = parse_habit_line("1Exercise")

    assert a.id != b.id


@pytest.fixture()
def habits():
    return [Habit.new(HabitType.DAILY, "Exercise"), Habit.new(HabitType.WEEKLY, "Clean house")]


@pytest.mark.parametrize(
    ("code", "expected"),
    [("y", EntryStatus.COMPLETED), ("n", EntryStatus.NOT_COMPLETED), ("s", EntryStatus.SKIPPED)],
)
def test_parse_entry_line_status(habits, code, expected):
    entry = parse_entry_line(f"2024-03-01\tExercise\t{code}", habits)

    assert entry is not None
    assert entry.status is expected
    assert entry.date == date(2024, 3, 1)
    assert entry.habit_id == habits[0].id


@pytest.mark.parametrize("code", ["Y", "x", "1", "?"])
def test_parse_entry_line_unknown_status(habits, code):
    assert parse_entry_line(f"2024-03-01\tExercise\t{code}", habits) is None


def test_parse_entry_line_space_padded(habits):
    entry = parse_entry_line("2024-03-01 Exercise  y", habits)

    assert entry is not None
    assert entry.habit_id == habits[0].id


def test_parse_entry_line_multiword_description(habits):
    entry = parse_entry_line("2024-03-02\tClean house\tn", habits)

    assert entry.habit_id == habits[1].id
    assert entry.status is EntryStatus.NOT_COMPLETED


def test_parse_entry_line_unknown_description(habits):
    assert parse_entry_line("2024-03-01 Meditate  y", habits) is None


def test_parse_entry_line_description_is_exact(habits):
    assert parse_entry_line("2024-03-01\texercise\ty", habits) is None


@pytest.mark.parametrize("line", ["", "  ", "\n"])
def test_parse_entry_line_blank(habits, line):
    assert parse_entry_line(line, habits) is None


@pytest.mark.parametrize(
    "line",
    ["2024-13-01\tExercise\ty", "2024-02-30\tExercise\ty", "01-03-2024\tExercise\ty", "garbage"],
)
def test_parse_entry_line_malformed_date_raises(habits, line):
    with pytest.raises(MalformedDateError):
        parse_entry_line(line, habits)


def test_parse_entry_line_too_short(habits):
    assert parse_entry_line("2024-03-01 y", habits) is None


def test_entry_description_strips_separators():
    assert entry_description("2024-03-01\tRead\ty") == "Read"
    assert entry_description("2024-03-01") is None


def test_catalog_first_description_wins():
    first = Habit.new(HabitType.DAILY, "Read")
    second = Habit.new(HabitType.WEEKLY, "Read")

    catalog = Catalog([first, second])

    assert catalog.resolve("Read") == first.id
    assert len(catalog) == 2


def test_parse_entry_line_duplicate_description_resolves_first():
    first = Habit.new(HabitType.DAILY, "Read")
    second = Habit.new(HabitType.WEEKLY, "Read")

    entry = parse_entry_line("2024-03-01\tRead\ty", [first, second])

    assert entry.habit_id == first.id


def test_read_legacy_lines_missing_file(tmp_path):
    with pytest.raises(LegacyStoreError):
        list(read_legacy_lines(tmp_path / "nope"))


def test_read_legacy_lines_skips_undecodable(tmp_path):
    filepath = tmp_path / "habits"
    filepath.write_bytes(b"1Exercise\n0\xff\xfeBroken\n7Clean house\n")

    lines = list(read_legacy_lines(filepath))

    assert lines == ["1Exercise", "7Clean house"]
