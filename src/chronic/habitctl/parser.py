"""Parsers for habitctl's flat-file formats.

habits: one habit per line, `<cadence digit><description>`
log:    one entry per line, `YYYY-MM-DD<sep><description><sep><status letter>`
"""

import logging
import re
from collections.abc import Iterable, Iterator
from datetime import date
from pathlib import Path
from uuid import UUID

from chronic.entries import Entry, EntryStatus
from chronic.errors import LegacyStoreError, MalformedDateError
from chronic.habits import Habit, HabitType

log = logging.getLogger(__name__)

DATE_LENGTH = 10
# date + separator + at least one description char + separator + status
MIN_ENTRY_LENGTH = DATE_LENGTH + 3
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class Catalog:
    """Description lookup over an ordered list of habits.

    When descriptions repeat, the habit that comes first keeps the name.
    """

    def __init__(self, habits: Iterable[Habit]) -> None:
        self.habits = list(habits)
        self._by_description: dict[str, UUID] = {}
        for habit in self.habits:
            if habit.description in self._by_description:
                log.warning(
                    "Duplicate habit description %r; log entries resolve to the first one",
                    habit.description,
                )
                continue
            self._by_description[habit.description] = habit.id

    def __len__(self) -> int:
        return len(self.habits)

    def resolve(self, description: str) -> UUID | None:
        return self._by_description.get(description)


def read_legacy_lines(filepath: Path) -> Iterator[str]:
    """Yield the lines of a habitctl file, dropping ones that are not UTF-8."""
    try:
        raw = filepath.read_bytes()
    except FileNotFoundError as e:
        raise LegacyStoreError(f"{filepath} does not exist") from e
    except OSError as e:
        raise LegacyStoreError(f"cannot read {filepath}: {e}") from e
    for lineno, raw_line in enumerate(raw.splitlines(), start=1):
        try:
            yield raw_line.decode("utf-8")
        except UnicodeDecodeError:
            log.warning("Skipping undecodable line %s:%d", filepath, lineno)


def parse_habit_line(line: str) -> Habit | None:
    line = line.strip()
    if not line:
        return None
    habit_type = HabitType.from_habitctl(line[0])
    if habit_type is None:
        return None
    return Habit.new(habit_type, line[1:].strip())


def parse_entry_date(line: str) -> date:
    """Strict YYYY-MM-DD from the fixed-width date field of a log line."""
    field = line[:DATE_LENGTH]
    if not _DATE_RE.fullmatch(field):
        raise MalformedDateError(line)
    try:
        return date.fromisoformat(field)
    except ValueError as e:
        raise MalformedDateError(line) from e


def entry_description(line: str) -> str | None:
    """Text between the date separator and the status letter, or None if too short."""
    if len(line) < MIN_ENTRY_LENGTH:
        return None
    return line[DATE_LENGTH + 1 : -2].strip()


def parse_entry_line(line: str, catalog: Catalog | Iterable[Habit]) -> Entry | None:
    """Parse a log line against the catalog.

    Raises MalformedDateError for a bad date. Returns None for a blank line,
    an unknown description, or an unknown status letter.
    """
    line = line.strip()
    if not line:
        return None
    day = parse_entry_date(line)
    description = entry_description(line)
    if description is None:
        return None
    if not isinstance(catalog, Catalog):
        catalog = Catalog(catalog)
    habit_id = catalog.resolve(description)
    if habit_id is None:
        return None
    status = EntryStatus.from_habitctl(line[-1])
    if status is None:
        return None
    return Entry(date=day, habit_id=habit_id, status=status)
