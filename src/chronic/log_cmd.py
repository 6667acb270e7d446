"""CLI handlers for `chronic habits` and `chronic log`."""

import argparse
from datetime import date
from uuid import UUID

from chronic.config import Config, today
from chronic.entries import Entry
from chronic.errors import StoreError
from chronic.habits import Habit
from chronic.store import list_log_dates, load_catalog, load_entries

_STATUS_MARK = {
    "completed": "[x]",
    "not_completed": "[ ]",
    "skipped": "[-]",
}


def _fmt_entry(entry: Entry, names: dict[UUID, str], width: int) -> str:
    name = names.get(entry.habit_id, f"<unknown habit {entry.habit_id}>")
    return f"  {_STATUS_MARK[entry.status.value]}  {name:{width}s}  {entry.status.value}"


def _fmt_habit(habit: Habit) -> str:
    return f"  {str(habit.id)[:8]}  {habit.type.value:10s}  {habit.description}"


def run_habits_command(argv: list[str], config: Config) -> None:
    parser = argparse.ArgumentParser(prog="chronic habits")
    parser.parse_args(argv)

    habits = load_catalog(config)
    if not habits:
        print("no habits")
        return
    for habit in habits:
        print(_fmt_habit(habit))


def run_log_command(argv: list[str], config: Config) -> None:
    parser = argparse.ArgumentParser(prog="chronic log")
    parser.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--dates", action="store_true", help="List dates that have entries")
    args = parser.parse_args(argv)

    if args.dates:
        dates = list_log_dates(config)
        if not dates:
            print("no log entries")
            return
        for day in dates:
            print(f"  {day.isoformat()}")
        return

    day: date | str = args.date or today(config.tz)
    if isinstance(day, str) and len(day) != 10:
        raise StoreError(f"invalid date {day!r} (expected YYYY-MM-DD)")
    entries = load_entries(config, day)
    if not entries:
        print("no entries")
        return
    names = {h.id: h.description for h in load_catalog(config)}
    width = max((len(names.get(e.habit_id, "")) for e in entries), default=0)
    for entry in entries:
        print(_fmt_entry(entry, names, width))
