"""Habit catalog and date-partitioned log persistence.

Layout under the configured paths:

    habits.yaml          ordered list of {id, type, description}
    log/YYYY-MM-DD.yaml  entries recorded on that date

Every entry's habit_id refers to a habit in habits.yaml.
"""

import logging
from datetime import date
from pathlib import Path

from chronic.config import Config
from chronic.entries import Entry
from chronic.errors import StoreError
from chronic.habits import Habit
from chronic.storage import git_commit, read_yaml_list, write_yaml

log = logging.getLogger(__name__)

PARTITION_SUFFIX = ".yaml"


def is_initialized(config: Config) -> bool:
    return config.habits_file.is_file() and config.log_dir.is_dir()


def partition_path(config: Config, day: date) -> Path:
    return config.log_dir / f"{day.isoformat()}{PARTITION_SUFFIX}"


def _as_date(day: date | str) -> date:
    if isinstance(day, date):
        return day
    try:
        return date.fromisoformat(day)
    except ValueError as e:
        raise StoreError(f"invalid date {day!r} (expected YYYY-MM-DD)") from e


def clear_partitions(config: Config) -> int:
    """Delete every partition file. Returns the number removed."""
    if not config.log_dir.is_dir():
        return 0
    removed = 0
    for filepath in config.log_dir.glob(f"*{PARTITION_SUFFIX}"):
        try:
            filepath.unlink()
        except OSError as e:
            raise StoreError(f"cannot remove {filepath}: {e}") from e
        removed += 1
    log.info("removed %d existing log partition(s)", removed)
    return removed


def persist(config: Config, catalog: list[Habit], partitions: dict[date, list[Entry]]) -> None:
    """Write the catalog and one file per date, overwriting what is there."""
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreError(f"cannot create {config.log_dir}: {e}") from e

    write_yaml(config.habits_file, [h.to_dict() for h in catalog])
    written = 0
    for day, entries in partitions.items():
        if not entries:
            continue
        write_yaml(partition_path(config, day), [e.to_dict() for e in entries])
        written += 1
    log.info("wrote %d habit(s) and %d log partition(s)", len(catalog), written)
    git_commit(config.data_dir, [config.habits_file, config.log_dir], "import habitctl store")


def load_catalog(config: Config) -> list[Habit]:
    records = read_yaml_list(config.habits_file)
    try:
        return [Habit.from_dict(r) for r in records]
    except (KeyError, ValueError, TypeError) as e:
        raise StoreError(f"{config.habits_file}: malformed habit record: {e}") from e


def load_entries(config: Config, day: date | str) -> list[Entry]:
    """Entries for one date. A date without a partition file is an error."""
    filepath = partition_path(config, _as_date(day))
    records = read_yaml_list(filepath)
    try:
        return [Entry.from_dict(r) for r in records]
    except (KeyError, ValueError, TypeError) as e:
        raise StoreError(f"{filepath}: malformed entry record: {e}") from e


def list_log_dates(config: Config) -> list[date]:
    if not config.log_dir.is_dir():
        return []
    dates: list[date] = []
    for filepath in config.log_dir.glob(f"*{PARTITION_SUFFIX}"):
        try:
            dates.append(date.fromisoformat(filepath.stem))
        except ValueError:
            log.warning("Skipping unrecognized log file: %s", filepath)
    return sorted(dates)
