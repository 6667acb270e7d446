"""Import a habitctl store into chronic's catalog and date-partitioned log."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from chronic.config import Config
from chronic.entries import Entry, partition_by_date
from chronic.errors import MalformedDateError, StoreError
from chronic.habitctl.parser import (
    Catalog,
    entry_description,
    parse_entry_line,
    parse_habit_line,
    read_legacy_lines,
)
from chronic.habits import Habit
from chronic.store import clear_partitions, is_initialized, persist

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ImportReport:
    habits: int = 0
    entries: int = 0
    partitions: int = 0
    skipped_habit_lines: int = 0
    unmatched_entry_lines: int = 0
    bad_status_lines: int = 0
    short_entry_lines: int = 0

    @property
    def skipped(self) -> int:
        return (
            self.skipped_habit_lines
            + self.unmatched_entry_lines
            + self.bad_status_lines
            + self.short_entry_lines
        )


def habitctl_installed(config: Config) -> bool:
    return config.legacy_habits_file.is_file() and config.legacy_log_file.is_file()


def build_catalog(lines: Iterable[str], report: ImportReport | None = None) -> list[Habit]:
    """One habit per accepted line, each with a fresh id, in file order."""
    habits: list[Habit] = []
    for line in lines:
        habit = parse_habit_line(line)
        if habit is None:
            if line.strip():
                log.debug("skipping habit line with unknown cadence: %r", line)
                if report is not None:
                    report.skipped_habit_lines += 1
            continue
        habits.append(habit)
    return habits


def _count_skip(line: str, catalog: Catalog, report: ImportReport | None) -> None:
    description = entry_description(line)
    if description is None:
        reason = "too short"
        field = "short_entry_lines"
    elif catalog.resolve(description) is None:
        reason = "no matching habit"
        field = "unmatched_entry_lines"
    else:
        reason = "unknown status"
        field = "bad_status_lines"
    log.debug("skipping log line (%s): %r", reason, line)
    if report is not None:
        setattr(report, field, getattr(report, field) + 1)


def correlate(
    log_lines: Iterable[str],
    catalog: list[Habit],
    report: ImportReport | None = None,
    *,
    source: Path | None = None,
) -> list[Entry]:
    """Resolve each log line to an entry bound to a habit id.

    Lines that do not resolve are dropped. A malformed date aborts with
    MalformedDateError naming the offending line.
    """
    index = Catalog(catalog)
    entries: list[Entry] = []
    for lineno, line in enumerate(log_lines, start=1):
        try:
            entry = parse_entry_line(line, index)
        except MalformedDateError as e:
            raise MalformedDateError(e.line, lineno=lineno, path=source) from e
        if entry is None:
            stripped = line.strip()
            if stripped:
                _count_skip(stripped, index, report)
            continue
        entries.append(entry)
    return entries


def run_import(config: Config, *, force: bool = False) -> ImportReport:
    """Read the habitctl store and write a fresh chronic store.

    Refuses an initialized store unless force is set. Any log partitions
    already on disk are removed first: the new catalog has fresh ids, so
    they could not resolve to it.
    """
    if is_initialized(config) and not force:
        raise StoreError(f"{config.habits_file} already exists; use --force to replace it")

    report = ImportReport()
    catalog = build_catalog(read_legacy_lines(config.legacy_habits_file), report)
    entries = correlate(
        read_legacy_lines(config.legacy_log_file),
        catalog,
        report,
        source=config.legacy_log_file,
    )
    partitions = partition_by_date(entries)

    clear_partitions(config)
    persist(config, catalog, partitions)

    report.habits = len(catalog)
    report.entries = len(entries)
    report.partitions = len(partitions)
    if report.skipped:
        log.info("skipped %d legacy line(s) during import", report.skipped)
    return report
