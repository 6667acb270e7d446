"""habitctl import: legacy line parsers and the import pipeline."""

from chronic.habitctl.importer import (
    ImportReport,
    build_catalog,
    correlate,
    habitctl_installed,
    run_import,
)
from chronic.habitctl.parser import (
    Catalog,
    parse_entry_line,
    parse_habit_line,
    read_legacy_lines,
)

__all__ = [
    "Catalog",
    "ImportReport",
    "build_catalog",
    "correlate",
    "habitctl_installed",
    "parse_entry_line",
    "parse_habit_line",
    "read_legacy_lines",
    "run_import",
]
