"""CLI handler for `chronic import` and the first-run import prompt."""

import argparse
from collections.abc import Callable

from chronic.config import Config
from chronic.habitctl.importer import ImportReport, habitctl_installed, run_import
from chronic.store import is_initialized

NAME = "chronic"


def confirm(question: str, *, input_fn: Callable[[str], str] = input) -> bool:
    """Ask a Y/n question until the answer is y, n, or empty (yes).

    End of input counts as no.
    """
    print(f"{question} (Y/n)")
    while True:
        try:
            answer = input_fn("").strip().lower()
        except EOFError:
            return False
        if answer in ("", "y"):
            return True
        if answer == "n":
            return False
        print("Invalid response.")


def _fmt_report(report: ImportReport) -> str:
    text = (
        f"imported {report.habits} habit(s) and {report.entries} entr"
        f"{'y' if report.entries == 1 else 'ies'} across {report.partitions} day(s)"
    )
    if report.skipped:
        text += f" -- skipped {report.skipped} line(s)"
    return text


def _do_import(config: Config, *, force: bool = False) -> None:
    report = run_import(config, force=force)
    print(_fmt_report(report))
    if report.skipped:
        print(f"  unknown cadence:     {report.skipped_habit_lines}")
        print(f"  no matching habit:   {report.unmatched_entry_lines}")
        print(f"  unknown status:      {report.bad_status_lines}")
        print(f"  too short:           {report.short_entry_lines}")


def first_run(config: Config, *, input_fn: Callable[[str], str] = input) -> None:
    """Welcome a new user and offer to import an existing habitctl store."""
    print(f"Welcome to {NAME}!")
    if not habitctl_installed(config):
        print(f"No habitctl installation found at {config.legacy_habits_file.parent}")
        return
    print(f"A habitctl installation has been detected in {config.legacy_habits_file.parent}")
    if confirm(f"Would you like to import it into {NAME}?", input_fn=input_fn):
        _do_import(config)


def run_import_command(argv: list[str], config: Config) -> None:
    parser = argparse.ArgumentParser(prog="chronic import")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Replace an existing chronic store (deletes its log)",
    )
    args = parser.parse_args(argv)

    if is_initialized(config) and args.force:
        print(f"This replaces the habits and log in {config.data_dir}.")
    if not args.yes and not confirm(
        f"Import habitctl data from {config.legacy_habits_file.parent}?"
    ):
        print("import cancelled")
        return
    _do_import(config, force=args.force)
