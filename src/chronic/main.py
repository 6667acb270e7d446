"""Entry point for chronic."""

import logging
import os
import sys

from chronic.config import Config
from chronic.errors import ChronicError
from chronic.store import is_initialized

HELP = """\
chronic -- habit tracker with a date-partitioned log

commands:
  chronic                    First run: offer to import a habitctl store
  chronic import             Import habitctl habits and log
  chronic habits             Show the habit catalog
  chronic log [DATE]         Show entries for a date (default: today)
  chronic log --dates        List dates that have entries
  chronic help               Show this help message

options:
  chronic import --yes       Skip the confirmation prompt
  chronic import --force     Replace an existing store

environment (also read from .env):
  CHRONIC_DIR                Store location (default ~/.chronic)
  HABITCTL_DIR               habitctl location (default ~/.habitctl)
  CHRONIC_TIMEZONE           IANA zone used for "today"
  CHRONIC_LOG_LEVEL          Logging level (default WARNING)
"""

log = logging.getLogger(__name__)


def _setup_logging() -> None:
    level = os.environ.get("CHRONIC_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _dispatch_subcommand(config: Config) -> bool:
    """Route CLI subcommands. Returns True if handled."""
    if len(sys.argv) < 2:
        return False
    cmd = sys.argv[1]
    rest = sys.argv[2:]
    if cmd in ("help", "--help", "-h"):
        print(HELP)
        return True
    routes: dict[str, tuple[str, str]] = {
        "import": ("chronic.habitctl.import_cmd", "run_import_command"),
        "habits": ("chronic.log_cmd", "run_habits_command"),
        "log": ("chronic.log_cmd", "run_log_command"),
    }
    if cmd in routes:
        from importlib import import_module

        mod_path, func_name = routes[cmd]
        getattr(import_module(mod_path), func_name)(rest, config)
        return True
    print(f"unknown command: {cmd}\n")
    print(HELP)
    raise SystemExit(1)


def main() -> None:
    _setup_logging()
    try:
        config = Config.from_env()
        if _dispatch_subcommand(config):
            return
        if is_initialized(config):
            print(HELP)
            return

        from chronic.habitctl.import_cmd import first_run

        first_run(config)
    except ChronicError as e:
        log.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
