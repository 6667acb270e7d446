"""User-configurable paths loaded from environment variables.

Nothing here is read at import time; callers build a Config and pass it
down to the pipeline.
"""

import os
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from chronic.errors import ConfigError


def _detect_local_tz() -> str:
    """Detect the system's IANA timezone name. Falls back to UTC."""
    # Debian/Ubuntu: plain text file with IANA name
    etc_tz = Path("/etc/timezone")
    if etc_tz.exists():
        name = etc_tz.read_text().strip()
        if name:
            return name

    # Most Linux/WSL: /etc/localtime is a symlink into zoneinfo
    localtime = Path("/etc/localtime")
    if localtime.is_symlink():
        target = str(localtime.resolve())
        marker = "/zoneinfo/"
        idx = target.find(marker)
        if idx != -1:
            return target[idx + len(marker) :]

    return "UTC"


def _path(var: str, default: Path) -> Path:
    value = os.environ.get(var)
    return Path(value).expanduser() if value else default


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"unknown timezone {name!r} (set CHRONIC_TIMEZONE to an IANA name)") from e


@dataclass(frozen=True, slots=True)
class Config:
    legacy_habits_file: Path
    legacy_log_file: Path
    habits_file: Path
    log_dir: Path
    tz: ZoneInfo = ZoneInfo("UTC")

    @property
    def data_dir(self) -> Path:
        return self.habits_file.parent

    @staticmethod
    def from_dirs(data_dir: Path, legacy_dir: Path, *, tz: ZoneInfo | None = None) -> "Config":
        """Default file layout under a chronic dir and a habitctl dir."""
        return Config(
            legacy_habits_file=legacy_dir / "habits",
            legacy_log_file=legacy_dir / "log",
            habits_file=data_dir / "habits.yaml",
            log_dir=data_dir / "log",
            tz=tz or ZoneInfo("UTC"),
        )

    @staticmethod
    def from_env() -> "Config":
        load_dotenv()
        data_dir = _path("CHRONIC_DIR", Path.home() / ".chronic")
        legacy_dir = _path("HABITCTL_DIR", Path.home() / ".habitctl")
        return Config(
            legacy_habits_file=_path("HABITCTL_HABITS_FILE", legacy_dir / "habits"),
            legacy_log_file=_path("HABITCTL_LOG_FILE", legacy_dir / "log"),
            habits_file=_path("CHRONIC_HABITS_FILE", data_dir / "habits.yaml"),
            log_dir=_path("CHRONIC_LOG_DIR", data_dir / "log"),
            tz=_zone(os.environ.get("CHRONIC_TIMEZONE") or _detect_local_tz()),
        )


def today(tz: ZoneInfo) -> date:
    return datetime.now(tz).date()
