"""Log entry data model and date partitioning."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable
from uuid import UUID


class EntryStatus(Enum):
    COMPLETED = "completed"
    NOT_COMPLETED = "not_completed"
    SKIPPED = "skipped"

    @staticmethod
    def from_habitctl(code: str) -> "EntryStatus | None":
        """Map habitctl's trailing status letter; None for anything else."""
        return _HABITCTL_STATUS.get(code)


_HABITCTL_STATUS = {
    "y": EntryStatus.COMPLETED,
    "n": EntryStatus.NOT_COMPLETED,
    "s": EntryStatus.SKIPPED,
}


@dataclass(frozen=True, slots=True)
class Entry:
    date: date
    habit_id: UUID
    status: EntryStatus

    def to_dict(self) -> dict[str, str]:
        return {
            "date": self.date.isoformat(),
            "habit_id": str(self.habit_id),
            "status": self.status.value,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Entry":
        raw_date = data["date"]
        # yaml.safe_load turns an unquoted YYYY-MM-DD into a date already
        day = raw_date if isinstance(raw_date, date) else date.fromisoformat(str(raw_date))
        return Entry(
            date=day,
            habit_id=UUID(str(data["habit_id"])),
            status=EntryStatus(data["status"]),
        )


def partition_by_date(entries: Iterable[Entry]) -> dict[date, list[Entry]]:
    """Group entries by date, keeping their original order within each date."""
    partitions: dict[date, list[Entry]] = {}
    for entry in entries:
        partitions.setdefault(entry.date, []).append(entry)
    return partitions
