"""Habit data model.

A habit is created once, when the habitctl catalog is imported, and never
changes afterwards. Entries point at it by id only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID, uuid4


class HabitType(Enum):
    JUST_TRACK = "just_track"
    DAILY = "daily"
    WEEKLY = "weekly"

    @staticmethod
    def from_habitctl(code: str) -> "HabitType | None":
        """Map habitctl's leading cadence digit; None for anything else."""
        return _HABITCTL_CADENCE.get(code)


_HABITCTL_CADENCE = {
    "0": HabitType.JUST_TRACK,
    "1": HabitType.DAILY,
    "7": HabitType.WEEKLY,
}


@dataclass(frozen=True, slots=True)
class Habit:
    id: UUID
    type: HabitType
    description: str

    @staticmethod
    def new(type: HabitType, description: str) -> "Habit":
        return Habit(id=uuid4(), type=type, description=description)

    def to_dict(self) -> dict[str, str]:
        return {"id": str(self.id), "type": self.type.value, "description": self.description}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Habit":
        return Habit(
            id=UUID(str(data["id"])),
            type=HabitType(data["type"]),
            description=str(data["description"]),
        )
