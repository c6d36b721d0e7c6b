from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .errors import InvalidArgumentError


class Direction(str, Enum):
    UP = "Up"
    DOWN = "Down"
    NONE = "None"

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Parse a requested travel direction.

        Only ``Up`` and ``Down`` are valid for a request; ``None`` describes an
        idle elevator and cannot be asked for.
        """

        if isinstance(value, Direction):
            direction = value
        else:
            text = str(value).strip().lower()
            direction = next((d for d in cls if d.value.lower() == text), cls.NONE)
        if direction is cls.NONE:
            raise InvalidArgumentError(f"Direction must be 'Up' or 'Down', got {value!r}.")
        return direction


class ElevatorType(str, Enum):
    PASSENGER = "passenger"
    FREIGHT = "freight"

    @classmethod
    def parse(cls, value: "str | ElevatorType") -> "ElevatorType":
        if isinstance(value, ElevatorType):
            return value
        tag = str(value).strip().lower()
        aliases = {
            "passenger": cls.PASSENGER,
            "elevator": cls.PASSENGER,
            "passengerelevator": cls.PASSENGER,
            "freight": cls.FREIGHT,
            "freightelevator": cls.FREIGHT,
        }
        elevator_type = aliases.get(tag)
        if elevator_type is None:
            raise InvalidArgumentError(f"Unknown elevator type '{value}'. Available: passenger, freight")
        return elevator_type


@dataclass(frozen=True)
class ElevatorStatus:
    """Immutable view of an elevator, built fresh on every query."""

    elevator_id: int
    elevator_type: ElevatorType
    current_floor: int
    direction: Direction
    is_moving: bool
    load: int
    capacity: int

    @property
    def available_capacity(self) -> int:
        return max(0, self.capacity - self.load)

    def to_dict(self) -> dict:
        return {
            "id": self.elevator_id,
            "type": self.elevator_type.value,
            "current_floor": self.current_floor,
            "direction": self.direction.value,
            "is_moving": self.is_moving,
            "load": self.load,
            "capacity": self.capacity,
        }


class ElevatorProtocol(Protocol):
    """Capability set every dispatchable elevator provides."""

    @property
    def elevator_id(self) -> int:
        ...

    @property
    def elevator_type(self) -> ElevatorType:
        ...

    def move_to_floor(self, floor: int) -> None:
        ...

    def add_load(self, amount: int) -> None:
        ...

    def remove_load(self, amount: int) -> None:
        ...

    def is_restricted(self, floor: int) -> bool:
        """Return True if this elevator may never service ``floor``."""
        ...

    def get_status(self) -> ElevatorStatus:
        ...
