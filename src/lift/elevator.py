from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable

from .errors import InvalidArgumentError, InvalidOperationError
from .interface import Direction, ElevatorStatus, ElevatorType

logger = logging.getLogger(__name__)

DEFAULT_RESTRICTED_FLOORS: FrozenSet[int] = frozenset({5})


@dataclass(eq=False)
class Elevator:
    """A passenger elevator; load is counted in passengers.

    Moves complete atomically: ``is_moving`` is only True inside
    :meth:`move_to_floor` and is never observable from outside.
    """

    elevator_type: ClassVar[ElevatorType] = ElevatorType.PASSENGER
    load_unit: ClassVar[str] = "passengers"

    elevator_id: int
    capacity: int
    max_floors: int
    current_floor: int = field(default=1, init=False)
    current_load: int = field(default=0, init=False)
    direction: Direction = field(default=Direction.NONE, init=False)
    is_moving: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise InvalidArgumentError("Capacity must be a positive integer.")
        if self.max_floors <= 0:
            raise InvalidArgumentError("Max floors must be a positive integer.")

    def is_restricted(self, floor: int) -> bool:
        return False

    def move_to_floor(self, floor: int) -> None:
        self._validate_target(floor)

        if floor == self.current_floor:
            self.direction = Direction.NONE
            self.is_moving = False
            return

        self.direction = Direction.UP if floor > self.current_floor else Direction.DOWN
        self.is_moving = True
        logger.debug(
            "Elevator %s moving %s from floor %d to %d",
            self.elevator_id,
            self.direction.value,
            self.current_floor,
            floor,
        )
        self.current_floor = floor
        self.is_moving = False

    def add_load(self, amount: int) -> None:
        if amount < 0:
            raise InvalidArgumentError(f"Load must not be negative, got {amount}.")
        if self.current_load + amount > self.capacity:
            raise InvalidOperationError(
                f"Cannot add {amount} {self.load_unit} to elevator {self.elevator_id}: "
                f"exceeds capacity of {self.capacity}."
            )
        self.current_load += amount

    def remove_load(self, amount: int) -> None:
        if amount < 0:
            raise InvalidArgumentError(f"Load must not be negative, got {amount}.")
        if self.current_load - amount < 0:
            raise InvalidOperationError(
                f"Cannot remove {amount} {self.load_unit} from elevator {self.elevator_id}: "
                f"only {self.current_load} on board."
            )
        self.current_load -= amount

    def get_status(self) -> ElevatorStatus:
        return ElevatorStatus(
            elevator_id=self.elevator_id,
            elevator_type=self.elevator_type,
            current_floor=self.current_floor,
            direction=self.direction,
            is_moving=self.is_moving,
            load=self.current_load,
            capacity=self.capacity,
        )

    def _validate_target(self, floor: int) -> None:
        if floor < 1 or floor > self.max_floors:
            raise InvalidArgumentError(f"Floor must be between 1 and {self.max_floors}, got {floor}.")


@dataclass(eq=False)
class FreightElevator(Elevator):
    """A freight elevator; load is weight and some floors are off limits."""

    elevator_type: ClassVar[ElevatorType] = ElevatorType.FREIGHT
    load_unit: ClassVar[str] = "weight units"

    restricted_floors: Iterable[int] = DEFAULT_RESTRICTED_FLOORS

    def __post_init__(self) -> None:
        super().__post_init__()
        self.restricted_floors = frozenset(self.restricted_floors)

    def is_restricted(self, floor: int) -> bool:
        return floor in self.restricted_floors

    def _validate_target(self, floor: int) -> None:
        super()._validate_target(floor)
        # Must run before any state change.
        if self.is_restricted(floor):
            raise InvalidOperationError(f"Freight elevator {self.elevator_id} cannot access floor {floor}.")
