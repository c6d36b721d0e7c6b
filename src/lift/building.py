from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import InvalidArgumentError, NotFoundError
from .interface import ElevatorProtocol

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Building:
    """Registry of elevators for a building with a fixed number of floors.

    Elevators are kept in registration order; they hold no reference back to
    the building.
    """

    num_floors: int
    _elevators: List[ElevatorProtocol] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.num_floors <= 0:
            raise InvalidArgumentError("Number of floors must be a positive integer.")

    @property
    def elevators(self) -> Tuple[ElevatorProtocol, ...]:
        return tuple(self._elevators)

    def add_elevator(self, elevator: ElevatorProtocol) -> None:
        if any(existing.elevator_id == elevator.elevator_id for existing in self._elevators):
            # Lookups resolve to the first registration.
            logger.warning("Elevator id %s is already registered; lookups return the first one", elevator.elevator_id)
        self._elevators.append(elevator)
        logger.info(
            "Registered %s elevator %s (%d total)",
            elevator.elevator_type.value,
            elevator.elevator_id,
            len(self._elevators),
        )

    def get_elevators(self) -> Tuple[ElevatorProtocol, ...]:
        return self.elevators

    def get_elevator_by_id(self, elevator_id: int) -> ElevatorProtocol:
        if elevator_id < 0:
            raise InvalidArgumentError(f"Elevator id must not be negative, got {elevator_id}.")
        for elevator in self._elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        raise NotFoundError(f"Elevator with id {elevator_id} not found.")

    def get_number_of_floors(self) -> int:
        return self.num_floors

    def snapshot(self) -> dict:
        return {
            "num_floors": self.num_floors,
            "elevators": [elevator.get_status().to_dict() for elevator in self._elevators],
        }
