from __future__ import annotations

from typing import Iterable, Optional

from .elevator import DEFAULT_RESTRICTED_FLOORS, Elevator, FreightElevator
from .errors import InvalidArgumentError
from .interface import ElevatorType


class ElevatorFactory:
    """Builds elevator variants from a type tag."""

    def create_elevator(
        self,
        elevator_type: "ElevatorType | str",
        elevator_id: int,
        capacity: int,
        max_floors: int,
        restricted_floors: Optional[Iterable[int]] = None,
    ) -> Elevator:
        kind = ElevatorType.parse(elevator_type)
        if kind is ElevatorType.FREIGHT:
            floors = DEFAULT_RESTRICTED_FLOORS if restricted_floors is None else restricted_floors
            return FreightElevator(elevator_id, capacity, max_floors, restricted_floors=floors)
        if restricted_floors:
            raise InvalidArgumentError("Passenger elevators do not support restricted floors.")
        return Elevator(elevator_id, capacity, max_floors)
