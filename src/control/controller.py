from __future__ import annotations

import logging
from typing import List

from dispatch import Dispatcher, FloorRequest
from lift import Building, Direction, ElevatorProtocol, ElevatorStatus, InvalidArgumentError

logger = logging.getLogger(__name__)


class ElevatorController:
    """Entry point for request intake and status display.

    Raw input is validated here before the dispatcher is touched; everything
    past that point is validated by the component that owns the invariant.
    """

    def __init__(self, dispatcher: Dispatcher, building: Building) -> None:
        self.dispatcher = dispatcher
        self.building = building

    def request_elevator(self, from_floor: int, load_count: int, direction: "str | Direction") -> ElevatorProtocol:
        """Dispatch an elevator to ``from_floor`` and board ``load_count``.

        The top floor is not a valid origin: requests must satisfy
        ``1 <= from_floor < number_of_floors``. An elevator's own
        ``move_to_floor`` still accepts its top floor.
        """

        num_floors = self.building.get_number_of_floors()
        if from_floor < 1 or from_floor >= num_floors:
            raise InvalidArgumentError(f"Floor must be between 1 and {num_floors - 1}, got {from_floor}.")
        if load_count < 0:
            raise InvalidArgumentError(f"Load count must not be negative, got {load_count}.")
        parsed_direction = Direction.parse(direction)

        request = FloorRequest(floor=from_floor, load_count=load_count, direction=parsed_direction)
        elevator = self.dispatcher.dispatch_elevator(request)
        elevator.move_to_floor(from_floor)
        elevator.add_load(load_count)
        logger.info(
            "Elevator %s picked up %d at floor %d heading %s",
            elevator.elevator_id,
            load_count,
            from_floor,
            parsed_direction.value,
        )
        return elevator

    def get_elevator_status(self, elevator_id: int) -> ElevatorStatus:
        if elevator_id < 0:
            raise InvalidArgumentError(f"Elevator id must not be negative, got {elevator_id}.")
        return self.building.get_elevator_by_id(elevator_id).get_status()

    def release_load(self, elevator_id: int, amount: int) -> ElevatorStatus:
        elevator = self.building.get_elevator_by_id(elevator_id)
        elevator.remove_load(amount)
        logger.info("Elevator %s released %d at floor %d", elevator_id, amount, elevator.get_status().current_floor)
        return elevator.get_status()

    def get_all_statuses(self) -> List[ElevatorStatus]:
        return [elevator.get_status() for elevator in self.building.get_elevators()]
