from __future__ import annotations

from typing import Tuple

from lift import ElevatorProtocol, ElevatorType

from .interface import FloorRequest

# Domain constants, not configuration.
PASSENGER_MAX_LOAD = 10
FREIGHT_MIN_LOAD = 100


def can_handle(elevator: ElevatorProtocol, request: FloorRequest) -> bool:
    """Decide whether an elevator variant may serve a request.

    Passenger cars take small groups only; freight cars take heavy loads only
    and never a floor the car itself reports as restricted.
    """

    if elevator.elevator_type is ElevatorType.PASSENGER:
        return request.load_count <= PASSENGER_MAX_LOAD
    if elevator.elevator_type is ElevatorType.FREIGHT:
        return request.load_count > FREIGHT_MIN_LOAD and not elevator.is_restricted(request.floor)
    return False


def dispatch_order(elevator: ElevatorProtocol, request: FloorRequest) -> Tuple[int, bool]:
    """Sort key: nearest first, then stationary before moving."""

    status = elevator.get_status()
    return abs(status.current_floor - request.floor), status.is_moving
