from __future__ import annotations

from typing import Callable, Dict

from lift import Building, InvalidArgumentError

from .eligibility import FREIGHT_MIN_LOAD, PASSENGER_MAX_LOAD, can_handle
from .interface import Dispatcher, FloorRequest
from .nearest import NearestElevatorDispatcher

__all__ = [
    "Dispatcher",
    "FREIGHT_MIN_LOAD",
    "FloorRequest",
    "NearestElevatorDispatcher",
    "PASSENGER_MAX_LOAD",
    "can_handle",
    "get_dispatcher",
]


DISPATCHER_REGISTRY: Dict[str, Callable[[Building], Dispatcher]] = {
    "nearest": NearestElevatorDispatcher,
}


def get_dispatcher(name: str, building: Building) -> Dispatcher:
    factory = DISPATCHER_REGISTRY.get(name.lower())
    if factory is None:
        raise InvalidArgumentError(f"Unknown dispatcher '{name}'. Available: {', '.join(DISPATCHER_REGISTRY)}")
    return factory(building)
