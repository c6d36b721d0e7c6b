from __future__ import annotations

import logging
from typing import List

from lift import Building, ElevatorProtocol, InvalidOperationError

from .eligibility import can_handle, dispatch_order
from .interface import FloorRequest

logger = logging.getLogger(__name__)


class NearestElevatorDispatcher:
    """Sends the closest eligible elevator, preferring idle ones on ties."""

    def __init__(self, building: Building) -> None:
        self.building = building

    def dispatch_elevator(self, request: FloorRequest) -> ElevatorProtocol:
        elevators = self.building.get_elevators()
        if not elevators:
            raise InvalidOperationError("No elevators available.")

        candidates: List[ElevatorProtocol] = [e for e in elevators if can_handle(e, request)]
        logger.debug(
            "Request for floor %d (load %d): %d of %d elevators eligible",
            request.floor,
            request.load_count,
            len(candidates),
            len(elevators),
        )
        if not candidates:
            raise InvalidOperationError("No suitable elevator found.")

        # sorted() is stable, so equal keys keep registration order
        chosen = sorted(candidates, key=lambda e: dispatch_order(e, request))[0]
        logger.info("Dispatching elevator %s to floor %d", chosen.elevator_id, request.floor)
        return chosen
