from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from lift import Direction, ElevatorProtocol, InvalidArgumentError


@dataclass(frozen=True)
class FloorRequest:
    """A single hall call handed to a dispatcher and then discarded."""

    floor: int
    load_count: int
    direction: Direction

    def __post_init__(self) -> None:
        if self.floor < 1:
            raise InvalidArgumentError(f"Requested floor must be at least 1, got {self.floor}.")
        if self.load_count < 0:
            raise InvalidArgumentError(f"Load count must not be negative, got {self.load_count}.")
        if self.direction not in (Direction.UP, Direction.DOWN):
            raise InvalidArgumentError(f"Request direction must be Up or Down, got {self.direction!r}.")


class Dispatcher(Protocol):
    """Strategy interface for choosing the elevator that serves a request."""

    def dispatch_elevator(self, request: FloorRequest) -> ElevatorProtocol:
        """
        Return the elevator that should serve ``request``.

        Implementations raise ``InvalidOperationError`` when the building has
        no elevators or none of them can take the request.
        """
        ...
