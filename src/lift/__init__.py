"""Elevator entities and the building registry."""

from .building import Building
from .config import BuildingConfig, ElevatorConfig, default_config
from .elevator import DEFAULT_RESTRICTED_FLOORS, Elevator, FreightElevator
from .errors import ElevatorError, ErrorKind, InvalidArgumentError, InvalidOperationError, NotFoundError
from .factory import ElevatorFactory
from .interface import Direction, ElevatorProtocol, ElevatorStatus, ElevatorType

__all__ = [
    "Building",
    "BuildingConfig",
    "DEFAULT_RESTRICTED_FLOORS",
    "Direction",
    "Elevator",
    "ElevatorConfig",
    "ElevatorError",
    "ElevatorFactory",
    "ElevatorProtocol",
    "ElevatorStatus",
    "ElevatorType",
    "ErrorKind",
    "FreightElevator",
    "InvalidArgumentError",
    "InvalidOperationError",
    "NotFoundError",
    "default_config",
]
