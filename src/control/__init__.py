"""Request intake facade and process wiring."""

from .bootstrap import build_controller
from .controller import ElevatorController

__all__ = ["ElevatorController", "build_controller"]
