from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import InvalidArgumentError
from .interface import ElevatorType


@dataclass
class ElevatorConfig:
    """Construction parameters for a single elevator."""

    elevator_type: ElevatorType
    elevator_id: int
    capacity: int
    max_floors: Optional[int] = None  # defaults to the building floor count
    restricted_floors: Optional[List[int]] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "ElevatorConfig":
        try:
            elevator_id = data["id"]
            capacity = data["capacity"]
        except KeyError as exc:
            raise InvalidArgumentError(f"Elevator config is missing '{exc.args[0]}'.") from exc
        try:
            elevator_id = int(elevator_id)
            capacity = int(capacity)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Elevator id and capacity must be integers, got id={elevator_id!r}, capacity={capacity!r}."
            ) from exc
        restricted = data.get("restricted_floors")
        return cls(
            elevator_type=ElevatorType.parse(data.get("type", ElevatorType.PASSENGER)),
            elevator_id=elevator_id,
            capacity=capacity,
            max_floors=data.get("max_floors"),
            restricted_floors=list(restricted) if restricted is not None else None,
        )


@dataclass
class BuildingConfig:
    """Everything needed to wire a building, its elevators and a dispatcher."""

    num_floors: int = 10
    dispatcher: str = "nearest"
    elevators: List[ElevatorConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "BuildingConfig":
        return cls(
            num_floors=int(data.get("num_floors", 10)),
            dispatcher=data.get("dispatcher", "nearest"),
            elevators=[ElevatorConfig.from_dict(e) for e in data.get("elevators", [])],
        )


def default_config() -> BuildingConfig:
    """Ten floors served by one passenger and one freight elevator."""

    return BuildingConfig(
        num_floors=10,
        elevators=[
            ElevatorConfig(ElevatorType.PASSENGER, elevator_id=1, capacity=10),
            ElevatorConfig(ElevatorType.FREIGHT, elevator_id=2, capacity=1000, restricted_floors=[5]),
        ],
    )
