from __future__ import annotations

from typing import Optional

from dispatch import get_dispatcher
from lift import Building, BuildingConfig, ElevatorFactory, InvalidArgumentError, default_config

from .controller import ElevatorController


def build_controller(config: Optional[BuildingConfig] = None) -> ElevatorController:
    """Wire a building, its elevators and a dispatcher into a controller."""

    config = config or default_config()
    building = Building(num_floors=config.num_floors)
    factory = ElevatorFactory()
    for elevator_cfg in config.elevators:
        # every car must reach every floor a request can name
        if elevator_cfg.max_floors is not None and elevator_cfg.max_floors < config.num_floors:
            raise InvalidArgumentError(
                f"Elevator {elevator_cfg.elevator_id} serves {elevator_cfg.max_floors} floors "
                f"but the building has {config.num_floors}."
            )
        building.add_elevator(
            factory.create_elevator(
                elevator_cfg.elevator_type,
                elevator_cfg.elevator_id,
                elevator_cfg.capacity,
                elevator_cfg.max_floors or config.num_floors,
                restricted_floors=elevator_cfg.restricted_floors,
            )
        )
    dispatcher = get_dispatcher(config.dispatcher, building)
    return ElevatorController(dispatcher, building)
