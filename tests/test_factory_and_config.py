from __future__ import annotations

import pytest

from control import build_controller
from dispatch import NearestElevatorDispatcher
from lift import (
    BuildingConfig,
    Elevator,
    ElevatorConfig,
    ElevatorFactory,
    ElevatorType,
    FreightElevator,
    InvalidArgumentError,
    default_config,
)


class TestFactory:
    @pytest.mark.parametrize("tag", ["passenger", "Elevator", ElevatorType.PASSENGER])
    def test_passenger_tags(self, tag):
        elevator = ElevatorFactory().create_elevator(tag, 1, 10, 10)
        assert type(elevator) is Elevator

    @pytest.mark.parametrize("tag", ["freight", "FreightElevator", ElevatorType.FREIGHT])
    def test_freight_tags(self, tag):
        elevator = ElevatorFactory().create_elevator(tag, 2, 1000, 10)
        assert isinstance(elevator, FreightElevator)
        assert elevator.restricted_floors == frozenset({5})

    def test_freight_custom_restrictions(self):
        elevator = ElevatorFactory().create_elevator("freight", 2, 1000, 10, restricted_floors=[3, 8])
        assert elevator.restricted_floors == frozenset({3, 8})

    def test_unknown_tag(self):
        with pytest.raises(InvalidArgumentError, match="Unknown elevator type"):
            ElevatorFactory().create_elevator("PlaceholderElevator", 1, 10, 10)

    def test_passenger_cannot_have_restrictions(self):
        with pytest.raises(InvalidArgumentError):
            ElevatorFactory().create_elevator("passenger", 1, 10, 10, restricted_floors=[5])


class TestConfig:
    def test_from_dict(self):
        config = BuildingConfig.from_dict(
            {
                "num_floors": 12,
                "elevators": [
                    {"type": "passenger", "id": 1, "capacity": 8},
                    {"type": "freight", "id": 2, "capacity": 900, "max_floors": 6, "restricted_floors": [4]},
                ],
            }
        )
        assert config.num_floors == 12
        assert config.dispatcher == "nearest"
        assert config.elevators[1] == ElevatorConfig(ElevatorType.FREIGHT, 2, 900, max_floors=6, restricted_floors=[4])

    def test_missing_capacity(self):
        with pytest.raises(InvalidArgumentError, match="capacity"):
            ElevatorConfig.from_dict({"type": "passenger", "id": 1})

    def test_type_defaults_to_passenger(self):
        assert ElevatorConfig.from_dict({"id": 3, "capacity": 5}).elevator_type is ElevatorType.PASSENGER

    @pytest.mark.parametrize("field,value", [("id", "lobby"), ("capacity", "heavy"), ("capacity", None)])
    def test_non_numeric_values_rejected(self, field, value):
        data = {"type": "freight", "id": 2, "capacity": 500}
        data[field] = value
        with pytest.raises(InvalidArgumentError, match="must be integers"):
            ElevatorConfig.from_dict(data)


class TestBootstrap:
    def test_default_wiring(self):
        controller = build_controller()
        assert isinstance(controller.dispatcher, NearestElevatorDispatcher)
        assert controller.building.get_number_of_floors() == 10
        elevators = controller.building.get_elevators()
        assert [e.elevator_id for e in elevators] == [1, 2]
        assert [e.elevator_type for e in elevators] == [ElevatorType.PASSENGER, ElevatorType.FREIGHT]

    def test_max_floors_defaults_to_building(self):
        controller = build_controller(default_config())
        assert controller.building.get_elevator_by_id(1).max_floors == 10

    def test_explicit_max_floors(self):
        config = BuildingConfig(num_floors=8, elevators=[ElevatorConfig(ElevatorType.PASSENGER, 1, 10, max_floors=12)])
        controller = build_controller(config)
        assert controller.building.get_elevator_by_id(1).max_floors == 12

    def test_car_shorter_than_building_rejected(self):
        config = BuildingConfig(
            num_floors=8,
            elevators=[
                ElevatorConfig(ElevatorType.PASSENGER, 1, 10),
                ElevatorConfig(ElevatorType.PASSENGER, 2, 10, max_floors=4),
            ],
        )
        with pytest.raises(InvalidArgumentError, match="Elevator 2 serves 4 floors"):
            build_controller(config)

    def test_unknown_dispatcher(self):
        with pytest.raises(InvalidArgumentError):
            build_controller(BuildingConfig(dispatcher="zoned"))
