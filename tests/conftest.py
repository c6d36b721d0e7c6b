from __future__ import annotations

import pytest

from control import ElevatorController
from dispatch import NearestElevatorDispatcher
from lift import Building, Elevator, FreightElevator


@pytest.fixture
def building() -> Building:
    return Building(num_floors=10)


@pytest.fixture
def passenger() -> Elevator:
    return Elevator(1, capacity=10, max_floors=10)


@pytest.fixture
def freight() -> FreightElevator:
    return FreightElevator(2, capacity=1000, max_floors=10)


@pytest.fixture
def controller(building: Building, passenger: Elevator, freight: FreightElevator) -> ElevatorController:
    building.add_elevator(passenger)
    building.add_elevator(freight)
    return ElevatorController(NearestElevatorDispatcher(building), building)
