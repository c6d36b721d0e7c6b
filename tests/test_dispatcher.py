from __future__ import annotations

import pytest

from dispatch import FloorRequest, NearestElevatorDispatcher, can_handle, get_dispatcher
from lift import Direction, Elevator, FreightElevator, InvalidArgumentError, InvalidOperationError


def _request(floor: int, load: int) -> FloorRequest:
    return FloorRequest(floor=floor, load_count=load, direction=Direction.UP)


def _at(elevator, floor):
    elevator.move_to_floor(floor)
    return elevator


class TestEligibility:
    @pytest.mark.parametrize("load,expected", [(0, True), (10, True), (11, False), (150, False)])
    def test_passenger_threshold(self, passenger, load, expected):
        assert can_handle(passenger, _request(3, load)) is expected

    @pytest.mark.parametrize("load,expected", [(10, False), (100, False), (101, True), (900, True)])
    def test_freight_threshold(self, freight, load, expected):
        assert can_handle(freight, _request(3, load)) is expected

    def test_freight_never_serves_its_restricted_floor(self, freight):
        assert can_handle(freight, _request(5, 500)) is False

    def test_restriction_comes_from_the_instance(self):
        freight = FreightElevator(9, capacity=1000, max_floors=10, restricted_floors=[7])
        assert can_handle(freight, _request(5, 500)) is True
        assert can_handle(freight, _request(7, 500)) is False


class TestNearestDispatcher:
    def test_empty_building_fails(self, building):
        dispatcher = NearestElevatorDispatcher(building)
        with pytest.raises(InvalidOperationError, match="No elevators available"):
            dispatcher.dispatch_elevator(_request(3, 1))

    def test_heavy_load_goes_to_freight(self, building):
        passenger = _at(Elevator(1, 10, 10), 3)
        freight = _at(FreightElevator(2, 1000, 10, restricted_floors=[9]), 5)
        building.add_elevator(passenger)
        building.add_elevator(freight)

        chosen = NearestElevatorDispatcher(building).dispatch_elevator(_request(4, 150))
        assert chosen is freight

    def test_nearest_passenger_elevator_wins(self, building):
        low = _at(Elevator(1, 10, 10), 2)
        high = _at(Elevator(2, 10, 10), 9)
        building.add_elevator(high)
        building.add_elevator(low)

        chosen = NearestElevatorDispatcher(building).dispatch_elevator(_request(5, 1))
        assert chosen is low

    def test_equal_distance_keeps_registration_order(self, building):
        first = _at(Elevator(1, 10, 10), 2)
        second = _at(Elevator(2, 10, 10), 8)
        building.add_elevator(first)
        building.add_elevator(second)

        chosen = NearestElevatorDispatcher(building).dispatch_elevator(_request(5, 1))
        assert chosen is first

    def test_stationary_elevator_preferred_on_tie(self, building):
        moving = _at(Elevator(1, 10, 10), 4)
        moving.is_moving = True
        idle = _at(Elevator(2, 10, 10), 6)
        building.add_elevator(moving)
        building.add_elevator(idle)

        chosen = NearestElevatorDispatcher(building).dispatch_elevator(_request(5, 1))
        assert chosen is idle

    def test_no_suitable_elevator(self, building, passenger, freight):
        building.add_elevator(passenger)
        building.add_elevator(freight)
        dispatcher = NearestElevatorDispatcher(building)
        # too heavy for passengers, too light for freight
        with pytest.raises(InvalidOperationError, match="No suitable elevator found"):
            dispatcher.dispatch_elevator(_request(3, 50))

    def test_restricted_floor_leaves_no_candidate(self, building, freight):
        building.add_elevator(freight)
        with pytest.raises(InvalidOperationError):
            NearestElevatorDispatcher(building).dispatch_elevator(_request(5, 500))


class TestFloorRequest:
    @pytest.mark.parametrize(
        "floor,load,direction",
        [(0, 1, Direction.UP), (3, -1, Direction.UP), (3, 1, Direction.NONE)],
    )
    def test_invalid_requests_rejected(self, floor, load, direction):
        with pytest.raises(InvalidArgumentError):
            FloorRequest(floor=floor, load_count=load, direction=direction)


def test_registry_builds_nearest_dispatcher(building):
    assert isinstance(get_dispatcher("Nearest", building), NearestElevatorDispatcher)


def test_registry_rejects_unknown_name(building):
    with pytest.raises(InvalidArgumentError, match="Unknown dispatcher"):
        get_dispatcher("round_robin", building)


def test_dispatch_does_not_move_elevators(building, passenger):
    building.add_elevator(passenger)
    NearestElevatorDispatcher(building).dispatch_elevator(_request(7, 2))
    assert passenger.get_status().current_floor == 1
    assert passenger.get_status().load == 0
