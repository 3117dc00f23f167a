from datetime import date, time

from services.catalog.applications import TripAvailabilityIndex
from services.catalog.applications.trip_availability import (
    OUTBOUND_STATUSES,
    RETURN_STATUSES,
)
from services.catalog.domain.enum import TripStatus


class TestTripAvailabilityIndex:
    """TripAvailabilityIndex のテスト"""

    def test_outbound_trips_include_every_status_but_cancelled(
        self, mock_repository, create_route
    ):
        index = TripAvailabilityIndex(repository=mock_repository)
        mock_repository.find_trips.return_value = []

        index.find_outbound_trips(create_route(), date(2025, 12, 25))

        statuses = mock_repository.find_trips.call_args[0][2]
        assert statuses == OUTBOUND_STATUSES
        assert TripStatus.CANCELLED not in statuses
        assert TripStatus.IN_PROGRESS in statuses

    def test_return_trips_are_scheduled_only(self, mock_repository, create_route):
        index = TripAvailabilityIndex(repository=mock_repository)
        mock_repository.find_trips.return_value = []

        index.find_return_trips(create_route(), date(2025, 12, 28))

        statuses = mock_repository.find_trips.call_args[0][2]
        assert statuses == RETURN_STATUSES == frozenset({TripStatus.SCHEDULED})

    def test_trips_are_sorted_by_departure_time(
        self, mock_repository, create_route, create_trip
    ):
        mock_repository.find_trips.return_value = [
            create_trip(trip_id="late", departure_time=time(14, 0)),
            create_trip(trip_id="early", departure_time=time(6, 30)),
        ]
        index = TripAvailabilityIndex(repository=mock_repository)

        trips = index.find_outbound_trips(create_route(), date(2025, 12, 25))

        assert [str(t.id) for t in trips] == ["early", "late"]

    def test_no_trips(self, mock_repository, create_route):
        mock_repository.find_trips.return_value = []
        index = TripAvailabilityIndex(repository=mock_repository)

        assert index.find_outbound_trips(create_route(), date(2025, 12, 25)) == []
