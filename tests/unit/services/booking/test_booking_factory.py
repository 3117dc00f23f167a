from decimal import Decimal

import pytest

from services.booking.domain.draft import ConfirmedDraft
from services.booking.domain.enum import BookingStatus, BookingType
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service import FareCalculator
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class TestBookingFactory:
    """BookingFactory のテスト"""

    @pytest.fixture
    def routes(self, create_route):
        outbound = create_route(base_fare=Decimal("15000"))
        reverse = create_route(
            route_id="route-abuja-lagos",
            origin="Abuja",
            destination="Lagos",
            base_fare=Decimal("12000"),
        )
        return outbound, reverse

    def test_create_one_way(self, user_id, create_route, create_trip):
        route = create_route()
        trip = create_trip()
        draft = ConfirmedDraft(
            user_id=user_id,
            outbound_route=route,
            outbound_trip=trip,
            passenger_count=2,
            payment_method="card",
            fare_quote=FareCalculator().quote(route, 2),
        )
        booked_at = IsoDateTime.from_string("2025-12-01T09:00:00+00:00")

        bookings = BookingFactory().create(draft, booked_at=booked_at)

        assert len(bookings) == 1
        booking = bookings[0]
        assert booking.is_one_way()
        assert booking.trip_id == trip.id
        assert booking.user_id == user_id
        assert booking.seat_numbers.values == (1, 2)
        assert booking.total_fare == Money.ngn(Decimal("30000"))
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.payment_method == "card"
        assert str(booking.booking_number).startswith("BK20251201-")

    def test_create_linked_pair(self, user_id, routes, create_trip):
        """往復の2件は互いを参照し、復路側のみ is_return_leg"""
        outbound_route, reverse_route = routes
        outbound_trip = create_trip(trip_id="trip-out")
        return_trip = create_trip(trip_id="trip-ret", route_id="route-abuja-lagos")
        draft = ConfirmedDraft(
            user_id=user_id,
            outbound_route=outbound_route,
            outbound_trip=outbound_trip,
            passenger_count=1,
            payment_method="card",
            fare_quote=FareCalculator().quote(outbound_route, 1, reverse_route),
            return_route=reverse_route,
            return_trip=return_trip,
        )

        outbound, inbound = BookingFactory().create(draft)

        assert outbound.booking_type == inbound.booking_type == BookingType.ROUND_TRIP
        assert outbound.linked_booking_id == inbound.id
        assert inbound.linked_booking_id == outbound.id
        assert not outbound.is_return_leg
        assert inbound.is_return_leg
        assert outbound.trip_id == outbound_trip.id
        assert inbound.trip_id == return_trip.id
        assert outbound.total_fare == Money.ngn(Decimal("15000"))
        assert inbound.total_fare == Money.ngn(Decimal("12000"))
        assert outbound.booking_number != inbound.booking_number
        assert outbound.booked_at == inbound.booked_at

    def test_confirmed_draft_requires_return_route_with_return_trip(
        self, user_id, routes, create_trip
    ):
        outbound_route, _ = routes
        with pytest.raises(ValueError):
            ConfirmedDraft(
                user_id=user_id,
                outbound_route=outbound_route,
                outbound_trip=create_trip(),
                passenger_count=1,
                payment_method="card",
                fare_quote=FareCalculator().quote(outbound_route, 1),
                return_trip=create_trip(trip_id="trip-ret"),
            )

    def test_round_trip_without_return_fare(self, user_id, routes, create_trip):
        """片道の見積りで往復予約は作成できない"""
        outbound_route, reverse_route = routes
        draft = ConfirmedDraft(
            user_id=user_id,
            outbound_route=outbound_route,
            outbound_trip=create_trip(trip_id="trip-out"),
            passenger_count=1,
            payment_method="card",
            fare_quote=FareCalculator().quote(outbound_route, 1),
            return_route=reverse_route,
            return_trip=create_trip(trip_id="trip-ret", route_id="route-abuja-lagos"),
        )

        with pytest.raises(BusinessRuleViolationException):
            BookingFactory().create(draft)
