from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    BookingLeg,
    BookingNumber,
    OneWay,
    SeatNumbers,
)
from services.catalog.domain.entity import Route, Trip
from services.catalog.domain.enum import TripStatus
from services.catalog.domain.value_object import RouteId
from services.shared.domain import IsoDateTime, Money, TripId, UserId


@pytest.fixture
def trip_id():
    """全テスト共通の TripId フィクスチャ"""
    return TripId(value="trip-123")


@pytest.fixture
def user_id():
    return UserId(value="user-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_route():
    """Route を生成する Factory fixture"""

    def _factory(
        route_id: str = "route-lagos-abuja",
        origin: str = "Lagos",
        destination: str = "Abuja",
        base_fare: Decimal = Decimal("15000"),
        is_active: bool = True,
    ) -> Route:
        return Route(
            id=RouteId(value=route_id),
            origin=origin,
            destination=destination,
            base_fare=Money.ngn(base_fare),
            is_active=is_active,
        )

    return _factory


@pytest.fixture
def create_trip():
    """Trip を生成する Factory fixture"""

    def _factory(
        trip_id: str = "trip-123",
        route_id: str = "route-lagos-abuja",
        trip_date: date = date(2025, 12, 25),
        departure_time: time = time(8, 0),
        status: TripStatus = TripStatus.SCHEDULED,
        available_seats: int = 40,
    ) -> Trip:
        return Trip(
            id=TripId(value=trip_id),
            route_id=RouteId(value=route_id),
            trip_date=trip_date,
            departure_time=departure_time,
            arrival_time=time(16, 0),
            status=status,
            available_seats=available_seats,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        booking_number: str = "BK20251201-0000000A",
        user_id: str = "user-123",
        trip_id: str = "trip-123",
        passenger_count: int = 1,
        fare_amount: Decimal = Decimal("15000"),
        leg: BookingLeg | None = None,
        booked_at: str = "2025-12-01T09:00:00+00:00",
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            booking_number=BookingNumber(value=booking_number),
            user_id=UserId(value=user_id),
            trip_id=TripId(value=trip_id),
            seat_numbers=SeatNumbers.for_passengers(passenger_count),
            total_fare=Money.ngn(fare_amount),
            leg=leg or OneWay(),
            booked_at=IsoDateTime.from_string(booked_at),
            status=status,
            payment_method="card",
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    aws_request_id: str = "request-id"
    tenant_id: str | None = None


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()
