from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking
from services.booking.domain.service import FareQuote


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    booking_number: str
    trip_id: str
    seat_numbers: list[int]
    passenger_count: int
    total_fare_amount: str
    total_fare_currency: str
    booking_type: str
    is_return_leg: bool
    linked_booking_id: str | None
    status: str
    payment_status: str
    payment_method: str | None
    booked_at: str
    cancelled_at: str | None
    cancellation_reason: str | None


class FareData(BaseModel):
    """運賃内訳のレスポンスモデル"""

    outbound_fare: str
    return_fare: str | None
    total: str
    currency: str


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        booking_number=str(booking.booking_number),
        trip_id=str(booking.trip_id),
        seat_numbers=list(booking.seat_numbers.values),
        passenger_count=booking.passenger_count,
        total_fare_amount=str(booking.total_fare.amount),
        total_fare_currency=str(booking.total_fare.currency),
        booking_type=booking.booking_type.value,
        is_return_leg=booking.is_return_leg,
        linked_booking_id=(
            str(booking.linked_booking_id) if booking.linked_booking_id else None
        ),
        status=booking.status.value,
        payment_status=booking.payment_status.value,
        payment_method=booking.payment_method,
        booked_at=str(booking.booked_at),
        cancelled_at=str(booking.cancelled_at) if booking.cancelled_at else None,
        cancellation_reason=booking.cancellation_reason,
    )


def to_fare_data(quote: FareQuote) -> FareData:
    return FareData(
        outbound_fare=str(quote.outbound_fare.amount),
        return_fare=str(quote.return_fare.amount) if quote.return_fare else None,
        total=str(quote.total.amount),
        currency=str(quote.total.currency),
    )


def success_body(**data: object) -> dict:
    """成功レスポンスのボディ"""
    return {"status": "success", "data": _dump(data)}


def _dump(value: object) -> object:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value
