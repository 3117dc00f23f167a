import pytest

from services.booking.domain.enum import BookingStatus, BookingType
from services.booking.domain.value_object import BookingId, RoundTripLeg
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidBookingStateException,
)


class TestBooking:
    """Booking Entity のテスト"""

    def test_one_way_booking(self, create_booking):
        booking = create_booking(passenger_count=2)

        assert booking.is_one_way()
        assert booking.booking_type == BookingType.ONE_WAY
        assert booking.linked_booking_id is None
        assert not booking.is_return_leg
        assert booking.passenger_count == 2

    def test_round_trip_leg(self, create_booking):
        booking = create_booking(
            leg=RoundTripLeg(linked_booking_id=BookingId(value="booking-2"), is_return_leg=True)
        )

        assert not booking.is_one_way()
        assert booking.booking_type == BookingType.ROUND_TRIP
        assert booking.linked_booking_id == BookingId(value="booking-2")
        assert booking.is_return_leg

    def test_link_to_itself_raises_error(self, create_booking):
        with pytest.raises(BusinessRuleViolationException):
            create_booking(
                booking_id="booking-1",
                leg=RoundTripLeg(
                    linked_booking_id=BookingId(value="booking-1"), is_return_leg=False
                ),
            )

    def test_confirm_pending_booking(self, create_booking):
        """PENDING状態の予約をconfirmするとCONFIRMED状態になる"""
        booking = create_booking(status=BookingStatus.PENDING)
        booking.confirm("card")
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.payment_method == "card"

    def test_confirm_without_payment_method_raises_error(self, create_booking):
        booking = create_booking(status=BookingStatus.PENDING)
        with pytest.raises(BusinessRuleViolationException):
            booking.confirm(" ")
        assert booking.status == BookingStatus.PENDING

    def test_cancel_confirmed_booking(self, create_booking):
        booking = create_booking(status=BookingStatus.CONFIRMED)
        cancelled_at = IsoDateTime.from_string("2025-12-20T10:00:00+00:00")

        booking.cancel("Change of plans", cancelled_at)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation_reason == "Change of plans"
        assert booking.cancelled_at == cancelled_at

    @pytest.mark.parametrize("status", [BookingStatus.CANCELLED, BookingStatus.COMPLETED])
    def test_cannot_cancel_closed_booking(self, create_booking, status):
        """キャンセル済み・完了済みの予約は InvalidBookingStateException"""
        booking = create_booking(status=status)
        with pytest.raises(InvalidBookingStateException):
            booking.cancel(None, IsoDateTime.now())
        assert booking.status == status

    def test_cannot_confirm_cancelled_booking(self, create_booking):
        booking = create_booking(status=BookingStatus.CANCELLED)
        with pytest.raises(InvalidBookingStateException):
            booking.confirm("card")

    def test_cannot_confirm_twice(self, create_booking):
        booking = create_booking(status=BookingStatus.CONFIRMED)
        with pytest.raises(BusinessRuleViolationException):
            booking.confirm("card")
