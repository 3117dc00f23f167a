from services.booking.domain.enum import BookingStatus, BookingType, PaymentStatus
from services.booking.domain.value_object import (
    BookingId,
    BookingLeg,
    BookingNumber,
    OneWay,
    RoundTripLeg,
    SeatNumbers,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money, TripId, UserId
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidBookingStateException,
)


class Booking(AggregateRoot[BookingId]):
    """バス予約（1便・1レグ分）

    往復予約は RoundTripLeg を持つ2件の Booking として表現する。
    """

    def __init__(
        self,
        id: BookingId,
        booking_number: BookingNumber,
        user_id: UserId,
        trip_id: TripId,
        seat_numbers: SeatNumbers,
        total_fare: Money,
        leg: BookingLeg,
        booked_at: IsoDateTime,
        status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        payment_method: str | None = None,
        cancellation_reason: str | None = None,
        cancelled_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        self._booking_number = booking_number
        self._user_id = user_id
        self._trip_id = trip_id
        self._seat_numbers = seat_numbers
        self._total_fare = total_fare
        self._leg = leg
        self._booked_at = booked_at
        self._status = status
        self._payment_status = payment_status
        self._payment_method = payment_method
        self._cancellation_reason = cancellation_reason
        self._cancelled_at = cancelled_at

        self._validate_link()

    def _validate_link(self) -> None:
        """自分自身へのリンクは不可"""
        if isinstance(self._leg, RoundTripLeg) and self._leg.linked_booking_id == self.id:
            raise BusinessRuleViolationException("Booking cannot be linked to itself")

    @property
    def booking_number(self) -> BookingNumber:
        return self._booking_number

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def trip_id(self) -> TripId:
        return self._trip_id

    @property
    def seat_numbers(self) -> SeatNumbers:
        return self._seat_numbers

    @property
    def passenger_count(self) -> int:
        return len(self._seat_numbers)

    @property
    def total_fare(self) -> Money:
        """このレグのみの運賃"""
        return self._total_fare

    @property
    def leg(self) -> BookingLeg:
        return self._leg

    @property
    def booking_type(self) -> BookingType:
        return self._leg.booking_type

    @property
    def linked_booking_id(self) -> BookingId | None:
        if isinstance(self._leg, RoundTripLeg):
            return self._leg.linked_booking_id
        return None

    @property
    def is_return_leg(self) -> bool:
        return isinstance(self._leg, RoundTripLeg) and self._leg.is_return_leg

    @property
    def booked_at(self) -> IsoDateTime:
        return self._booked_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def payment_method(self) -> str | None:
        return self._payment_method

    @property
    def cancellation_reason(self) -> str | None:
        return self._cancellation_reason

    @property
    def cancelled_at(self) -> IsoDateTime | None:
        return self._cancelled_at

    def is_one_way(self) -> bool:
        return isinstance(self._leg, OneWay)

    def confirm(self, payment_method: str) -> None:
        """支払い方法を記録して予約を確定する"""
        if not payment_method or not payment_method.strip():
            raise BusinessRuleViolationException(
                "Payment method is required to confirm a booking"
            )
        self._transition(BookingStatus.CONFIRMED)
        self._payment_method = payment_method.strip()

    def cancel(self, reason: str | None, cancelled_at: IsoDateTime) -> None:
        """予約をキャンセルする

        キャンセル済み・完了済みの予約は InvalidBookingStateException。
        """
        self._transition(BookingStatus.CANCELLED)
        self._cancellation_reason = reason
        self._cancelled_at = cancelled_at

    def _transition(self, target: BookingStatus) -> None:
        if self._status.is_terminal:
            raise InvalidBookingStateException(str(self.id), self._status.value)
        if not self._status.can_transition_to(target):
            raise BusinessRuleViolationException(
                f"Cannot change booking status from {self._status.value} to {target.value}"
            )
        self._status = target
