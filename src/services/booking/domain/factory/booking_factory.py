from services.booking.domain.draft import ConfirmedDraft
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    BookingLeg,
    BookingNumber,
    OneWay,
    RoundTripLeg,
    SeatNumbers,
)
from services.catalog.domain.entity import Trip
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class BookingFactory:
    """確定済みドラフトから予約エンティティを生成するファクトリ

    - 予約ID・予約番号の採番
    - 座席番号（乗客連番）の割り当て
    - 往復予約の相互リンク
    """

    def create(
        self, draft: ConfirmedDraft, booked_at: IsoDateTime | None = None
    ) -> list[Booking]:
        """片道なら1件、往復なら往路・復路の2件を返す"""
        booked_at = booked_at or IsoDateTime.now()

        return_trip = draft.return_trip
        if return_trip is None:
            return [
                self._build(
                    draft,
                    BookingId.generate(),
                    draft.outbound_trip,
                    draft.fare_quote.outbound_fare,
                    OneWay(),
                    booked_at,
                )
            ]

        return_fare = draft.fare_quote.return_fare
        if return_fare is None:
            raise BusinessRuleViolationException("Round trip quote has no return fare")

        outbound_id = BookingId.generate()
        return_id = BookingId.generate()
        outbound = self._build(
            draft,
            outbound_id,
            draft.outbound_trip,
            draft.fare_quote.outbound_fare,
            RoundTripLeg(linked_booking_id=return_id, is_return_leg=False),
            booked_at,
        )
        inbound = self._build(
            draft,
            return_id,
            return_trip,
            return_fare,
            RoundTripLeg(linked_booking_id=outbound_id, is_return_leg=True),
            booked_at,
        )
        return [outbound, inbound]

    def _build(
        self,
        draft: ConfirmedDraft,
        booking_id: BookingId,
        trip: Trip,
        fare: Money,
        leg: BookingLeg,
        booked_at: IsoDateTime,
    ) -> Booking:
        booking = Booking(
            id=booking_id,
            booking_number=BookingNumber.generate(booked_at.value),
            user_id=draft.user_id,
            trip_id=trip.id,
            seat_numbers=SeatNumbers.for_passengers(draft.passenger_count),
            total_fare=fare,
            leg=leg,
            booked_at=booked_at,
            status=BookingStatus.PENDING,
        )
        booking.confirm(draft.payment_method)
        return booking
