from dataclasses import dataclass
from typing import Union

from services.booking.domain.enum import BookingType

from .booking_id import BookingId


@dataclass(frozen=True)
class OneWay:
    """片道予約（リンク先を持たない）"""

    @property
    def booking_type(self) -> BookingType:
        return BookingType.ONE_WAY


@dataclass(frozen=True)
class RoundTripLeg:
    """往復予約の片道分

    linked_booking_id は対になるもう一方の予約を指す。
    """

    linked_booking_id: BookingId
    is_return_leg: bool

    @property
    def booking_type(self) -> BookingType:
        return BookingType.ROUND_TRIP


BookingLeg = Union[OneWay, RoundTripLeg]
