from .booking_id import BookingId as BookingId
from .booking_leg import BookingLeg as BookingLeg
from .booking_leg import OneWay as OneWay
from .booking_leg import RoundTripLeg as RoundTripLeg
from .booking_number import BookingNumber as BookingNumber
from .seat_numbers import SeatNumbers as SeatNumbers
