from .draft import BookingDraft as BookingDraft
from .draft import ConfirmedDraft as ConfirmedDraft
from .draft import DraftStep as DraftStep
from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .enum import BookingType as BookingType
from .enum import PaymentStatus as PaymentStatus
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import FareCalculator as FareCalculator
from .service import FareQuote as FareQuote
from .value_object import BookingId as BookingId
from .value_object import BookingNumber as BookingNumber
from .value_object import OneWay as OneWay
from .value_object import RoundTripLeg as RoundTripLeg
from .value_object import SeatNumbers as SeatNumbers
