from .booking_status import BookingStatus as BookingStatus
from .booking_type import BookingType as BookingType
from .payment_status import PaymentStatus as PaymentStatus
