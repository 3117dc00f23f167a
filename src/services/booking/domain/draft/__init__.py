from .booking_draft import STEP_ORDER as STEP_ORDER
from .booking_draft import BookingDraft as BookingDraft
from .booking_draft import ConfirmedDraft as ConfirmedDraft
from .booking_draft import DraftStep as DraftStep
