from .booking_draft_controller import BookingConfirmation as BookingConfirmation
from .booking_draft_controller import (
    BookingDraftController as BookingDraftController,
)
from .booking_ledger import BookingLedger as BookingLedger
from .booking_queries import BookingQueryService as BookingQueryService
from .cancel_booking import CancellationCoordinator as CancellationCoordinator
