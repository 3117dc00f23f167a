from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from services.booking.domain.enum import BookingType
from services.booking.domain.service import FareQuote
from services.catalog.domain.entity import Route, Trip
from services.shared.domain import UserId


class DraftStep(str, Enum):
    """予約ドラフトの入力ステップ"""

    SEARCH = "search"
    SELECT_OUTBOUND = "select_outbound"
    SELECT_RETURN = "select_return"
    CONFIRM = "confirm"


# 戻る操作で参照するステップの順序
STEP_ORDER: tuple[DraftStep, ...] = (
    DraftStep.SEARCH,
    DraftStep.SELECT_OUTBOUND,
    DraftStep.SELECT_RETURN,
    DraftStep.CONFIRM,
)


@dataclass
class BookingDraft:
    """確定前の入力状態"""

    trip_type: BookingType = BookingType.ONE_WAY
    passenger_count: int = 1
    route: Route | None = None
    reversed_route: Route | None = None
    departure_date: date | None = None
    return_date: date | None = None
    outbound_candidates: list[Trip] = field(default_factory=list)
    outbound_trip: Trip | None = None
    return_candidates: list[Trip] = field(default_factory=list)
    return_trip: Trip | None = None

    @property
    def is_round_trip(self) -> bool:
        return self.trip_type == BookingType.ROUND_TRIP

    def clear_after(self, step: DraftStep) -> None:
        """step より後で収集した状態を破棄する"""
        if step == DraftStep.SEARCH:
            self.route = None
            self.reversed_route = None
            self.departure_date = None
            self.return_date = None
            self.outbound_candidates = []
        if step in (DraftStep.SEARCH, DraftStep.SELECT_OUTBOUND):
            self.outbound_trip = None
            self.return_candidates = []
        if step != DraftStep.CONFIRM:
            self.return_trip = None


@dataclass(frozen=True)
class ConfirmedDraft:
    """台帳に渡す確定済みの入力"""

    user_id: UserId
    outbound_route: Route
    outbound_trip: Trip
    passenger_count: int
    payment_method: str
    fare_quote: FareQuote
    return_route: Route | None = None
    return_trip: Trip | None = None

    def __post_init__(self) -> None:
        if (self.return_route is None) != (self.return_trip is None):
            raise ValueError("Return route and return trip must be given together")
        if self.passenger_count < 1:
            raise ValueError("Passenger count must be at least 1")

    @property
    def is_round_trip(self) -> bool:
        return self.return_trip is not None
