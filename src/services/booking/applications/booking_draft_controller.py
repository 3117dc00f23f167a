from dataclasses import dataclass
from datetime import date

from aws_lambda_powertools import Logger

from services.booking.applications.booking_ledger import BookingLedger
from services.booking.domain.draft import (
    STEP_ORDER,
    BookingDraft,
    ConfirmedDraft,
    DraftStep,
)
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingType
from services.booking.domain.service import FareCalculator, FareQuote
from services.catalog.applications import RouteCatalog, TripAvailabilityIndex
from services.catalog.domain.entity import Trip
from services.catalog.domain.value_object import RouteId
from services.shared.domain import IdentityProvider, TripId
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InsufficientSeatsException,
    InvalidDraftStepException,
    NoReversedRouteException,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)

DEFAULT_PAYMENT_METHOD = "card"


@dataclass(frozen=True)
class BookingConfirmation:
    """確定結果（作成した予約と運賃内訳）"""

    bookings: list[Booking]
    fare_quote: FareQuote


class BookingDraftController:
    """予約ドラフトのステートマシン

    Search -> SelectOutbound -> (SelectReturn) -> Confirm の順に進める。
    ledger を渡さない場合は検索・選択・見積りのみ行える。
    各ステップでは検証に失敗した場合ステップを進めず例外を送出する。
    確定に成功するとドラフトを破棄して Search に戻る。
    """

    def __init__(
        self,
        route_catalog: RouteCatalog,
        trip_index: TripAvailabilityIndex,
        identity_provider: IdentityProvider,
        ledger: BookingLedger | None = None,
        fare_calculator: FareCalculator | None = None,
        max_passengers: int = 5,
    ) -> None:
        self._route_catalog = route_catalog
        self._trip_index = trip_index
        self._ledger = ledger
        self._identity_provider = identity_provider
        self._fare_calculator = fare_calculator or FareCalculator()
        self._max_passengers = max_passengers

        self._step = DraftStep.SEARCH
        self._draft = BookingDraft()

    @property
    def step(self) -> DraftStep:
        return self._step

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    def search(
        self,
        route_id: RouteId | None,
        departure_date: date | None,
        passenger_count: int = 1,
        trip_type: BookingType = BookingType.ONE_WAY,
        return_date: date | None = None,
    ) -> list[Trip]:
        """条件を検証し、往路の候補便を返す

        どのステップからでも呼び出せる。成功時は以前の選択を破棄する。
        候補便が0件でもエラーにはせず、空リストを返す。
        """
        if route_id is None:
            raise ValidationException("Route is required")
        if departure_date is None:
            raise ValidationException("Departure date is required")
        if not 1 <= passenger_count <= self._max_passengers:
            raise ValidationException(
                f"Passenger count must be between 1 and {self._max_passengers}"
            )

        route = self._route_catalog.find_route(route_id)
        if route is None or not route.is_active:
            raise ValidationException(f"Route is not available: {route_id}")

        reversed_route = None
        if trip_type == BookingType.ROUND_TRIP:
            if return_date is None:
                raise ValidationException("Return date is required for a round trip")
            if return_date < departure_date:
                raise ValidationException("Return date cannot be before departure date")
            reversed_route = self._route_catalog.find_reversed_route(route)
            if reversed_route is None:
                raise NoReversedRouteException(
                    str(route.id), route.origin, route.destination
                )
        else:
            return_date = None

        candidates = self._trip_index.find_outbound_trips(route, departure_date)

        self._draft = BookingDraft(
            trip_type=trip_type,
            passenger_count=passenger_count,
            route=route,
            reversed_route=reversed_route,
            departure_date=departure_date,
            return_date=return_date,
            outbound_candidates=candidates,
        )
        self._move_to(DraftStep.SELECT_OUTBOUND)

        if not candidates:
            logger.info(
                "No trips available for this route and date",
                extra={"route_id": str(route_id), "date": departure_date.isoformat()},
            )
        return list(candidates)

    def select_outbound(self, trip_id: TripId) -> list[Trip]:
        """往路便を選択する

        往復なら復路の候補便を返して SelectReturn へ、片道なら Confirm へ進む。
        """
        self._require_step("select an outbound trip", DraftStep.SELECT_OUTBOUND)
        trip = self._pick(trip_id, self._draft.outbound_candidates)

        if not self._draft.is_round_trip:
            self._draft.outbound_trip = trip
            self._move_to(DraftStep.CONFIRM)
            return []

        if self._draft.reversed_route is None or self._draft.return_date is None:
            raise BusinessRuleViolationException("Round trip draft is incomplete")
        return_candidates = self._trip_index.find_return_trips(
            self._draft.reversed_route, self._draft.return_date
        )
        self._draft.outbound_trip = trip
        self._draft.return_candidates = return_candidates
        self._move_to(DraftStep.SELECT_RETURN)
        return list(return_candidates)

    def select_return(self, trip_id: TripId) -> None:
        """復路便を選択して Confirm へ進む"""
        self._require_step("select a return trip", DraftStep.SELECT_RETURN)
        self._draft.return_trip = self._pick(trip_id, self._draft.return_candidates)
        self._move_to(DraftStep.CONFIRM)

    def quote(self) -> FareQuote:
        """現在の選択内容の運賃を計算する"""
        self._require_step("quote fares", DraftStep.CONFIRM)
        if self._draft.route is None:
            raise BusinessRuleViolationException("Draft has no route")
        return self._fare_calculator.quote(
            self._draft.route,
            self._draft.passenger_count,
            self._draft.reversed_route if self._draft.is_round_trip else None,
        )

    def confirm(self, payment_method: str = DEFAULT_PAYMENT_METHOD) -> BookingConfirmation:
        """予約を確定する

        失敗時は Confirm に留まり、例外をそのまま送出する。
        """
        self._require_step("confirm", DraftStep.CONFIRM)
        if not payment_method or not payment_method.strip():
            raise ValidationException("Payment method is required")
        if self._ledger is None:
            raise BusinessRuleViolationException("Booking ledger is not configured")

        fare_quote = self.quote()
        draft = self._draft
        if draft.route is None or draft.outbound_trip is None:
            raise BusinessRuleViolationException("Draft has no outbound trip")

        confirmed = ConfirmedDraft(
            user_id=self._identity_provider.current_user_id(),
            outbound_route=draft.route,
            outbound_trip=draft.outbound_trip,
            passenger_count=draft.passenger_count,
            payment_method=payment_method,
            fare_quote=fare_quote,
            return_route=draft.reversed_route if draft.is_round_trip else None,
            return_trip=draft.return_trip if draft.is_round_trip else None,
        )

        try:
            bookings = self._ledger.create(confirmed)
        except Exception:
            logger.warning("Booking confirmation failed", extra={"step": self._step.value})
            raise

        self.reset()
        return BookingConfirmation(bookings=bookings, fare_quote=fare_quote)

    def back(self, step: DraftStep) -> None:
        """前のステップに戻り、それ以降の入力を破棄する"""
        if STEP_ORDER.index(step) > STEP_ORDER.index(self._step):
            raise InvalidDraftStepException(f"go back to {step.value}", self._step.value)
        if step == DraftStep.SELECT_RETURN and not self._draft.is_round_trip:
            raise InvalidDraftStepException(f"go back to {step.value}", self._step.value)
        self._draft.clear_after(step)
        self._move_to(step)

    def reset(self) -> None:
        """ドラフトを破棄して Search に戻る"""
        self._draft = BookingDraft()
        self._move_to(DraftStep.SEARCH)

    def _pick(self, trip_id: TripId, candidates: list[Trip]) -> Trip:
        trip = next((t for t in candidates if t.id == trip_id), None)
        if trip is None:
            raise ResourceNotFoundException(f"Trip is not among the candidates: {trip_id}")
        if trip.available_seats < self._draft.passenger_count:
            raise InsufficientSeatsException(str(trip.id), self._draft.passenger_count)
        return trip

    def _require_step(self, operation: str, step: DraftStep) -> None:
        if self._step != step:
            raise InvalidDraftStepException(operation, self._step.value)

    def _move_to(self, step: DraftStep) -> None:
        if step != self._step:
            logger.debug(
                "Draft step changed",
                extra={"from_step": self._step.value, "to_step": step.value},
            )
        self._step = step
