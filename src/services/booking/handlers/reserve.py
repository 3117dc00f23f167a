from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import BookingDraftController, BookingLedger
from services.booking.domain.enum import BookingType
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.identity import user_id_from_event
from services.booking.handlers.request_models import ReserveBookingRequest
from services.booking.handlers.response_models import (
    success_body,
    to_booking_data,
    to_fare_data,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.catalog.applications import RouteCatalog, TripAvailabilityIndex
from services.catalog.domain.value_object import RouteId
from services.catalog.infrastructure.dynamodb_route_repository import (
    DynamoDBRouteRepository,
)
from services.catalog.infrastructure.dynamodb_trip_repository import (
    DynamoDBTripRepository,
)
from services.shared.config import Settings
from services.shared.domain import DomainException, TripId
from services.shared.domain.identity import StaticIdentityProvider
from services.shared.utils import api_response, domain_error_response, error_response

logger = Logger()

settings = Settings.from_env()
route_catalog = RouteCatalog(repository=DynamoDBRouteRepository(settings=settings))
trip_index = TripAvailabilityIndex(repository=DynamoDBTripRepository(settings=settings))
ledger = BookingLedger(
    repository=DynamoDBBookingRepository(settings=settings), factory=BookingFactory()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """バス予約 Lambda Handler

    リクエストの内容でドラフトの各ステップを順に実行し、確定する。
    各ステップの検証（逆方向ルートの有無、候補便に含まれるか等）はそのまま適用される。
    """
    user_id = user_id_from_event(event)
    if user_id is None:
        return error_response(401, "UNAUTHORIZED", "Authentication required")

    try:
        request = ReserveBookingRequest.model_validate(
            event.json_body if event.body else {}
        )
    except ValidationError as e:
        return error_response(
            400, "VALIDATION_ERROR", "Invalid booking request", e.errors(include_url=False)
        )

    logger.info(
        "Received reserve booking request",
        extra={"route_id": request.route_id, "trip_type": request.trip_type},
    )

    controller = BookingDraftController(
        route_catalog=route_catalog,
        trip_index=trip_index,
        ledger=ledger,
        identity_provider=StaticIdentityProvider(user_id),
        max_passengers=settings.max_passengers,
    )

    try:
        controller.search(
            RouteId(value=request.route_id),
            request.departure_date,
            passenger_count=request.passenger_count,
            trip_type=BookingType(request.trip_type),
            return_date=request.return_date,
        )
        controller.select_outbound(TripId(value=request.outbound_trip_id))
        if request.return_trip_id is not None and controller.draft.is_round_trip:
            controller.select_return(TripId(value=request.return_trip_id))
        confirmation = controller.confirm(request.payment_method)
    except DomainException as e:
        logger.warning(
            "Booking rejected",
            extra={"step": controller.step.value, "error": str(e)},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to reserve booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(
        201,
        success_body(
            bookings=[to_booking_data(b) for b in confirmation.bookings],
            fare=to_fare_data(confirmation.fare_quote),
        ),
    )
