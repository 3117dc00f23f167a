from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import BookingDraftController
from services.booking.domain.enum import BookingType
from services.booking.handlers.identity import user_id_from_event
from services.booking.handlers.request_models import SearchTripsRequest
from services.booking.handlers.response_models import success_body
from services.catalog.applications import RouteCatalog, TripAvailabilityIndex
from services.catalog.domain.value_object import RouteId
from services.catalog.handlers.response_models import to_route_data, to_trip_data
from services.catalog.infrastructure.dynamodb_route_repository import (
    DynamoDBRouteRepository,
)
from services.catalog.infrastructure.dynamodb_trip_repository import (
    DynamoDBTripRepository,
)
from services.shared.config import Settings
from services.shared.domain import DomainException, TripId, UserId
from services.shared.domain.identity import StaticIdentityProvider
from services.shared.utils import api_response, domain_error_response, error_response

logger = Logger()

settings = Settings.from_env()
route_catalog = RouteCatalog(repository=DynamoDBRouteRepository(settings=settings))
trip_index = TripAvailabilityIndex(repository=DynamoDBTripRepository(settings=settings))

# 検索は書き込みを行わないため、未認証時はゲストとして扱う
GUEST = UserId(value="guest")


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運行便検索 Lambda Handler

    outbound_trip_id を指定した場合は、往路便を選択した状態の復路候補を返す。
    """
    try:
        request = SearchTripsRequest.model_validate(event.query_string_parameters or {})
    except ValidationError as e:
        return error_response(
            400, "VALIDATION_ERROR", "Invalid search parameters", e.errors(include_url=False)
        )

    logger.info("Searching trips", extra={"route_id": request.route_id})

    controller = BookingDraftController(
        route_catalog=route_catalog,
        trip_index=trip_index,
        identity_provider=StaticIdentityProvider(user_id_from_event(event) or GUEST),
        max_passengers=settings.max_passengers,
    )

    try:
        outbound = controller.search(
            RouteId(value=request.route_id),
            request.departure_date,
            passenger_count=request.passenger_count,
            trip_type=BookingType(request.trip_type),
            return_date=request.return_date,
        )
        if request.outbound_trip_id is None:
            return api_response(
                200,
                success_body(
                    step=controller.step.value,
                    route=to_route_data(controller.draft.route),
                    trips=[to_trip_data(trip) for trip in outbound],
                ),
            )

        returns = controller.select_outbound(TripId(value=request.outbound_trip_id))
        reversed_route = controller.draft.reversed_route
        return api_response(
            200,
            success_body(
                step=controller.step.value,
                route=to_route_data(reversed_route) if reversed_route else None,
                trips=[to_trip_data(trip) for trip in returns],
            ),
        )
    except DomainException as e:
        logger.warning("Trip search rejected", extra={"error": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to search trips")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")
