from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import CancellationCoordinator
from services.booking.domain.value_object import BookingId
from services.booking.handlers.identity import user_id_from_event
from services.booking.handlers.request_models import CancelBookingRequest
from services.booking.handlers.response_models import success_body, to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, domain_error_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = CancellationCoordinator(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler

    往復予約の場合はリンク先もキャンセルする。片方のみ成功した場合は
    502 を返し、details に未キャンセルの予約IDを含める。
    """
    user_id = user_id_from_event(event)
    if user_id is None:
        return error_response(401, "UNAUTHORIZED", "Authentication required")

    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return error_response(400, "VALIDATION_ERROR", "booking_id is required")

    try:
        request = CancelBookingRequest.model_validate(
            event.json_body if event.body else {}
        )
    except ValidationError as e:
        return error_response(
            400, "VALIDATION_ERROR", "Invalid cancel request", e.errors(include_url=False)
        )

    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    try:
        cancelled = service.cancel(
            BookingId(value=booking_id), reason=request.reason, user_id=user_id
        )
    except DomainException as e:
        logger.warning(
            "Booking cancellation failed",
            extra={"booking_id": booking_id, "error": str(e)},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to cancel booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(
        200, success_body(bookings=[to_booking_data(b) for b in cancelled])
    )
