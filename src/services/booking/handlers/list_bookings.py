from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications import BookingQueryService
from services.booking.handlers.identity import user_id_from_event
from services.booking.handlers.response_models import success_body, to_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, domain_error_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = BookingQueryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """自分の予約一覧取得 Lambda Handler"""
    user_id = user_id_from_event(event)
    if user_id is None:
        return error_response(401, "UNAUTHORIZED", "Authentication required")

    logger.info("Listing bookings for user")

    try:
        bookings = service.list_for_user(user_id)
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list bookings")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(
        200,
        success_body(
            bookings=[to_booking_data(b) for b in bookings], count=len(bookings)
        ),
    )
