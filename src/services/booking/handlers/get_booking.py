from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications import BookingQueryService
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
    """予約番号による予約状況照会 Lambda Handler"""
    booking_number = (event.path_parameters or {}).get("booking_number")
    if not booking_number:
        return error_response(400, "VALIDATION_ERROR", "booking_number is required")

    logger.info("Fetching booking", extra={"booking_number": booking_number})

    try:
        booking = service.get_by_booking_number(booking_number)
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, success_body(booking=to_booking_data(booking)))
