from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.catalog.applications import RouteCatalog
from services.catalog.handlers.response_models import to_route_data
from services.catalog.infrastructure.dynamodb_route_repository import (
    DynamoDBRouteRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import api_response, domain_error_response, error_response

logger = Logger()

repository = DynamoDBRouteRepository()
route_catalog = RouteCatalog(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """有効なルート一覧取得 Lambda Handler"""
    logger.info("Listing routes")

    try:
        routes = route_catalog.get_routes(active_only=True)
    except DomainException as e:
        logger.warning("Failed to list routes", extra={"error": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list routes")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    data = [to_route_data(route).model_dump() for route in routes]
    return api_response(200, {"status": "success", "data": {"routes": data, "count": len(data)}})
