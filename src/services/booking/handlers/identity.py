from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain import UserId


def user_id_from_event(event: APIGatewayProxyEvent) -> UserId | None:
    """Cognito オーソライザーの claims から利用者IDを取り出す"""
    authorizer = event.raw_event.get("requestContext", {}).get("authorizer") or {}
    claims = authorizer.get("claims") or {}
    sub = claims.get("sub")
    if not sub:
        return None
    return UserId(value=sub)
