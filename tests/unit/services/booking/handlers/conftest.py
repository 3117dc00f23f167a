import json

import pytest


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        user_sub: str | None = "user-123",
    ) -> dict:
        authorizer = {"claims": {"sub": user_sub}} if user_sub else None
        return {
            "resource": "/bookings",
            "path": "/bookings",
            "httpMethod": "POST",
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "requestContext": {"requestId": "request-id", "authorizer": authorizer},
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
