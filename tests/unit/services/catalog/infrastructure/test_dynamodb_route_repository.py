from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from services.catalog.domain.value_object import RouteId
from services.catalog.infrastructure.dynamodb_route_repository import (
    DynamoDBRouteRepository,
    route_lookup_key,
)
from services.shared.config import Settings
from services.shared.domain import Currency


def _route_item(route_id: str, origin: str, destination: str, is_active: bool = True) -> dict:
    return {
        "PK": f"ROUTE#{route_id}",
        "SK": "ROUTE",
        "route_id": route_id,
        "origin": origin,
        "destination": destination,
        "base_fare_amount": "15000",
        "base_fare_currency": "NGN",
        "is_active": is_active,
        "GSI1PK": "ROUTES",
        "GSI1SK": route_lookup_key(origin, destination),
    }


class TestDynamoDBRouteRepository:
    """DynamoDBRouteRepository のテスト"""

    @pytest.fixture
    def repository(self):
        with patch(
            "services.catalog.infrastructure.dynamodb_route_repository.dynamodb_resource"
        ) as resource:
            resource.return_value.Table.return_value = MagicMock()
            yield DynamoDBRouteRepository(settings=Settings(table_name="BookingTable"))

    def test_route_lookup_key_ignores_case(self):
        assert route_lookup_key(" Lagos", "ABUJA ") == "ROUTE#lagos#abuja"

    def test_find_by_id(self, repository):
        repository.table.get_item.return_value = {
            "Item": _route_item("route-lagos-abuja", "Lagos", "Abuja")
        }

        route = repository.find_by_id(RouteId(value="route-lagos-abuja"))

        assert route.origin == "Lagos"
        assert route.base_fare.amount == Decimal("15000")
        assert route.distance_km is None

    def test_missing_currency_falls_back_to_configured_currency(self, repository):
        item = _route_item("route-lagos-abuja", "Lagos", "Abuja")
        del item["base_fare_currency"]
        repository.table.get_item.return_value = {"Item": item}

        route = repository.find_by_id(RouteId(value="route-lagos-abuja"))

        assert route.base_fare.currency == Currency.ngn()

    def test_find_route_prefers_active_route(self, repository):
        """同一区間に複数ある場合は有効なルートを返す"""
        repository.table.query.return_value = {
            "Items": [
                _route_item("old", "Abuja", "Lagos", is_active=False),
                _route_item("current", "Abuja", "Lagos"),
            ]
        }

        route = repository.find_route(origin="Abuja", destination="Lagos")

        assert str(route.id) == "current"

    def test_find_route_not_found(self, repository):
        repository.table.query.return_value = {"Items": []}

        assert repository.find_route(origin="Abuja", destination="Kano") is None

    def test_get_routes_follows_pagination(self, repository):
        repository.table.query.side_effect = [
            {
                "Items": [_route_item("r-1", "Lagos", "Abuja")],
                "LastEvaluatedKey": {"PK": "ROUTE#r-1"},
            },
            {"Items": [_route_item("r-2", "Abuja", "Lagos")]},
        ]

        routes = repository.get_routes()

        assert [str(r.id) for r in routes] == ["r-1", "r-2"]
