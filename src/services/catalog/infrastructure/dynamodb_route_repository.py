from decimal import Decimal

from boto3.dynamodb.conditions import Key

from services.catalog.domain.entity import Route
from services.catalog.domain.repository import RouteRepository
from services.catalog.domain.value_object import RouteId
from services.shared.config import Settings
from services.shared.domain import Currency, Money
from services.shared.infrastructure.dynamodb import dynamodb_resource, remote_call


def route_lookup_key(origin: str, destination: str) -> str:
    """起点・終点検索用の GSI1SK"""
    return f"ROUTE#{origin.strip().lower()}#{destination.strip().lower()}"


class DynamoDBRouteRepository(RouteRepository):
    """DynamoDBを使用したRouteRepository の具象実装"""

    def __init__(self, table_name: str | None = None, settings: Settings | None = None) -> None:
        settings = settings or Settings.from_env()
        self.table_name = table_name or settings.table_name
        self.fare_currency = settings.fare_currency
        self.dynamodb = dynamodb_resource(settings)
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, route_id: RouteId) -> Route | None:
        """ルートIDで検索"""
        with remote_call("get route"):
            response = self.table.get_item(Key={"PK": f"ROUTE#{route_id}", "SK": "ROUTE"})
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def get_routes(self) -> list[Route]:
        """全ルートを取得する"""
        items = self._query(Key("GSI1PK").eq("ROUTES"))
        return [self._to_entity(item) for item in items]

    def find_route(self, origin: str, destination: str) -> Route | None:
        """起点・終点でルートを検索する"""
        items = self._query(
            Key("GSI1PK").eq("ROUTES")
            & Key("GSI1SK").eq(route_lookup_key(origin, destination))
        )
        if not items:
            return None
        # 同一区間が複数ある場合は有効なルートを優先する
        items.sort(key=lambda item: not item.get("is_active", True))
        return self._to_entity(items[0])

    def _query(self, key_condition) -> list[dict]:
        kwargs: dict = {"IndexName": "GSI1", "KeyConditionExpression": key_condition}
        items: list[dict] = []
        while True:
            with remote_call("query routes"):
                response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Route:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        distance = item.get("distance_km")
        duration = item.get("duration_minutes")
        return Route(
            id=RouteId(value=item["route_id"]),
            name=item.get("name"),
            origin=item["origin"],
            destination=item["destination"],
            base_fare=Money(
                amount=Decimal(item["base_fare_amount"]),
                currency=Currency(item.get("base_fare_currency", self.fare_currency)),
            ),
            distance_km=Decimal(distance) if distance is not None else None,
            duration_minutes=int(duration) if duration is not None else None,
            is_active=bool(item.get("is_active", True)),
        )
