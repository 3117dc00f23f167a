from collections.abc import Collection
from datetime import date, time

from boto3.dynamodb.conditions import Attr, Key

from services.catalog.domain.entity import Trip
from services.catalog.domain.enum import TripStatus
from services.catalog.domain.repository import TripRepository
from services.catalog.domain.value_object import RouteId
from services.shared.config import Settings
from services.shared.domain import TripId
from services.shared.infrastructure.dynamodb import dynamodb_resource, remote_call


def trip_key(trip_id: TripId) -> dict:
    """運行便アイテムのプライマリキー"""
    return {"PK": f"TRIP#{trip_id}", "SK": "TRIP"}


class DynamoDBTripRepository(TripRepository):
    """DynamoDBを使用したTripRepository の具象実装"""

    def __init__(self, table_name: str | None = None, settings: Settings | None = None) -> None:
        settings = settings or Settings.from_env()
        self.table_name = table_name or settings.table_name
        self.dynamodb = dynamodb_resource(settings)
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """運行便IDで検索"""
        with remote_call("get trip"):
            response = self.table.get_item(Key=trip_key(trip_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_trips(
        self, route_id: RouteId, trip_date: date, statuses: Collection[TripStatus]
    ) -> list[Trip]:
        """ルート・日付で運行便を検索する"""
        if not statuses:
            return []
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(
                f"ROUTE#{route_id}#DATE#{trip_date.isoformat()}"
            ),
            "FilterExpression": Attr("status").is_in([s.value for s in statuses]),
        }
        trips: list[Trip] = []
        while True:
            with remote_call("query trips"):
                response = self.table.query(**kwargs)
            trips.extend(self._to_entity(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return trips
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Trip:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Trip(
            id=TripId(value=item["trip_id"]),
            route_id=RouteId(value=item["route_id"]),
            bus_id=item.get("bus_id"),
            trip_date=date.fromisoformat(item["trip_date"]),
            departure_time=time.fromisoformat(item["departure_time"]),
            arrival_time=time.fromisoformat(item["arrival_time"]),
            status=TripStatus(item["status"]),
            available_seats=int(item.get("available_seats", 0)),
        )
