from abc import abstractmethod
from collections.abc import Collection
from datetime import date

from services.catalog.domain.entity import Trip
from services.catalog.domain.enum import TripStatus
from services.catalog.domain.value_object import RouteId
from services.shared.domain import Repository, TripId


class TripRepository(Repository[Trip, TripId]):
    """運行便ストアのインターフェース"""

    @abstractmethod
    def find_by_id(self, trip_id: TripId) -> Trip | None:
        """運行便IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_trips(
        self, route_id: RouteId, trip_date: date, statuses: Collection[TripStatus]
    ) -> list[Trip]:
        """ルート・日付で運行便を検索し、statuses に含まれるものだけ返す"""
        raise NotImplementedError
