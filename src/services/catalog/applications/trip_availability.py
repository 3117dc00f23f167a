from datetime import date

from services.catalog.domain.entity import Route, Trip
from services.catalog.domain.enum import TripStatus
from services.catalog.domain.repository import TripRepository

# 往路は「キャンセル以外」、復路は「scheduled のみ」を候補とする
OUTBOUND_STATUSES = frozenset(TripStatus) - {TripStatus.CANCELLED}
RETURN_STATUSES = frozenset({TripStatus.SCHEDULED})


class TripAvailabilityIndex:
    """ルート・日付から候補となる運行便を返す"""

    def __init__(self, repository: TripRepository) -> None:
        self._repository = repository

    def find_outbound_trips(self, route: Route, trip_date: date) -> list[Trip]:
        """往路の候補便を取得する"""
        return self._find(route, trip_date, OUTBOUND_STATUSES)

    def find_return_trips(self, route: Route, trip_date: date) -> list[Trip]:
        """復路の候補便を取得する"""
        return self._find(route, trip_date, RETURN_STATUSES)

    def _find(
        self, route: Route, trip_date: date, statuses: frozenset[TripStatus]
    ) -> list[Trip]:
        trips = self._repository.find_trips(route.id, trip_date, statuses)
        return sorted(trips, key=lambda t: t.departure_time)
