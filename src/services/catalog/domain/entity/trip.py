from datetime import date, time

from services.catalog.domain.enum import TripStatus
from services.catalog.domain.value_object import RouteId
from services.shared.domain import Entity, TripId


class Trip(Entity[TripId]):
    """運行便

    ステータスは配車側で更新される。空席数のみ予約時に減算される。
    """

    def __init__(
        self,
        id: TripId,
        route_id: RouteId,
        trip_date: date,
        departure_time: time,
        arrival_time: time,
        status: TripStatus = TripStatus.SCHEDULED,
        available_seats: int = 0,
        bus_id: str | None = None,
    ) -> None:
        super().__init__(id)
        if available_seats < 0:
            raise ValueError("Available seats cannot be negative")
        self._route_id = route_id
        self._trip_date = trip_date
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._status = status
        self._available_seats = available_seats
        self._bus_id = bus_id

    @property
    def route_id(self) -> RouteId:
        return self._route_id

    @property
    def trip_date(self) -> date:
        return self._trip_date

    @property
    def departure_time(self) -> time:
        return self._departure_time

    @property
    def arrival_time(self) -> time:
        return self._arrival_time

    @property
    def status(self) -> TripStatus:
        return self._status

    @property
    def available_seats(self) -> int:
        return self._available_seats

    @property
    def bus_id(self) -> str | None:
        return self._bus_id
