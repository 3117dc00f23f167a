from pydantic import BaseModel

from services.catalog.domain.entity import Route, Trip


class RouteData(BaseModel):
    """ルートデータのレスポンスモデル"""

    route_id: str
    name: str
    origin: str
    destination: str
    base_fare_amount: str
    base_fare_currency: str
    distance_km: str | None = None
    duration_minutes: int | None = None


class TripData(BaseModel):
    """運行便データのレスポンスモデル"""

    trip_id: str
    route_id: str
    bus_id: str | None
    trip_date: str
    departure_time: str
    arrival_time: str
    status: str
    available_seats: int


def to_route_data(route: Route) -> RouteData:
    return RouteData(
        route_id=str(route.id),
        name=route.name,
        origin=route.origin,
        destination=route.destination,
        base_fare_amount=str(route.base_fare.amount),
        base_fare_currency=str(route.base_fare.currency),
        distance_km=str(route.distance_km) if route.distance_km is not None else None,
        duration_minutes=route.duration_minutes,
    )


def to_trip_data(trip: Trip) -> TripData:
    return TripData(
        trip_id=str(trip.id),
        route_id=str(trip.route_id),
        bus_id=trip.bus_id,
        trip_date=trip.trip_date.isoformat(),
        departure_time=trip.departure_time.isoformat(timespec="minutes"),
        arrival_time=trip.arrival_time.isoformat(timespec="minutes"),
        status=trip.status.value,
        available_seats=trip.available_seats,
    )
