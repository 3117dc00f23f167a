from .route_repository import RouteRepository as RouteRepository
from .trip_repository import TripRepository as TripRepository
