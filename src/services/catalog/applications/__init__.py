from .route_catalog import RouteCatalog as RouteCatalog
from .trip_availability import TripAvailabilityIndex as TripAvailabilityIndex
