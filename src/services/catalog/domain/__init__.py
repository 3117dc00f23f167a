from .entity import Route as Route
from .entity import Trip as Trip
from .enum import TripStatus as TripStatus
from .repository import RouteRepository as RouteRepository
from .repository import TripRepository as TripRepository
from .value_object import RouteId as RouteId
