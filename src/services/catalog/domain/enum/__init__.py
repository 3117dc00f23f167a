from .trip_status import TripStatus as TripStatus
