from .route import Route as Route
from .trip import Trip as Trip
