from .fare_calculator import FareCalculator as FareCalculator
from .fare_calculator import FareQuote as FareQuote
