from enum import Enum


class BookingType(str, Enum):
    """片道・往復の区分"""

    ONE_WAY = "one_way"
    ROUND_TRIP = "round_trip"
