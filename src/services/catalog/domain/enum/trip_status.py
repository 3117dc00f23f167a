from enum import Enum


class TripStatus(str, Enum):
    """運行便ステータス"""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
