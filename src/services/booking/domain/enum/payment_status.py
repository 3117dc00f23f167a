from enum import Enum


class PaymentStatus(str, Enum):
    """支払いステータス（決済処理自体は外部）"""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
