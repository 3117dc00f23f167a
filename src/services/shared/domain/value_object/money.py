from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..exception import BusinessRuleViolationException
from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise BusinessRuleViolationException(
                f"Cannot add money with different currencies: {self.currency} and {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> Money:
        """人数などの整数倍を計算する"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    @classmethod
    def ngn(cls, amount: Decimal) -> Money:
        """ナイラで Money を生成"""
        return cls(amount, Currency.ngn())
