from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeatNumbers:
    """座席番号（購入内の乗客連番）

    車両の座席表とは照合しない。
    """

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("Seat numbers cannot be empty")
        if any(n < 1 for n in self.values):
            raise ValueError("Seat numbers must be positive")
        if len(set(self.values)) != len(self.values):
            raise ValueError("Seat numbers must be unique")

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def for_passengers(cls, passenger_count: int) -> SeatNumbers:
        """1..passenger_count の連番を生成する"""
        return cls(values=tuple(range(1, passenger_count + 1)))
