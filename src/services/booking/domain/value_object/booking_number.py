from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar


@dataclass(frozen=True)
class BookingNumber:
    """予約番号（利用者向けの参照番号）

    形式: BK + 予約日(YYYYMMDD) + "-" + 16進8桁
    例: BK20251225-3F9A1C0B
    一意性はストア側の条件付き書き込みで保証する。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^BK\d{8}-[0-9A-F]{8}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid booking number format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, booked_at: datetime | None = None) -> BookingNumber:
        booked_at = booked_at or datetime.now(timezone.utc)
        token = secrets.token_hex(4).upper()
        return cls(value=f"BK{booked_at:%Y%m%d}-{token}")
