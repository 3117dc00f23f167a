import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込む実行時設定"""

    table_name: str | None
    store_connect_timeout: float = 2.0
    store_read_timeout: float = 5.0
    fare_currency: str = "NGN"
    max_passengers: int = 5

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            table_name=os.getenv("TABLE_NAME"),
            store_connect_timeout=float(os.getenv("STORE_CONNECT_TIMEOUT", "2")),
            store_read_timeout=float(os.getenv("STORE_READ_TIMEOUT", "5")),
            fare_currency=os.getenv("FARE_CURRENCY", "NGN"),
            max_passengers=int(os.getenv("MAX_PASSENGERS", "5")),
        )
