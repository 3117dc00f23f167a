from dataclasses import dataclass


@dataclass(frozen=True)
class TripId:
    """運行便ID（カタログ・予約で共通）

    ルート上の特定日の1便を表す。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("TripId cannot be empty")

    def __str__(self) -> str:
        return self.value
