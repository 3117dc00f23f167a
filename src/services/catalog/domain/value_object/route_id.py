from dataclasses import dataclass


@dataclass(frozen=True)
class RouteId:
    """ルートID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("RouteId cannot be empty")

    def __str__(self) -> str:
        return self.value
