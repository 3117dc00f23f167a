from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """予約を行う利用者のID（認証基盤の subject）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
