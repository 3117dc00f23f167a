from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 永続化は集約単位で行う
    - 往復予約の2件は別々の集約だが、同一トランザクションで書き込む
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
