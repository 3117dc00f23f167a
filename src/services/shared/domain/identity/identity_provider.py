from abc import ABC, abstractmethod

from ..value_object import UserId


class IdentityProvider(ABC):
    """書き込み操作を行う利用者を提供するインターフェース"""

    @abstractmethod
    def current_user_id(self) -> UserId:
        """現在の利用者IDを返す"""
        raise NotImplementedError


class StaticIdentityProvider(IdentityProvider):
    """固定の利用者を返す実装（リクエスト単位で生成する）"""

    def __init__(self, user_id: UserId) -> None:
        self._user_id = user_id

    def current_user_id(self) -> UserId:
        return self._user_id
