from abc import abstractmethod

from services.catalog.domain.entity import Route
from services.catalog.domain.value_object import RouteId
from services.shared.domain import Repository


class RouteRepository(Repository[Route, RouteId]):
    """ルートストアのインターフェース"""

    @abstractmethod
    def find_by_id(self, route_id: RouteId) -> Route | None:
        """ルートIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def get_routes(self) -> list[Route]:
        """全ルートを取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_route(self, origin: str, destination: str) -> Route | None:
        """起点・終点でルートを検索する"""
        raise NotImplementedError
