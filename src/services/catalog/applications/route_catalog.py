from aws_lambda_powertools import Logger

from services.catalog.domain.entity import Route
from services.catalog.domain.repository import RouteRepository
from services.catalog.domain.value_object import RouteId

logger = Logger(child=True)


class RouteCatalog:
    """ルートカタログ（読み取り専用）"""

    def __init__(self, repository: RouteRepository) -> None:
        self._repository = repository

    def get_routes(self, active_only: bool = True) -> list[Route]:
        """ルート一覧を取得する"""
        routes = self._repository.get_routes()
        if active_only:
            routes = [route for route in routes if route.is_active]
        return sorted(routes, key=lambda r: (r.origin, r.destination))

    def find_route(self, route_id: RouteId) -> Route | None:
        return self._repository.find_by_id(route_id)

    def find_reversed_route(self, route: Route) -> Route | None:
        """起点と終点を入れ替えた有効なルートを検索する"""
        reversed_route = self._repository.find_route(
            origin=route.destination, destination=route.origin
        )
        if reversed_route is None or not reversed_route.is_active:
            logger.info(
                "Reversed route not found",
                extra={"route_id": str(route.id)},
            )
            return None
        return reversed_route
