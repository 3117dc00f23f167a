from decimal import Decimal

from services.catalog.domain.value_object import RouteId
from services.shared.domain import Entity, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Route(Entity[RouteId]):
    """バス路線（読み取り専用）"""

    def __init__(
        self,
        id: RouteId,
        origin: str,
        destination: str,
        base_fare: Money,
        distance_km: Decimal | None = None,
        duration_minutes: int | None = None,
        is_active: bool = True,
        name: str | None = None,
    ) -> None:
        super().__init__(id)
        self._origin = origin.strip()
        self._destination = destination.strip()
        self._base_fare = base_fare
        self._distance_km = distance_km
        self._duration_minutes = duration_minutes
        self._is_active = is_active
        self._name = name or f"{self._origin} - {self._destination}"

        if self._origin.casefold() == self._destination.casefold():
            raise BusinessRuleViolationException(
                "Route origin and destination must differ"
            )

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def base_fare(self) -> Money:
        return self._base_fare

    @property
    def distance_km(self) -> Decimal | None:
        return self._distance_km

    @property
    def duration_minutes(self) -> int | None:
        return self._duration_minutes

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def name(self) -> str:
        return self._name

    def is_reverse_of(self, other: "Route") -> bool:
        """起点と終点が other と入れ替わっているか"""
        return (
            self._origin.casefold() == other.destination.casefold()
            and self._destination.casefold() == other.origin.casefold()
        )
