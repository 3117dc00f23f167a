from dataclasses import dataclass

from services.catalog.domain.entity import Route
from services.shared.domain import Money


@dataclass(frozen=True)
class FareQuote:
    """運賃の内訳（往路・復路・合計）"""

    outbound_fare: Money
    return_fare: Money | None
    total: Money


class FareCalculator:
    """運賃計算（副作用なし）

    各レグはそれぞれのルートの基本運賃で計算する。
    """

    def leg_fare(self, route: Route, passenger_count: int) -> Money:
        """1レグ分の運賃 = 基本運賃 × 乗客数"""
        if passenger_count < 1:
            raise ValueError("Passenger count must be at least 1")
        return route.base_fare.multiply(passenger_count)

    def quote(
        self,
        outbound_route: Route,
        passenger_count: int,
        return_route: Route | None = None,
    ) -> FareQuote:
        """往路（と復路）の運賃と合計を計算する"""
        outbound_fare = self.leg_fare(outbound_route, passenger_count)
        return_fare = None
        total = outbound_fare
        if return_route is not None:
            return_fare = self.leg_fare(return_route, passenger_count)
            total = outbound_fare.add(return_fare)
        return FareQuote(outbound_fare=outbound_fare, return_fare=return_fare, total=total)
