from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class SearchTripsRequest(BaseModel):
    """運行便検索のクエリパラメータ"""

    route_id: str = Field(..., min_length=1, description="ルートID")
    departure_date: date = Field(..., description="出発日（YYYY-MM-DD形式）", examples=["2025-12-25"])
    passenger_count: int = Field(default=1, ge=1, description="乗客数")
    trip_type: Literal["one_way", "round_trip"] = Field(default="one_way")
    return_date: date | None = Field(default=None, description="復路の出発日")
    outbound_trip_id: str | None = Field(
        default=None,
        min_length=1,
        description="指定すると復路の候補便を返す",
    )


class ReserveBookingRequest(BaseModel):
    """予約リクエストモデル"""

    route_id: str = Field(..., min_length=1)
    departure_date: date
    passenger_count: int = Field(default=1, ge=1)
    trip_type: Literal["one_way", "round_trip"] = "one_way"
    return_date: date | None = None
    outbound_trip_id: str = Field(..., min_length=1)
    return_trip_id: str | None = Field(default=None, min_length=1)
    payment_method: str = Field(default="card", min_length=1, max_length=30)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "route_id": "route-lagos-abuja",
                    "departure_date": "2025-12-25",
                    "passenger_count": 1,
                    "trip_type": "round_trip",
                    "return_date": "2025-12-28",
                    "outbound_trip_id": "trip-001",
                    "return_trip_id": "trip-002",
                    "payment_method": "card",
                }
            ]
        }
    }

    @model_validator(mode="after")
    def check_return_trip(self) -> "ReserveBookingRequest":
        """往復の場合は復路便が必須"""
        if self.trip_type == "round_trip" and self.return_trip_id is None:
            raise ValueError("return_trip_id is required for a round trip")
        return self


class CancelBookingRequest(BaseModel):
    """キャンセルリクエストモデル"""

    reason: str | None = Field(default=None, max_length=500)
