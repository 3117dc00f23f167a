import json
from unittest.mock import MagicMock

from services.booking.applications import BookingQueryService
from services.booking.handlers import list_bookings


class TestListBookingsHandler:
    """自分の予約一覧 Lambda Handler のテスト"""

    def test_list_bookings_newest_first(
        self, monkeypatch, api_event, create_booking, lambda_context
    ):
        repository = MagicMock()
        repository.find_by_user_id.return_value = [
            create_booking(booking_id="old", booked_at="2025-11-01T09:00:00+00:00"),
            create_booking(booking_id="new", booked_at="2025-12-01T09:00:00+00:00"),
        ]
        monkeypatch.setattr(list_bookings, "service", BookingQueryService(repository))

        response = list_bookings.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["count"] == 2
        assert [b["booking_id"] for b in data["bookings"]] == ["new", "old"]
        assert str(repository.find_by_user_id.call_args[0][0]) == "user-123"

    def test_requires_authenticated_user(self, monkeypatch, api_event, lambda_context):
        repository = MagicMock()
        monkeypatch.setattr(list_bookings, "service", BookingQueryService(repository))

        response = list_bookings.lambda_handler(api_event(user_sub=None), lambda_context)

        assert response["statusCode"] == 401
        repository.find_by_user_id.assert_not_called()
