import pytest

from services.booking.applications import BookingQueryService
from services.booking.domain.value_object import BookingNumber
from services.shared.domain.exception import ResourceNotFoundException, ValidationException


class TestBookingQueryService:
    """BookingQueryService のテスト"""

    def test_get_by_booking_number(self, mock_repository, create_booking):
        booking = create_booking()
        mock_repository.find_by_booking_number.return_value = booking
        service = BookingQueryService(repository=mock_repository)

        assert service.get_by_booking_number("bk20251201-0000000a") is booking
        mock_repository.find_by_booking_number.assert_called_once_with(
            BookingNumber(value="BK20251201-0000000A")
        )

    def test_invalid_booking_number(self, mock_repository):
        service = BookingQueryService(repository=mock_repository)

        with pytest.raises(ValidationException):
            service.get_by_booking_number("not-a-number")
        mock_repository.find_by_booking_number.assert_not_called()

    def test_booking_number_not_found(self, mock_repository):
        mock_repository.find_by_booking_number.return_value = None
        service = BookingQueryService(repository=mock_repository)

        with pytest.raises(ResourceNotFoundException):
            service.get_by_booking_number("BK20251201-0000000A")

    def test_list_for_user_newest_first(self, mock_repository, create_booking, user_id):
        mock_repository.find_by_user_id.return_value = [
            create_booking(booking_id="old", booked_at="2025-11-01T09:00:00+00:00"),
            create_booking(booking_id="new", booked_at="2025-12-01T09:00:00+00:00"),
        ]
        service = BookingQueryService(repository=mock_repository)

        bookings = service.list_for_user(user_id)

        assert [str(b.id) for b in bookings] == ["new", "old"]
