from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingNumber
from services.shared.domain import UserId
from services.shared.domain.exception import ResourceNotFoundException, ValidationException


class BookingQueryService:
    """予約照会のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get_by_booking_number(self, booking_number: str) -> Booking:
        """予約番号で予約を取得する"""
        try:
            number = BookingNumber(value=booking_number)
        except ValueError as e:
            raise ValidationException(str(e)) from e

        booking = self._repository.find_by_booking_number(number)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {number}")
        return booking

    def list_for_user(self, user_id: UserId) -> list[Booking]:
        """利用者の予約一覧（予約日時の新しい順）"""
        bookings = self._repository.find_by_user_id(user_id)
        return sorted(bookings, key=lambda b: b.booked_at.value, reverse=True)
