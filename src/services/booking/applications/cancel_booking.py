from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import IsoDateTime, UserId
from services.shared.domain.exception import (
    PartialCancellationException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class CancellationCoordinator:
    """予約キャンセルのユースケース

    往復予約の場合はリンク先の予約も続けてキャンセルする。
    2件の更新はアトミックではないため、片方の失敗は
    PartialCancellationException として呼び出し側に返す。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(
        self,
        booking_id: BookingId,
        reason: str | None = None,
        user_id: UserId | None = None,
    ) -> list[Booking]:
        """予約をキャンセルし、キャンセルした予約を返す"""
        booking = self._load(booking_id)
        if user_id is not None and booking.user_id != user_id:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        cancelled = [self._cancel_leg(booking, reason)]

        linked_id = booking.linked_booking_id
        if linked_id is None:
            return cancelled

        try:
            linked = self._load(linked_id)
            if linked.status.is_terminal:
                logger.info(
                    "Linked booking already closed",
                    extra={"booking_id": str(linked_id), "status": linked.status.value},
                )
                return cancelled
            cancelled.append(self._cancel_leg(linked, _linked_reason(booking)))
        except Exception as e:
            logger.exception(
                "Linked booking cancellation failed",
                extra={
                    "cancelled_booking_id": str(booking.id),
                    "pending_booking_id": str(linked_id),
                },
            )
            raise PartialCancellationException(
                cancelled_booking_id=str(booking.id),
                pending_booking_id=str(linked_id),
            ) from e

        return cancelled

    def _load(self, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return booking

    def _cancel_leg(self, booking: Booking, reason: str | None) -> Booking:
        expected_status = booking.status
        booking.cancel(reason, IsoDateTime.now())
        updated = self._repository.update_status(
            booking.id,
            booking.status,
            reason=booking.cancellation_reason,
            cancelled_at=booking.cancelled_at,
            expected_status=expected_status,
        )
        logger.info(
            "Booking cancelled",
            extra={
                "booking_id": str(booking.id),
                "booking_number": str(booking.booking_number),
            },
        )
        return updated


def _linked_reason(booking: Booking) -> str:
    """リンク先キャンセル時の理由を生成する"""
    direction = "return" if booking.is_return_leg else "outbound"
    return f"Cancelled with linked {direction} booking {booking.booking_number}"
