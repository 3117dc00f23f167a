from aws_lambda_powertools import Logger

from services.booking.domain.draft import ConfirmedDraft
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository

logger = Logger(child=True)


class BookingLedger:
    """予約台帳

    確定済みドラフトから予約を生成して永続化する。
    往復予約は insert_linked_pair で2件を同時に書き込み、片方だけ残ることはない。
    """

    def __init__(self, repository: BookingRepository, factory: BookingFactory) -> None:
        self._repository = repository
        self._factory = factory

    def create(self, draft: ConfirmedDraft) -> list[Booking]:
        """予約を作成する"""
        bookings = self._factory.create(draft)

        if len(bookings) == 1:
            created = [self._repository.insert(bookings[0])]
        else:
            outbound, inbound = bookings
            created = list(self._repository.insert_linked_pair(outbound, inbound))

        logger.info(
            "Bookings created",
            extra={
                "user_id": str(draft.user_id),
                "booking_type": created[0].booking_type.value,
                "booking_numbers": [str(b.booking_number) for b in created],
                "total_fare": str(draft.fare_quote.total),
            },
        )
        return created
