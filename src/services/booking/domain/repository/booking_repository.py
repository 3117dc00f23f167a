from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingNumber
from services.shared.domain import IsoDateTime, Repository, UserId


class BookingRepository(Repository[Booking, BookingId]):
    """バス予約レポジトリのインターフェース

    insert 系は運行便の空席数の減算と同一トランザクションで書き込む。
    """

    @abstractmethod
    def insert(self, booking: Booking) -> Booking:
        """片道予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def insert_linked_pair(
        self, outbound: Booking, inbound: Booking
    ) -> tuple[Booking, Booking]:
        """往復予約の2件をまとめて保存する（両方成功か、どちらも書かれない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_number(self, booking_number: BookingNumber) -> Booking | None:
        """予約番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """利用者の予約を新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self,
        booking_id: BookingId,
        status: BookingStatus,
        reason: str | None = None,
        cancelled_at: IsoDateTime | None = None,
        expected_status: BookingStatus | None = None,
    ) -> Booking:
        """ステータスを更新し、更新後の予約を返す"""
        raise NotImplementedError
