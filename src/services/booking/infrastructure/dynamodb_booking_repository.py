from decimal import Decimal

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    BookingNumber,
    OneWay,
    RoundTripLeg,
    SeatNumbers,
)
from services.shared.config import Settings
from services.shared.domain import Currency, IsoDateTime, Money, TripId, UserId
from services.shared.domain.exception.exceptions import (
    IncompleteLinkException,
    InsufficientSeatsException,
    OptimisticLockException,
    PersistenceException,
    ResourceNotFoundException,
)
from services.shared.infrastructure.dynamodb import dynamodb_resource, remote_call


def booking_key(booking_id: BookingId) -> dict:
    return {"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"}


def booking_number_key(booking_number: BookingNumber) -> dict:
    return {"PK": f"BOOKING_NUMBER#{booking_number}", "SK": "BOOKING_NUMBER"}


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約の書き込みは TransactWriteItems で以下をまとめて行う。
    - 運行便の空席数の減算（available_seats >= 乗客数 を条件とする）
    - 予約アイテムの追加
    - 予約番号の一意性を保証するガードアイテムの追加
    """

    def __init__(self, table_name: str | None = None, settings: Settings | None = None) -> None:
        settings = settings or Settings.from_env()
        self.table_name = table_name or settings.table_name
        self.dynamodb = dynamodb_resource(settings)
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client

    def insert(self, booking: Booking) -> Booking:
        """片道予約を保存する"""
        self._transact([booking], error_class=PersistenceException)
        return booking

    def insert_linked_pair(
        self, outbound: Booking, inbound: Booking
    ) -> tuple[Booking, Booking]:
        """往復予約の2件を1トランザクションで保存する"""
        if outbound.linked_booking_id != inbound.id or inbound.linked_booking_id != outbound.id:
            raise IncompleteLinkException(
                f"Bookings are not linked to each other: {outbound.id}, {inbound.id}"
            )
        self._transact([outbound, inbound], error_class=IncompleteLinkException)
        return outbound, inbound

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        with remote_call("get booking"):
            response = self.table.get_item(Key=booking_key(booking_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_booking_number(self, booking_number: BookingNumber) -> Booking | None:
        """予約番号で検索"""
        with remote_call("get booking number"):
            response = self.table.get_item(
                Key=booking_number_key(booking_number), ConsistentRead=True
            )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(BookingId(value=item["booking_id"]))

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """利用者の予約を新しい順に取得する"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"USER#{user_id}"),
            "ScanIndexForward": False,
        }
        bookings: list[Booking] = []
        while True:
            with remote_call("query bookings"):
                response = self.table.query(**kwargs)
            bookings.extend(self._to_entity(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return bookings
            kwargs["ExclusiveStartKey"] = last_key

    def update_status(
        self,
        booking_id: BookingId,
        status: BookingStatus,
        reason: str | None = None,
        cancelled_at: IsoDateTime | None = None,
        expected_status: BookingStatus | None = None,
    ) -> Booking:
        """予約のステータスを更新する"""
        expression = "SET #status = :status, cancellation_reason = :reason, cancelled_at = :cancelled_at"
        values: dict = {
            ":status": status.value,
            ":reason": reason,
            ":cancelled_at": str(cancelled_at) if cancelled_at else None,
        }
        condition = "attribute_exists(PK)"
        if expected_status is not None:
            condition += " AND #status = :expected"
            values[":expected"] = expected_status.value

        try:
            with remote_call("update booking"):
                response = self.table.update_item(
                    Key=booking_key(booking_id),
                    UpdateExpression=expression,
                    ConditionExpression=condition,
                    ExpressionAttributeNames={"#status": "status"},
                    ExpressionAttributeValues=values,
                    ReturnValues="ALL_NEW",
                )
        except ClientError as e:
            # remote_call から届くのは条件付き書き込みの失敗のみ
            if expected_status is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}") from e
            raise OptimisticLockException(
                f"Booking status conflict: "
                f"expected {expected_status.value}, "
                f"booking_id={booking_id}"
            ) from e

        return self._to_entity(response["Attributes"])

    def _transact(
        self, bookings: list[Booking], error_class: type[PersistenceException]
    ) -> None:
        items: list[dict] = []
        seat_item_trips: dict[int, TripId] = {}
        for booking in bookings:
            seat_item_trips[len(items)] = booking.trip_id
            items.append(self._seat_decrement(booking))
            items.append(
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": self._to_item(booking),
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                }
            )
            items.append(
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": {
                            **booking_number_key(booking.booking_number),
                            "entity_type": "BOOKING_NUMBER",
                            "booking_id": str(booking.id),
                        },
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                }
            )

        try:
            with remote_call("write bookings", error_class=error_class):
                self.client.transact_write_items(TransactItems=items)
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                reasons = e.response.get("CancellationReasons", [])
                for index, reason in enumerate(reasons):
                    if index in seat_item_trips and reason.get("Code") == "ConditionalCheckFailed":
                        raise InsufficientSeatsException(
                            str(seat_item_trips[index]), bookings[0].passenger_count
                        ) from e
            raise error_class(
                "Failed to write bookings: "
                + ", ".join(str(b.booking_number) for b in bookings)
            ) from e

    def _seat_decrement(self, booking: Booking) -> dict:
        return {
            "Update": {
                "TableName": self.table_name,
                "Key": {"PK": f"TRIP#{booking.trip_id}", "SK": "TRIP"},
                "UpdateExpression": "SET available_seats = available_seats - :count",
                "ConditionExpression": "attribute_exists(PK) AND available_seats >= :count",
                "ExpressionAttributeValues": {":count": booking.passenger_count},
            }
        }

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        item = {
            **booking_key(booking.id),
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "booking_number": str(booking.booking_number),
            "user_id": str(booking.user_id),
            "trip_id": str(booking.trip_id),
            "seat_numbers": list(booking.seat_numbers.values),
            "passenger_count": booking.passenger_count,
            "total_fare_amount": str(booking.total_fare.amount),
            "total_fare_currency": str(booking.total_fare.currency),
            "booking_type": booking.booking_type.value,
            "is_return_leg": booking.is_return_leg,
            "status": booking.status.value,
            "payment_status": booking.payment_status.value,
            "payment_method": booking.payment_method,
            "booked_at": str(booking.booked_at),
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": f"BOOKED_AT#{booking.booked_at}#{booking.id}",
        }
        if booking.linked_booking_id is not None:
            item["linked_booking_id"] = str(booking.linked_booking_id)
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        linked_id = item.get("linked_booking_id")
        leg = (
            RoundTripLeg(
                linked_booking_id=BookingId(value=linked_id),
                is_return_leg=bool(item.get("is_return_leg", False)),
            )
            if linked_id
            else OneWay()
        )
        cancelled_at = item.get("cancelled_at")
        return Booking(
            id=BookingId(value=item["booking_id"]),
            booking_number=BookingNumber(value=item["booking_number"]),
            user_id=UserId(value=item["user_id"]),
            trip_id=TripId(value=item["trip_id"]),
            seat_numbers=SeatNumbers(values=tuple(int(n) for n in item["seat_numbers"])),
            total_fare=Money(
                amount=Decimal(item["total_fare_amount"]),
                currency=Currency(item["total_fare_currency"]),
            ),
            leg=leg,
            booked_at=IsoDateTime.from_string(item["booked_at"]),
            status=BookingStatus(item["status"]),
            payment_status=PaymentStatus(item.get("payment_status", "pending")),
            payment_method=item.get("payment_method"),
            cancellation_reason=item.get("cancellation_reason"),
            cancelled_at=IsoDateTime.from_string(cancelled_at) if cancelled_at else None,
        )
