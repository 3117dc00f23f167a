class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class ValidationException(DomainException):
    """検索条件などの入力値が不正な場合"""

    pass


class NoReversedRouteException(ValidationException):
    """往復予約で復路となる逆方向ルートが存在しない場合"""

    def __init__(self, route_id: str, origin: str, destination: str) -> None:
        super().__init__(
            f"No reversed route for {origin} -> {destination} (route_id={route_id})"
        )
        self.route_id = route_id


class InsufficientSeatsException(DomainException):
    """空席数が乗客数に満たない場合"""

    def __init__(self, trip_id: str, requested: int) -> None:
        super().__init__(f"Not enough seats on trip {trip_id} for {requested} passengers")
        self.trip_id = trip_id
        self.requested = requested


class PersistenceException(DomainException):
    """ストアへの書き込みに失敗した場合"""

    pass


class IncompleteLinkException(PersistenceException):
    """往復予約の2件を揃えて書き込めなかった場合"""

    pass


class InvalidBookingStateException(DomainException):
    """終端状態の予約に対して状態遷移を試みた場合"""

    def __init__(self, booking_id: str, status: str) -> None:
        super().__init__(f"Booking {booking_id} is already {status}")
        self.booking_id = booking_id
        self.status = status


class PartialCancellationException(DomainException):
    """往復予約の片方のみキャンセルできた場合

    pending_booking_id の予約はまだ有効なため、呼び出し側で再キャンセルする。
    """

    def __init__(self, cancelled_booking_id: str, pending_booking_id: str) -> None:
        super().__init__(
            f"Booking {cancelled_booking_id} was cancelled but linked booking "
            f"{pending_booking_id} is still active"
        )
        self.cancelled_booking_id = cancelled_booking_id
        self.pending_booking_id = pending_booking_id


class RemoteFailureException(DomainException):
    """ストアに到達できない、またはタイムアウトした場合"""

    pass


class InvalidDraftStepException(ValidationException):
    """予約ドラフトの現在ステップで許可されない操作の場合"""

    def __init__(self, operation: str, step: str) -> None:
        super().__init__(f"Cannot {operation} while draft is at step '{step}'")
        self.operation = operation
        self.step = step
