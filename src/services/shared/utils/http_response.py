import json

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    InsufficientSeatsException,
    InvalidBookingStateException,
    OptimisticLockException,
    PartialCancellationException,
    RemoteFailureException,
    ResourceNotFoundException,
    ValidationException,
)

# 例外クラス -> (HTTP ステータス, エラーコード)
_ERROR_STATUS: list[tuple[type[DomainException], int, str]] = [
    (ValidationException, 400, "VALIDATION_ERROR"),
    (ResourceNotFoundException, 404, "NOT_FOUND"),
    (InsufficientSeatsException, 409, "INSUFFICIENT_SEATS"),
    (InvalidBookingStateException, 409, "INVALID_STATE"),
    (OptimisticLockException, 409, "CONFLICT"),
    (PartialCancellationException, 502, "PARTIAL_CANCELLATION"),
    (RemoteFailureException, 503, "REMOTE_FAILURE"),
    (BusinessRuleViolationException, 422, "BUSINESS_RULE_VIOLATION"),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway REST API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body: dict = {"status": "error", "error_code": error_code, "message": message}
    if details is not None:
        body["details"] = details
    return api_response(status_code, body)


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP エラーレスポンスに変換する"""
    details = None
    if isinstance(error, PartialCancellationException):
        details = [
            {
                "cancelled_booking_id": error.cancelled_booking_id,
                "pending_booking_id": error.pending_booking_id,
            }
        ]

    for exc_type, status_code, error_code in _ERROR_STATUS:
        if isinstance(error, exc_type):
            return error_response(status_code, error_code, str(error), details)
    return error_response(500, "PERSISTENCE_ERROR", str(error), details)
