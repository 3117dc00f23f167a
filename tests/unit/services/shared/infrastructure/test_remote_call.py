import pytest
from botocore.exceptions import ClientError, ConnectTimeoutError, ReadTimeoutError

from services.shared.domain.exception import (
    IncompleteLinkException,
    PersistenceException,
    RemoteFailureException,
)
from services.shared.infrastructure.dynamodb import remote_call


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "GetItem")


class TestRemoteCall:
    """ストア呼び出しの例外変換のテスト"""

    def test_connect_timeout_becomes_remote_failure(self):
        with pytest.raises(RemoteFailureException):
            with remote_call("get booking"):
                raise ConnectTimeoutError(endpoint_url="https://dynamodb.local")

    def test_read_timeout_becomes_remote_failure(self):
        with pytest.raises(RemoteFailureException):
            with remote_call("get booking"):
                raise ReadTimeoutError(endpoint_url="https://dynamodb.local")

    def test_throttling_becomes_remote_failure(self):
        with pytest.raises(RemoteFailureException):
            with remote_call("query trips"):
                raise _client_error("ProvisionedThroughputExceededException")

    def test_condition_failure_is_reraised(self):
        """条件付き書き込みの失敗は呼び出し元で解釈する"""
        with pytest.raises(ClientError):
            with remote_call("update booking"):
                raise _client_error("ConditionalCheckFailedException")

    def test_transaction_cancel_is_reraised(self):
        with pytest.raises(ClientError):
            with remote_call("write bookings"):
                raise _client_error("TransactionCanceledException")

    @pytest.mark.parametrize(
        "code", ["AccessDeniedException", "ResourceNotFoundException", "ValidationException"]
    )
    def test_other_client_error_becomes_persistence_error(self, code):
        """権限不足・テーブル不在などもドメイン例外として扱う"""
        with pytest.raises(PersistenceException):
            with remote_call("get booking"):
                raise _client_error(code)

    def test_error_class_is_configurable(self):
        with pytest.raises(IncompleteLinkException):
            with remote_call("write bookings", error_class=IncompleteLinkException):
                raise _client_error("ValidationException")
