from collections.abc import Iterator
from contextlib import contextmanager

import boto3
from botocore.config import Config
from botocore.exceptions import (
    ClientError,
    ConnectionError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from services.shared.config import Settings
from services.shared.domain.exception import (
    PersistenceException,
    RemoteFailureException,
)

# ストア呼び出しは再試行せず、失敗は呼び出し元に返す
_UNAVAILABLE_ERROR_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
        "ThrottlingException",
        "InternalServerError",
        "ServiceUnavailable",
    }
)

# 条件付き書き込みの失敗は呼び出し元のリポジトリで解釈する
_CONDITION_ERROR_CODES = frozenset(
    {"ConditionalCheckFailedException", "TransactionCanceledException"}
)


def dynamodb_resource(settings: Settings | None = None):
    """タイムアウト付きの DynamoDB リソースを生成する"""
    settings = settings or Settings.from_env()
    config = Config(
        connect_timeout=settings.store_connect_timeout,
        read_timeout=settings.store_read_timeout,
        retries={"max_attempts": 0, "mode": "standard"},
    )
    return boto3.resource("dynamodb", config=config)


@contextmanager
def remote_call(
    operation: str, error_class: type[PersistenceException] = PersistenceException
) -> Iterator[None]:
    """ストア呼び出しの例外をドメイン例外に変換する

    - 通信障害・タイムアウト・スロットリングは RemoteFailureException
    - 条件付き書き込みの失敗は ClientError のまま送出する
    - それ以外の ClientError は error_class
    """
    try:
        yield
    except (ConnectTimeoutError, ReadTimeoutError, EndpointConnectionError) as e:
        raise RemoteFailureException(f"{operation} timed out or unreachable") from e
    except ConnectionError as e:
        raise RemoteFailureException(f"{operation} connection failed") from e
    except ClientError as e:
        if e.response["Error"]["Code"] in _UNAVAILABLE_ERROR_CODES:
            raise RemoteFailureException(
                f"{operation} failed: {e.response['Error']['Code']}"
            ) from e
        if e.response["Error"]["Code"] in _CONDITION_ERROR_CODES:
            raise
        raise error_class(
            f"{operation} failed: {e.response['Error']['Code']}"
        ) from e
