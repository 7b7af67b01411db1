"""線形バックオフ付きリトライ実行エンジン"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import cast

import httpx
import structlog

from .exceptions import RetryExhaustedError
from .models import DEFAULT_RETRY_DELAY, SERVER_ERROR_THRESHOLD

RetryPredicate = Callable[[httpx.Response | None, Exception | None], bool]

logger = structlog.stdlib.get_logger(__name__)


def is_retryable(
    response: httpx.Response | None,
    error: Exception | None,
    threshold: int = SERVER_ERROR_THRESHOLD,
) -> bool:
    """試行結果をリトライすべきか判定する。

    トランスポートエラー、または threshold 以上のステータスコードのみリトライ対象。
    2xx〜4xx はステータスの意味に関わらず終端とみなす。
    """
    if error is not None:
        return True
    if response is not None and response.status_code >= threshold:
        return True
    return False


def retryable_call(
    fn: Callable[[], httpx.Response],
    max_retries: int,
    predicate: RetryPredicate = is_retryable,
    *,
    delay: float = DEFAULT_RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> httpx.Response:
    """fn を最大 max_retries + 1 回実行する。

    Args:
        fn: 1 回分のリクエストを行う関数。トランスポート障害は httpx.TransportError で通知する
        max_retries: 初回を除くリトライ回数の上限
        predicate: (response, error) を受け取りリトライ可否を返す関数
        delay: バックオフの基本単位（秒）。n 回目の試行前に n * delay 待機する
        sleep: 待機関数（テストでは記録用の関数に差し替える）

    Returns:
        リトライ対象でない最初の応答

    Raises:
        httpx.TransportError: predicate が終端と判定したトランスポートエラー
        RetryExhaustedError: 全試行がリトライ対象の結果で終わった場合
    """
    response: httpx.Response | None = None
    error: Exception | None = None

    for attempt in range(max_retries + 1):
        if attempt > 0:
            sleep(attempt * delay)

        response, error = None, None
        try:
            response = fn()
        except httpx.TransportError as e:
            error = e

        if not predicate(response, error):
            if error is not None:
                raise error
            return cast(httpx.Response, response)

        if response is not None:
            # 接続を解放してから次の試行に進む
            response.close()

        if attempt == max_retries:
            break

        logger.warning(
            "retrying request",
            attempt=attempt + 1,
            max_attempts=max_retries + 1,
            status_code=response.status_code if response is not None else None,
            error=str(error) if error is not None else None,
        )

    logger.error("request attempts exhausted", attempts=max_retries + 1)
    raise RetryExhaustedError(
        attempts=max_retries + 1,
        last_error=error,
        last_status_code=response.status_code if response is not None else None,
    )
