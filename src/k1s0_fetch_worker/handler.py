"""DefaultHandler: リトライ付き GET とペイロードサイズの報告"""

from __future__ import annotations

import time
from collections.abc import Callable

import httpx
import structlog

from .client import Handler, RequestExecutor
from .exceptions import FetchError, FetchErrorCodes, RetryExhaustedError
from .http_client import HttpRequestExecutor
from .models import FetchConfig, FetchResult
from .retry import is_retryable, retryable_call

logger = structlog.stdlib.get_logger(__name__)


class DefaultHandler(Handler):
    """5xx とトランスポートエラーを線形バックオフでリトライするハンドラー。"""

    def __init__(
        self,
        config: FetchConfig | None = None,
        executor: RequestExecutor | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._config = config or FetchConfig()
        self._executor = executor or HttpRequestExecutor(self._config)
        self._sleep = sleep or time.sleep

    @property
    def config(self) -> FetchConfig:
        return self._config

    def handle(self, url: str) -> FetchResult:
        """URL から GET でデータを取得し、受信バイト数を返す。

        Raises:
            FetchError: リトライ上限到達、200 以外のステータス、ボディ読み込み失敗
        """
        return self._get_data(url)

    def close(self) -> None:
        self._executor.close()

    def _get_data(self, url: str) -> FetchResult:
        try:
            resp = retryable_call(
                lambda: self._executor.execute(url),
                self._config.max_retries,
                self._is_retryable,
                delay=self._config.retry_delay,
                sleep=self._sleep,
            )
        except (RetryExhaustedError, httpx.TransportError, httpx.InvalidURL) as e:
            raise FetchError(
                code=FetchErrorCodes.REQUEST_FAILED,
                message=f"failed to make HTTP request: {e}",
                cause=e,
            ) from e

        try:
            if resp.status_code != httpx.codes.OK:
                raise FetchError(
                    code=FetchErrorCodes.UNEXPECTED_STATUS,
                    message=f"unexpected status code: {resp.status_code}",
                )
            try:
                body = resp.read()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise FetchError(
                    code=FetchErrorCodes.READ_BODY,
                    message=f"failed to read response body: {e}",
                    cause=e,
                ) from e
        finally:
            resp.close()

        logger.info("received data", url=url, bytes=len(body))
        return FetchResult(url=url, status_code=resp.status_code, byte_count=len(body))

    def _is_retryable(self, response: httpx.Response | None, error: Exception | None) -> bool:
        return is_retryable(response, error, self._config.server_error_threshold)
