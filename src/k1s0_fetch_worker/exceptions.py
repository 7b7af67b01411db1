"""fetch_worker ライブラリの例外型定義"""

from __future__ import annotations


class FetchError(Exception):
    """fetch_worker ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class RetryExhaustedError(FetchError):
    """全試行がリトライ対象の結果で終わった場合のエラー。

    last_error は最終試行のトランスポートエラー。最終試行が 5xx 応答だった
    場合は None となり、代わりに last_status_code にステータスコードが入る。
    """

    def __init__(
        self,
        attempts: int,
        last_error: Exception | None = None,
        last_status_code: int | None = None,
    ) -> None:
        self.attempts = attempts
        self.last_error = last_error
        self.last_status_code = last_status_code
        msg = f"failed after {attempts} attempts"
        if last_error is not None:
            msg += f": {last_error}"
        elif last_status_code is not None:
            msg += f": last status code: {last_status_code}"
        super().__init__(
            code=FetchErrorCodes.RETRY_EXHAUSTED,
            message=msg,
            cause=last_error,
        )


class FetchErrorCodes:
    """FetchError のエラーコード定数。"""

    REQUEST_FAILED: str = "REQUEST_FAILED"
    RETRY_EXHAUSTED: str = "RETRY_EXHAUSTED"
    UNEXPECTED_STATUS: str = "UNEXPECTED_STATUS"
    READ_BODY: str = "READ_BODY_ERROR"
