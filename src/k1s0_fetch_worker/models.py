"""フェッチ設定とデータモデル"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_URL = "https://petstore.swagger.io/v2/pet/findByStatus?status=available"
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 0.1  # 秒。n 回目のリトライ前に n 倍して待機する
DEFAULT_TIMEOUT_SECONDS = 10.0
SERVER_ERROR_THRESHOLD = 500


@dataclass(frozen=True)
class FetchConfig:
    """フェッチ設定。"""

    url: str = DEFAULT_URL
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    server_error_threshold: int = SERVER_ERROR_THRESHOLD

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


@dataclass
class FetchResult:
    """フェッチ結果。"""

    url: str
    status_code: int
    byte_count: int
