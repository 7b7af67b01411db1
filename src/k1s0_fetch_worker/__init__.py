"""k1s0 fetch worker library."""

from .client import Handler, RequestExecutor
from .exceptions import FetchError, FetchErrorCodes, RetryExhaustedError
from .handler import DefaultHandler
from .http_client import HttpRequestExecutor
from .logger import new_logger
from .models import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_URL,
    SERVER_ERROR_THRESHOLD,
    FetchConfig,
    FetchResult,
)
from .retry import is_retryable, retryable_call

__all__ = [
    "Handler",
    "RequestExecutor",
    "DefaultHandler",
    "HttpRequestExecutor",
    "FetchConfig",
    "FetchResult",
    "DEFAULT_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "SERVER_ERROR_THRESHOLD",
    "is_retryable",
    "retryable_call",
    "new_logger",
    "FetchError",
    "FetchErrorCodes",
    "RetryExhaustedError",
]
