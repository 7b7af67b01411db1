"""httpx による RequestExecutor 実装"""

from __future__ import annotations

from types import TracebackType

import httpx

from .client import RequestExecutor
from .models import FetchConfig


class HttpRequestExecutor(RequestExecutor):
    """httpx.Client を使ってストリーミング GET を発行する。"""

    def __init__(
        self,
        config: FetchConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or FetchConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._config.timeout_seconds)

    def execute(self, url: str) -> httpx.Response:
        request = self._client.build_request("GET", url)
        return self._client.send(request, stream=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpRequestExecutor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
