"""Handler / RequestExecutor 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from .models import FetchResult


class RequestExecutor(ABC):
    """1 回分の GET リクエストを発行する抽象基底クラス。"""

    @abstractmethod
    def execute(self, url: str) -> httpx.Response:
        """GET を 1 回だけ発行し、ボディ未読の応答を返す。

        ステータスコードの解釈やリトライは行わない。

        Raises:
            httpx.TransportError: 接続拒否・タイムアウト・名前解決失敗など
        """
        ...

    def close(self) -> None:
        """保持しているリソースを解放する。"""


class Handler(ABC):
    """URL を処理するハンドラーの抽象基底クラス。"""

    @abstractmethod
    def handle(self, url: str) -> FetchResult:
        """URL からデータを取得する。"""
        ...
