"""フェッチ設定モデルのユニットテスト"""

import dataclasses

import pytest
from k1s0_fetch_worker.models import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_URL,
    SERVER_ERROR_THRESHOLD,
    FetchConfig,
    FetchResult,
)


def test_default_constants() -> None:
    """定数のデフォルト値確認。"""
    assert DEFAULT_MAX_RETRIES == 3
    assert DEFAULT_RETRY_DELAY == 0.1
    assert SERVER_ERROR_THRESHOLD == 500


def test_default_config() -> None:
    """FetchConfig のデフォルト値確認。"""
    cfg = FetchConfig()
    assert cfg.url == DEFAULT_URL
    assert cfg.max_retries == 3
    assert cfg.max_attempts == 4
    assert cfg.retry_delay == 0.1
    assert cfg.timeout_seconds == 10.0
    assert cfg.server_error_threshold == 500


def test_config_is_frozen() -> None:
    """FetchConfig は変更不可であること。"""
    cfg = FetchConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_retries = 5  # type: ignore[misc]


def test_fetch_result_fields() -> None:
    """FetchResult のフィールド確認。"""
    result = FetchResult(url="https://example.com", status_code=200, byte_count=42)
    assert result.url == "https://example.com"
    assert result.status_code == 200
    assert result.byte_count == 42
