"""fetch worker のエントリーポイント"""

from __future__ import annotations

import sys

from .exceptions import FetchError
from .handler import DefaultHandler
from .logger import new_logger
from .models import FetchConfig


def main(handler: DefaultHandler | None = None) -> int:
    """設定された URL を 1 回フェッチし、終了コードを返す。"""
    logger = new_logger()
    handler = handler or DefaultHandler(FetchConfig())
    try:
        result = handler.handle(handler.config.url)
    except FetchError as e:
        logger.error("Error handling request", error=str(e))
        return 1
    finally:
        handler.close()

    print(f"Received {result.byte_count} bytes of data")
    print("Successfully completed request")
    return 0


if __name__ == "__main__":
    sys.exit(main())
