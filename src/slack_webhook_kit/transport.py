from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import aiohttp

from slack_webhook_kit.exceptions import NetworkError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS = 10.0
_JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class HTTPResponse:
    """トランスポートが返すHTTPレスポンス"""

    status_code: int
    data: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """ステータスコードが2xxかどうか"""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """ボディをUTF-8でデコードした文字列（デコードできないバイトは置換）"""
        return self.data.decode("utf-8", errors="replace")

    def header(self, name: str) -> str | None:
        """ヘッダーを大文字小文字を区別せずに取得する"""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


@runtime_checkable
class NetworkClient(Protocol):
    """URLにJSONをPOSTしてステータスとボディを受け取るトランスポートのProtocol

    通信自体に失敗した場合は NetworkError を送出する。
    """

    async def post(self, url: str, body: bytes) -> HTTPResponse: ...


class AiohttpNetworkClient:
    """aiohttp を用いた NetworkClient 実装"""

    def __init__(self, timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def post(self, url: str, body: bytes) -> HTTPResponse:
        """Content-Type: application/json でPOSTする。

        リトライは行わない。接続エラー/タイムアウトは NetworkError に包んで送出する。
        """
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session, session.post(url, data=body, headers=_JSON_HEADERS) as response:
                data = await response.read()
                return HTTPResponse(
                    status_code=response.status,
                    data=data,
                    headers=dict(response.headers),
                )
        except (TimeoutError, aiohttp.ClientError) as e:
            # URL自体が秘密情報なのでログには出さない
            logger.warning("Slack webhook request failed: %r", e)
            msg = f"Network error: {e!r}"
            raise NetworkError(msg) from e
