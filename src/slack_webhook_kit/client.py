"""Incoming Webhookへのメッセージ送信を担当するクライアント"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

import aiohttp
from pydantic import BaseModel, ValidationError

from slack_webhook_kit.exceptions import (
    InvalidMessageError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    RateLimitExceededError,
    WebhookURLNotSetError,
)
from slack_webhook_kit.models.message import Message
from slack_webhook_kit.transport import AiohttpNetworkClient, HTTPResponse, NetworkClient

if TYPE_CHECKING:
    from slack_webhook_kit.config import Config

logger = logging.getLogger(__name__)

_SUPPORTED_SCHEMES = frozenset({"http", "https"})

# Webhookは成功時にJSONではなくプレーンテキスト "ok" を返す
_LEGACY_OK_BODY = b"ok"

_RATE_LIMIT_MARKER = "rate_limited"
# Retry-Afterヘッダーがない場合の待機秒数
_DEFAULT_RETRY_AFTER_SECONDS = 60


class ResponseMetadata(BaseModel, frozen=True):
    messages: list[str] | None = None


class SlackResponse(BaseModel, frozen=True):
    """Webhookのレスポンス"""

    ok: bool
    error: str | None = None
    warning: str | None = None
    response_metadata: ResponseMetadata | None = None


def validate_webhook_url(url: str) -> str:
    """Webhook URLが http/https の絶対URLであることを確認する

    Raises:
        InvalidURLError: パースできない、スキームが非対応、ホストがない、
            空白・制御文字を含む、ポートが不正な場合
    """
    if any(char.isspace() or not char.isprintable() for char in url):
        raise InvalidURLError(url)
    try:
        parsed = urlparse(url)
        # 不正なポート番号は port の参照時に ValueError になる
        hostname, _ = parsed.hostname, parsed.port
    except ValueError as e:
        raise InvalidURLError(url) from e
    if parsed.scheme not in _SUPPORTED_SCHEMES or not hostname:
        raise InvalidURLError(url)
    return url


def _retry_after(response: HTTPResponse) -> int | None:
    header = (response.header("Retry-After") or "").strip()
    # "²" のように isdigit() でも int() できない文字があるためASCIIに限る
    if header.isascii() and header.isdigit():
        return int(header)
    if _RATE_LIMIT_MARKER in response.text:
        return _DEFAULT_RETRY_AFTER_SECONDS
    return None


def parse_webhook_response(response: HTTPResponse) -> SlackResponse:
    """HTTPレスポンスを SlackResponse に変換する

    Raises:
        RateLimitExceededError: 429で、Retry-Afterヘッダーかボディの rate_limited で判定できた場合
        InvalidResponseError: 2xx以外、または2xxでもボディが解釈できない場合
        InvalidMessageError: 2xxで ok=false が返された場合
    """
    if response.status_code == 429:
        retry_after = _retry_after(response)
        if retry_after is not None:
            raise RateLimitExceededError(retry_after)

    if not response.is_success:
        raise InvalidResponseError(response.status_code, response.text)

    if response.data.strip() == _LEGACY_OK_BODY:
        return SlackResponse(ok=True)

    try:
        slack_response = SlackResponse.model_validate_json(response.data)
    except ValidationError as e:
        raise InvalidResponseError(response.status_code, response.text) from e

    if not slack_response.ok:
        raise InvalidMessageError(slack_response.error or "unknown_error")

    if slack_response.warning:
        logger.warning("Slack webhook returned a warning: %s", slack_response.warning)

    return slack_response


class SlackWebhookClient:
    """Incoming Webhookにメッセージを送信するクライアント

    構築後に状態を変更しないため、複数のタスクから同時に send してよい。
    """

    def __init__(
        self,
        webhook_url: str | None = None,
        network_client: NetworkClient | None = None,
        defaults: dict[str, str] | None = None,
    ) -> None:
        """初期化

        Args:
            webhook_url: 送信先のWebhook URL。Noneの場合は送信時に WebhookURLNotSetError
            network_client: トランスポート（省略時は AiohttpNetworkClient）
            defaults: メッセージで未指定の場合に補う配信フィールド（username, icon_emoji など）

        Raises:
            InvalidURLError: webhook_url が http/https の絶対URLでない場合
        """
        self._webhook_url = validate_webhook_url(webhook_url) if webhook_url is not None else None
        self._network_client = network_client or AiohttpNetworkClient()
        self._defaults = dict(defaults or {})

    @classmethod
    def create(cls, webhook_url: str, network_client: NetworkClient | None = None) -> SlackWebhookClient:
        """URL文字列からクライアントを作る（通信は行わない）

        Raises:
            InvalidURLError: URLが不正な場合
        """
        return cls(webhook_url=webhook_url, network_client=network_client)

    @classmethod
    def from_config(cls, config: Config, network_client: NetworkClient | None = None) -> SlackWebhookClient:
        """統合設定からクライアントを作る

        Raises:
            InvalidURLError: 設定されたURLが不正な場合
        """
        defaults = {
            "username": config.default_username,
            "icon_emoji": config.default_icon_emoji,
            "icon_url": config.default_icon_url,
            "channel": config.default_channel,
        }
        return cls(
            webhook_url=config.slack_webhook_url,
            network_client=network_client or AiohttpNetworkClient(timeout_seconds=config.request_timeout),
            defaults={key: value for key, value in defaults.items() if value is not None},
        )

    @property
    def webhook_url(self) -> str | None:
        return self._webhook_url

    def _apply_defaults(self, message: Message) -> Message:
        updates = {key: value for key, value in self._defaults.items() if getattr(message, key) is None}
        if not updates:
            return message
        return message.model_copy(update=updates)

    async def send(self, message: Message) -> SlackResponse:
        """メッセージをWebhookに送信する

        Args:
            message: 送信するメッセージ

        Returns:
            SlackResponse: Webhookのレスポンス（成功時は ok=True）

        Raises:
            WebhookURLNotSetError: Webhook URLが設定されていない場合
            EncodingError: メッセージをJSONにできない場合
            NetworkError: 通信に失敗した場合
            RateLimitExceededError: レート制限に達した場合
            InvalidResponseError: 想定外のHTTPレスポンスの場合
            InvalidMessageError: Slackがメッセージを拒否した場合
        """
        if self._webhook_url is None:
            raise WebhookURLNotSetError

        body = self._apply_defaults(message).to_json()
        logger.debug("Sending message to Slack webhook (%d bytes)", len(body))

        try:
            response = await self._network_client.post(self._webhook_url, body)
        except NetworkError:
            raise
        except (TimeoutError, OSError, aiohttp.ClientError) as e:
            logger.warning("Slack webhook request failed: %r", e)
            msg = f"Network error: {e!r}"
            raise NetworkError(msg) from e

        logger.debug("Slack webhook responded with status %d", response.status_code)
        return parse_webhook_response(response)

    async def send_text(self, text: str) -> SlackResponse:
        """テキストのみのメッセージを送信する"""
        return await self.send(Message(text=text))
