"""Webhookに送るメッセージのエンベロープ（Message / Attachment）"""

from typing import Any

from pydantic import Field, ValidationError
from pydantic_core import PydanticSerializationError

from slack_webhook_kit.exceptions import DecodeError, EncodingError
from slack_webhook_kit.models.blocks import Block, BlockList
from slack_webhook_kit.models.registry import SlackModel


class AttachmentField(SlackModel):
    title: str
    value: str
    short: bool | None = None


class Attachment(SlackModel):
    """レガシー添付。blocks は Message と同じ規則でデコードする"""

    fallback: str | None = None
    color: str | None = None
    pretext: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    fields: list[AttachmentField] | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    footer: str | None = None
    footer_icon: str | None = None
    footer_timestamp: int | None = Field(default=None, alias="ts")
    blocks: BlockList | None = None


class Message(SlackModel):
    """Incoming Webhookに送るメッセージ

    blocks を使う場合も、通知やアクセシビリティ用のフォールバックとして
    text を指定することが推奨される（このモデルでは強制しない）。
    """

    text: str | None = None
    blocks: BlockList | None = None
    attachments: list[Attachment] | None = None
    username: str | None = None
    icon_emoji: str | None = None
    icon_url: str | None = None
    channel: str | None = None
    thread_timestamp: str | None = Field(default=None, alias="thread_ts")
    unfurl_links: bool | None = None
    unfurl_media: bool | None = None
    reply_broadcast: bool | None = None
    mrkdwn_enabled: bool | None = Field(default=None, alias="mrkdwn")

    @classmethod
    def of(cls, *blocks: Block, **fields: Any) -> "Message":
        """ブロックを並べてメッセージを作る

        Example:
            Message.of(HeaderBlock.of("Deploy"), DividerBlock(), text="Deploy finished")
        """
        return cls(blocks=list(blocks) or None, **fields)

    def to_json(self) -> bytes:
        """ワイヤ形式のUTF-8 JSONにシリアライズする

        Raises:
            EncodingError: JSONで表現できない値が含まれている場合
        """
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        except PydanticSerializationError as e:
            msg = f"Failed to encode message: {e}"
            raise EncodingError(msg) from e

    @classmethod
    def from_json(cls, data: str | bytes) -> "Message":
        """ワイヤ形式のJSONからメッセージを復元する

        Raises:
            UnsupportedVariantError: 必須スロットのtypeが未知の場合
            UnsupportedElementInContextError: inputブロックに許可外のエレメントがある場合
            DecodeError: JSONとして不正、または既知の型の中身が不正な場合
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            msg = f"Failed to decode message: {e}"
            raise DecodeError(msg) from e


def encode_message(message: Message) -> dict[str, Any]:
    return message.to_dict()


def decode_message(data: Any) -> Message:
    """JSONオブジェクト(dict)からメッセージを復元する"""
    try:
        return Message.model_validate(data)
    except ValidationError as e:
        msg = f"Failed to decode message: {e}"
        raise DecodeError(msg) from e
