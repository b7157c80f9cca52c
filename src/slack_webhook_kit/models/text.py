"""Block Kitのテキストオブジェクト（plain_text / mrkdwn）"""

from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Discriminator

from slack_webhook_kit.models.registry import SlackModel, VariantRegistry


class PlainText(SlackModel):
    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool | None = None


class Markdown(SlackModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool | None = None


TEXT_OBJECTS: VariantRegistry[PlainText | Markdown] = VariantRegistry("text object", [PlainText, Markdown])

# 拡張性は不要なユニオンなので、未知の判別子は常にエラー
TextObject = Annotated[
    PlainText | Markdown,
    Discriminator("type"),
    BeforeValidator(TEXT_OBJECTS.require),
]


def plain_text(text: str, emoji: bool | None = None) -> PlainText:
    return PlainText(text=text, emoji=emoji)


def markdown(text: str, verbatim: bool | None = None) -> Markdown:
    return Markdown(text=text, verbatim=verbatim)


def decode_text_object(data: Any) -> PlainText | Markdown:
    """JSONオブジェクトをテキストオブジェクトに変換する

    Raises:
        UnsupportedVariantError: typeが plain_text / mrkdwn 以外の場合
        DecodeError: 必須フィールドが欠けている場合
    """
    return TEXT_OBJECTS.decode(data)


def encode_text_object(value: PlainText | Markdown) -> dict[str, Any]:
    return TEXT_OBJECTS.encode(value)
