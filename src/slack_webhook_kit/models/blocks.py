"""Block Kitのレイアウトブロック"""

from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Discriminator, Field

from slack_webhook_kit.models.elements import ELEMENTS, INPUT_ELEMENTS, BlockElement, ImageElement, InputElement
from slack_webhook_kit.models.registry import SlackModel, VariantRegistry
from slack_webhook_kit.models.text import Markdown, PlainText, TextObject

# contextブロックに置けるのはテキストと画像のみ
ContextElement = Annotated[PlainText | Markdown | ImageElement, Discriminator("type")]

CONTEXT_ELEMENTS: VariantRegistry[Any] = VariantRegistry("context element", [PlainText, Markdown, ImageElement])


class SectionBlock(SlackModel):
    type: Literal["section"] = "section"
    text: TextObject | None = None
    fields: list[TextObject] | None = None
    # 未知のエレメントは読み飛ばしてアクセサリなしとして扱う
    accessory: Annotated[BlockElement | None, BeforeValidator(ELEMENTS.optional)] = None
    block_id: str | None = None


class DividerBlock(SlackModel):
    type: Literal["divider"] = "divider"
    block_id: str | None = None


class HeaderBlock(SlackModel):
    type: Literal["header"] = "header"
    text: PlainText
    block_id: str | None = None

    @classmethod
    def of(cls, text: str, block_id: str | None = None) -> "HeaderBlock":
        """文字列からplain_textのヘッダーを作る"""
        return cls(text=PlainText(text=text), block_id=block_id)


class ImageBlock(SlackModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: PlainText | None = None
    block_id: str | None = None


class ActionsBlock(SlackModel):
    type: Literal["actions"] = "actions"
    elements: Annotated[list[BlockElement], BeforeValidator(ELEMENTS.skip_unknown)]
    block_id: str | None = None


class ContextBlock(SlackModel):
    type: Literal["context"] = "context"
    elements: Annotated[list[ContextElement], BeforeValidator(CONTEXT_ELEMENTS.skip_unknown)]
    block_id: str | None = None


class InputBlock(SlackModel):
    """入力ブロック。element は許可リストにあるエレメントのみ"""

    type: Literal["input"] = "input"
    label: PlainText
    element: Annotated[InputElement, BeforeValidator(INPUT_ELEMENTS.restrict("input block"))]
    hint: PlainText | None = None
    optional: bool | None = None
    dispatch_action: bool | None = None
    block_id: str | None = None


class CallParticipant(SlackModel):
    slack_id: str
    external_id: str | None = None
    avatar_url: str | None = None
    display_name: str | None = None


class CallRecording(SlackModel):
    title: str
    url: str
    id: str | None = None
    duration: int | None = None


class CallInfo(SlackModel):
    id: str
    app_id: str | None = None
    created_by: str | None = None
    date_start: int | None = None  # UNIX時刻
    has_ended: bool | None = None
    desktop_app_join_url: str | None = None
    participants: list[CallParticipant] | None = None
    external_id: str | None = Field(default=None, alias="external_unique_id")
    title: str | None = None
    recordings: list[CallRecording] | None = None
    channels: list[str] | None = None
    is_huddle: bool | None = Field(default=None, alias="is_a_huddle")


class CallData(SlackModel):
    call_info: CallInfo | None = Field(default=None, alias="call")


class CallBlock(SlackModel):
    type: Literal["call"] = "call"
    call_id: str
    api_call_id: str | None = None
    call: CallData | None = None
    block_id: str | None = None


Block = Annotated[
    SectionBlock
    | DividerBlock
    | HeaderBlock
    | ImageBlock
    | ActionsBlock
    | ContextBlock
    | InputBlock
    | CallBlock,
    Discriminator("type"),
]

BLOCKS: VariantRegistry[Any] = VariantRegistry(
    "block",
    [
        SectionBlock,
        DividerBlock,
        HeaderBlock,
        ImageBlock,
        ActionsBlock,
        ContextBlock,
        InputBlock,
        CallBlock,
    ],
)

# Message / Attachment の blocks。未知のブロックは読み飛ばす
BlockList = Annotated[list[Block], BeforeValidator(BLOCKS.skip_unknown)]


def decode_block(data: Any) -> Block:
    """JSONオブジェクトをブロックに変換する

    Raises:
        UnsupportedVariantError: 未知のtypeの場合
        UnsupportedElementInContextError: inputブロックに許可外のエレメントがある場合
        DecodeError: typeは既知だが中身が不正な場合
    """
    return BLOCKS.decode(data)


def decode_blocks(items: Any) -> list[Block]:
    """ブロック配列を変換する

    未知のtypeを持つブロックはログを残して読み飛ばし、残りを元の順序で返す。
    既知のtypeで中身が不正なブロックは DecodeError として伝播する。
    """
    return BLOCKS.decode_list(items)


def encode_block(block: Block) -> dict[str, Any]:
    return BLOCKS.encode(block)
