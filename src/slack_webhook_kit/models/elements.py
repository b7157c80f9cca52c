"""Block Kitのブロックエレメント

ボタン・セレクト・日付選択・画像・テキスト入力・オーバーフローメニューなど、
ブロックの中に置かれるインタラクティブ/表示用の部品。
各エレメントは `type` を固定値で持つ独立したモデルで、
ELEMENTS レジストリが判別子からモデルを引く。
"""

from datetime import date
from typing import Annotated, Any, Literal

from pydantic import Discriminator

from slack_webhook_kit.models.composition import (
    ButtonStyle,
    ConfirmationDialog,
    ConversationFilter,
    DispatchActionConfig,
    Option,
    OptionGroup,
)
from slack_webhook_kit.models.registry import SlackModel, VariantRegistry
from slack_webhook_kit.models.text import PlainText


class ButtonElement(SlackModel):
    type: Literal["button"] = "button"
    text: PlainText
    action_id: str | None = None
    url: str | None = None
    value: str | None = None
    style: ButtonStyle | None = None
    confirm: ConfirmationDialog | None = None


class ImageElement(SlackModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class OverflowElement(SlackModel):
    type: Literal["overflow"] = "overflow"
    options: list[Option]
    action_id: str | None = None
    confirm: ConfirmationDialog | None = None


class DatePickerElement(SlackModel):
    """日付選択。initial_date はワイヤ上では YYYY-MM-DD"""

    type: Literal["datepicker"] = "datepicker"
    placeholder: PlainText
    action_id: str | None = None
    initial_date: date | None = None
    confirm: ConfirmationDialog | None = None


class PlainTextInputElement(SlackModel):
    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: str | None = None
    placeholder: PlainText | None = None
    initial_value: str | None = None
    multiline: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    dispatch_action_config: DispatchActionConfig | None = None


class RadioButtonsElement(SlackModel):
    type: Literal["radio_buttons"] = "radio_buttons"
    options: list[Option]
    action_id: str | None = None
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None


class CheckboxesElement(SlackModel):
    type: Literal["checkboxes"] = "checkboxes"
    options: list[Option]
    action_id: str | None = None
    initial_options: list[Option] | None = None
    confirm: ConfirmationDialog | None = None


# 単一選択セレクト


class StaticSelectElement(SlackModel):
    """静的セレクト。options と option_groups はどちらか一方を指定する"""

    type: Literal["static_select"] = "static_select"
    placeholder: PlainText
    action_id: str | None = None
    options: list[Option] | None = None
    option_groups: list[OptionGroup] | None = None
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None


class ExternalSelectElement(SlackModel):
    type: Literal["external_select"] = "external_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_option: Option | None = None
    min_query_length: int | None = None
    confirm: ConfirmationDialog | None = None


class UsersSelectElement(SlackModel):
    type: Literal["users_select"] = "users_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_user: str | None = None
    confirm: ConfirmationDialog | None = None


class ConversationsSelectElement(SlackModel):
    type: Literal["conversations_select"] = "conversations_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_conversation: str | None = None
    default_to_current_conversation: bool | None = None
    filter: ConversationFilter | None = None
    confirm: ConfirmationDialog | None = None


class ChannelsSelectElement(SlackModel):
    type: Literal["channels_select"] = "channels_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_channel: str | None = None
    confirm: ConfirmationDialog | None = None


# 複数選択セレクト（初期値フィールド名以外は共通）


class MultiStaticSelectElement(SlackModel):
    type: Literal["multi_static_select"] = "multi_static_select"
    placeholder: PlainText
    action_id: str | None = None
    options: list[Option] | None = None
    option_groups: list[OptionGroup] | None = None
    initial_options: list[Option] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiExternalSelectElement(SlackModel):
    type: Literal["multi_external_select"] = "multi_external_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_options: list[Option] | None = None
    min_query_length: int | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiUsersSelectElement(SlackModel):
    type: Literal["multi_users_select"] = "multi_users_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_users: list[str] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiConversationsSelectElement(SlackModel):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_conversations: list[str] | None = None
    default_to_current_conversation: bool | None = None
    filter: ConversationFilter | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiChannelsSelectElement(SlackModel):
    type: Literal["multi_channels_select"] = "multi_channels_select"
    placeholder: PlainText
    action_id: str | None = None
    initial_channels: list[str] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


BlockElement = Annotated[
    ButtonElement
    | ImageElement
    | OverflowElement
    | DatePickerElement
    | PlainTextInputElement
    | RadioButtonsElement
    | CheckboxesElement
    | StaticSelectElement
    | ExternalSelectElement
    | UsersSelectElement
    | ConversationsSelectElement
    | ChannelsSelectElement
    | MultiStaticSelectElement
    | MultiExternalSelectElement
    | MultiUsersSelectElement
    | MultiConversationsSelectElement
    | MultiChannelsSelectElement,
    Discriminator("type"),
]

# inputブロックに置けるエレメント
InputElement = Annotated[
    PlainTextInputElement
    | DatePickerElement
    | RadioButtonsElement
    | CheckboxesElement
    | StaticSelectElement
    | ExternalSelectElement
    | UsersSelectElement
    | ConversationsSelectElement
    | ChannelsSelectElement
    | MultiStaticSelectElement
    | MultiExternalSelectElement
    | MultiUsersSelectElement
    | MultiConversationsSelectElement
    | MultiChannelsSelectElement,
    Discriminator("type"),
]

_SELECT_ELEMENTS = [
    StaticSelectElement,
    ExternalSelectElement,
    UsersSelectElement,
    ConversationsSelectElement,
    ChannelsSelectElement,
    MultiStaticSelectElement,
    MultiExternalSelectElement,
    MultiUsersSelectElement,
    MultiConversationsSelectElement,
    MultiChannelsSelectElement,
]

ELEMENTS: VariantRegistry[Any] = VariantRegistry(
    "block element",
    [
        ButtonElement,
        ImageElement,
        OverflowElement,
        DatePickerElement,
        PlainTextInputElement,
        RadioButtonsElement,
        CheckboxesElement,
        *_SELECT_ELEMENTS,
    ],
)

INPUT_ELEMENTS: VariantRegistry[Any] = VariantRegistry(
    "input element",
    [
        PlainTextInputElement,
        DatePickerElement,
        RadioButtonsElement,
        CheckboxesElement,
        *_SELECT_ELEMENTS,
    ],
)


def decode_element(data: Any) -> BlockElement:
    """JSONオブジェクトをブロックエレメントに変換する

    Raises:
        UnsupportedVariantError: 未知のtypeの場合（呼び出し側で読み飛ばし可能）
        DecodeError: typeは既知だが中身が不正な場合
    """
    return ELEMENTS.decode(data)


def decode_elements(items: Any) -> list[BlockElement]:
    """エレメント配列を変換する。未知のtypeの要素は読み飛ばす"""
    return ELEMENTS.decode_list(items)


def encode_element(element: BlockElement) -> dict[str, Any]:
    return ELEMENTS.encode(element)
