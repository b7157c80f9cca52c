"""エレメントが共有するコンポジションオブジェクト"""

from enum import Enum

from slack_webhook_kit.models.registry import SlackModel
from slack_webhook_kit.models.text import PlainText, TextObject


class ButtonStyle(str, Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    DANGER = "danger"


class ConversationType(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    IM = "im"
    MPIM = "mpim"


class Option(SlackModel):
    """select / overflow / radio_buttons / checkboxes の選択肢"""

    text: TextObject
    value: str
    url: str | None = None  # overflowでのみ有効
    description: TextObject | None = None


class OptionGroup(SlackModel):
    label: PlainText
    options: list[Option]


class ConfirmationDialog(SlackModel):
    """操作前に表示する確認ダイアログ"""

    title: PlainText
    text: TextObject
    confirm: PlainText
    deny: PlainText
    style: ButtonStyle | None = None


class ConversationFilter(SlackModel):
    include: list[ConversationType] | None = None
    exclude_external_shared_channels: bool | None = None
    exclude_bot_users: bool | None = None


class DispatchActionConfig(SlackModel):
    trigger_actions_on: list[str] | None = None
