"""Block Kitモデルとエンコード/デコード"""

from slack_webhook_kit.models.blocks import (
    BLOCKS,
    CONTEXT_ELEMENTS,
    ActionsBlock,
    Block,
    CallBlock,
    CallData,
    CallInfo,
    CallParticipant,
    CallRecording,
    ContextBlock,
    ContextElement,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    decode_block,
    decode_blocks,
    encode_block,
)
from slack_webhook_kit.models.composition import (
    ButtonStyle,
    ConfirmationDialog,
    ConversationFilter,
    ConversationType,
    DispatchActionConfig,
    Option,
    OptionGroup,
)
from slack_webhook_kit.models.elements import (
    ELEMENTS,
    INPUT_ELEMENTS,
    BlockElement,
    ButtonElement,
    ChannelsSelectElement,
    CheckboxesElement,
    ConversationsSelectElement,
    DatePickerElement,
    ExternalSelectElement,
    ImageElement,
    InputElement,
    MultiChannelsSelectElement,
    MultiConversationsSelectElement,
    MultiExternalSelectElement,
    MultiStaticSelectElement,
    MultiUsersSelectElement,
    OverflowElement,
    PlainTextInputElement,
    RadioButtonsElement,
    StaticSelectElement,
    UsersSelectElement,
    decode_element,
    decode_elements,
    encode_element,
)
from slack_webhook_kit.models.message import Attachment, AttachmentField, Message, decode_message, encode_message
from slack_webhook_kit.models.registry import SlackModel, VariantRegistry
from slack_webhook_kit.models.text import (
    TEXT_OBJECTS,
    Markdown,
    PlainText,
    TextObject,
    decode_text_object,
    encode_text_object,
    markdown,
    plain_text,
)

__all__ = [
    "BLOCKS",
    "CONTEXT_ELEMENTS",
    "ELEMENTS",
    "INPUT_ELEMENTS",
    "TEXT_OBJECTS",
    "ActionsBlock",
    "Attachment",
    "AttachmentField",
    "Block",
    "BlockElement",
    "ButtonElement",
    "ButtonStyle",
    "CallBlock",
    "CallData",
    "CallInfo",
    "CallParticipant",
    "CallRecording",
    "ChannelsSelectElement",
    "CheckboxesElement",
    "ConfirmationDialog",
    "ContextBlock",
    "ContextElement",
    "ConversationFilter",
    "ConversationType",
    "ConversationsSelectElement",
    "DatePickerElement",
    "DispatchActionConfig",
    "DividerBlock",
    "ExternalSelectElement",
    "HeaderBlock",
    "ImageBlock",
    "ImageElement",
    "InputBlock",
    "InputElement",
    "Markdown",
    "Message",
    "MultiChannelsSelectElement",
    "MultiConversationsSelectElement",
    "MultiExternalSelectElement",
    "MultiStaticSelectElement",
    "MultiUsersSelectElement",
    "Option",
    "OptionGroup",
    "OverflowElement",
    "PlainText",
    "PlainTextInputElement",
    "RadioButtonsElement",
    "SectionBlock",
    "SlackModel",
    "StaticSelectElement",
    "TextObject",
    "UsersSelectElement",
    "VariantRegistry",
    "decode_block",
    "decode_blocks",
    "decode_element",
    "decode_elements",
    "decode_message",
    "decode_text_object",
    "encode_block",
    "encode_element",
    "encode_message",
    "encode_text_object",
    "markdown",
    "plain_text",
]
