"""Slack Incoming Webhook クライアントと Block Kit モデル"""

from slack_webhook_kit.client import ResponseMetadata, SlackResponse, SlackWebhookClient, parse_webhook_response
from slack_webhook_kit.exceptions import (
    DecodeError,
    EncodingError,
    InvalidMessageError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    RateLimitExceededError,
    SlackError,
    UnsupportedElementInContextError,
    UnsupportedVariantError,
    WebhookURLNotSetError,
)
from slack_webhook_kit.models import (
    ActionsBlock,
    Attachment,
    AttachmentField,
    Block,
    BlockElement,
    ButtonElement,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    Markdown,
    Message,
    PlainText,
    SectionBlock,
    markdown,
    plain_text,
)
from slack_webhook_kit.transport import AiohttpNetworkClient, HTTPResponse, NetworkClient

__all__ = [
    "ActionsBlock",
    "AiohttpNetworkClient",
    "Attachment",
    "AttachmentField",
    "Block",
    "BlockElement",
    "ButtonElement",
    "ContextBlock",
    "DecodeError",
    "DividerBlock",
    "EncodingError",
    "HTTPResponse",
    "HeaderBlock",
    "ImageBlock",
    "InputBlock",
    "InvalidMessageError",
    "InvalidResponseError",
    "InvalidURLError",
    "Markdown",
    "Message",
    "NetworkClient",
    "NetworkError",
    "PlainText",
    "RateLimitExceededError",
    "ResponseMetadata",
    "SectionBlock",
    "SlackError",
    "SlackResponse",
    "SlackWebhookClient",
    "UnsupportedElementInContextError",
    "UnsupportedVariantError",
    "WebhookURLNotSetError",
    "markdown",
    "parse_webhook_response",
    "plain_text",
]
