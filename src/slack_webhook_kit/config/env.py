"""環境変数設定"""

import os

from pydantic import BaseModel, Field


class EnvConfig(BaseModel):
    """環境変数設定"""

    slack_webhook_url: str | None = Field(default=None, description="Slack Incoming Webhook URL")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    SLACK_WEBHOOK_URL が未設定の場合はURLなしの設定を返す
    （送信時に WebhookURLNotSetError になる）。URLの形式は
    SlackWebhookClient の構築時に検証する。

    Returns:
        EnvConfig: 環境変数設定
    """
    return EnvConfig(slack_webhook_url=os.environ.get("SLACK_WEBHOOK_URL") or None)
