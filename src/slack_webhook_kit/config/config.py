"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_webhook_kit.config.app import load_app_config
from slack_webhook_kit.config.env import load_env_config


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_webhook_url: str | None = Field(default=None, description="Slack Incoming Webhook URL")

    # config.yaml由来
    request_timeout: float = Field(default=10.0, gt=0, description="Webhookリクエストのタイムアウト（秒）")
    default_username: str | None = Field(default=None, description="未指定時に使う投稿者名")
    default_icon_emoji: str | None = Field(default=None, description="未指定時に使うアイコン絵文字")
    default_icon_url: str | None = Field(default=None, description="未指定時に使うアイコンURL")
    default_channel: str | None = Field(default=None, description="未指定時に使う投稿先チャンネル")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 設定値が不正な場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path)

    return Config(
        slack_webhook_url=env_config.slack_webhook_url,
        **app_config.model_dump(),
    )
