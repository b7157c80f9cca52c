"""Slack Webhook連携に関する例外"""


class SlackError(Exception):
    """Slack Webhook関連のエラーの基底クラス

    ValueErrorを継承しないため、pydanticのバリデータ内で送出されても
    ValidationErrorに変換されずにそのまま伝播する。
    """


class InvalidURLError(SlackError):
    """Webhook URLが不正な場合のエラー"""

    def __init__(self, url: str) -> None:
        """初期化

        Args:
            url: 不正と判定されたURL文字列
        """
        super().__init__(f"Invalid URL: {url}")
        self.url = url


class WebhookURLNotSetError(SlackError):
    """Webhook URLが未設定のまま送信しようとした場合のエラー"""

    def __init__(self) -> None:
        super().__init__("Webhook URL is not set")


class EncodingError(SlackError):
    """メッセージをJSONにシリアライズできなかった場合のエラー"""


class DecodeError(SlackError):
    """JSONからモデルを復元できなかった場合のエラー"""


class UnsupportedVariantError(DecodeError):
    """必須スロットの判別子が未知の値だった場合のエラー"""

    def __init__(self, family: str, type_name: object) -> None:
        """初期化

        Args:
            family: 多相ファミリー名（"text object", "block element" など）
            type_name: JSONに含まれていた判別子の値
        """
        super().__init__(f"Unsupported {family} type: {type_name!r}")
        self.family = family
        self.type_name = type_name


class UnsupportedElementInContextError(DecodeError):
    """許可リスト外のエレメントが配置されていた場合のエラー"""

    def __init__(self, context: str, type_name: object) -> None:
        """初期化

        Args:
            context: エレメントが置かれていた場所（"input block" など）
            type_name: JSONに含まれていたエレメントの判別子
        """
        super().__init__(f"Unsupported element type in {context}: {type_name!r}")
        self.context = context
        self.type_name = type_name


class NetworkError(SlackError):
    """トランスポート層で通信に失敗した場合のエラー"""


class InvalidResponseError(SlackError):
    """Webhookが想定外のHTTPレスポンスを返した場合のエラー"""

    def __init__(self, status_code: int, body: str | None = None) -> None:
        """初期化

        Args:
            status_code: HTTPステータスコード
            body: レスポンスボディ（UTF-8でデコードできた場合のみ）
        """
        if body:
            message = f"Invalid response (status {status_code}): {body}"
        else:
            message = f"Invalid response (status {status_code})"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RateLimitExceededError(SlackError):
    """レート制限(HTTP 429)に達した場合のエラー"""

    def __init__(self, retry_after: int) -> None:
        """初期化

        Args:
            retry_after: 再送まで待つべき秒数
        """
        super().__init__(f"Rate limit exceeded. Retry after {retry_after} seconds")
        self.retry_after = retry_after


class InvalidMessageError(SlackError):
    """Slackが2xxで ok=false を返した場合のエラー"""

    def __init__(self, error_code: str) -> None:
        """初期化

        Args:
            error_code: Slackから返されたエラーコード（例: invalid_payload）
        """
        super().__init__(f"Invalid message: {error_code}")
        self.error_code = error_code
