"""Block Kitの多相オブジェクトを判別子(type)で振り分けるレジストリ

Block / BlockElement / TextObject はいずれも `type` フィールドを判別子とする
タグ付きユニオンとしてワイヤに載る。このモジュールは判別子文字列から具象モデルを
引くテーブルと、pydanticのバリデータとして差し込むフックを提供する。

- 必須スロット（Input.element, TextObject）: 未知の判別子は例外
- 任意スロット（Section.accessory）とリスト: 未知の判別子はログを残して読み飛ばす
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from slack_webhook_kit.exceptions import (
    DecodeError,
    EncodingError,
    UnsupportedElementInContextError,
    UnsupportedVariantError,
)

logger = logging.getLogger(__name__)

DISCRIMINATOR = "type"


class SlackModel(BaseModel):
    """ワイヤ形式を持つBlock Kitモデルの共通設定"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """ワイヤ形式のdictに変換する（未設定の任意フィールドは出力しない）

        Raises:
            EncodingError: JSONで表現できない値が含まれている場合
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            msg = f"Failed to encode {type(self).__name__}: {e}"
            raise EncodingError(msg) from e


ModelT = TypeVar("ModelT", bound=SlackModel)


def variant_name(model: type[SlackModel]) -> str:
    """モデルクラスに固定された判別子の値を返す"""
    field = model.model_fields.get(DISCRIMINATOR)
    if field is None or not isinstance(field.default, str):
        msg = f"{model.__name__} has no fixed {DISCRIMINATOR!r} default"
        raise TypeError(msg)
    return field.default


def _type_of(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(DISCRIMINATOR)
    return getattr(value, DISCRIMINATOR, None)


class VariantRegistry(Generic[ModelT]):
    """判別子文字列 → 具象モデル のテーブル

    新しいバリアントはコンストラクタに渡すだけで登録される。
    同じ判別子を二重に登録することはできない。
    """

    def __init__(self, family: str, variants: Iterable[type[ModelT]]) -> None:
        self.family = family
        self._variants: dict[str, type[ModelT]] = {}
        for variant in variants:
            name = variant_name(variant)
            if name in self._variants:
                msg = f"Duplicate {family} type: {name}"
                raise ValueError(msg)
            self._variants[name] = variant

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name in self._variants

    def __len__(self) -> int:
        return len(self._variants)

    @property
    def type_names(self) -> tuple[str, ...]:
        """登録順の判別子一覧"""
        return tuple(self._variants)

    def lookup(self, type_name: object) -> type[ModelT]:
        """判別子に対応する具象モデルを返す

        Raises:
            UnsupportedVariantError: 登録されていない判別子の場合
        """
        if type_name not in self:
            raise UnsupportedVariantError(self.family, type_name)
        return self._variants[type_name]  # type: ignore[index]

    def decode(self, data: Any) -> ModelT:
        """JSONオブジェクト1件を具象モデルに変換する

        Raises:
            UnsupportedVariantError: 判別子が未知の場合
            DecodeError: 判別子は既知だが中身が不正な場合
        """
        if not isinstance(data, Mapping):
            msg = f"Expected a JSON object for {self.family}, got {type(data).__name__}"
            raise DecodeError(msg)
        model = self.lookup(data.get(DISCRIMINATOR))
        try:
            return model.model_validate(data)
        except ValidationError as e:
            msg = f"Malformed {self.family} {data.get(DISCRIMINATOR)!r}: {e}"
            raise DecodeError(msg) from e

    def decode_list(self, items: Any) -> list[ModelT]:
        """JSON配列を変換する。未知の判別子を持つ要素は読み飛ばす

        Raises:
            DecodeError: 配列でない場合、または既知の要素の中身が不正な場合
        """
        if not isinstance(items, list):
            msg = f"Expected a JSON array of {self.family}, got {type(items).__name__}"
            raise DecodeError(msg)
        return [self.decode(item) for item in self.skip_unknown(items)]

    def encode(self, value: ModelT) -> dict[str, Any]:
        """具象モデルをワイヤ形式のdictに変換する

        Raises:
            EncodingError: このファミリーに登録されていない型の場合
        """
        type_name = _type_of(value)
        model = self._variants[type_name] if type_name in self else None
        if model is None or not isinstance(value, model):
            msg = f"Unregistered {self.family}: {type(value).__name__}"
            raise EncodingError(msg)
        return value.to_dict()

    # 以下はpydanticの BeforeValidator として使うフック

    def require(self, value: Any) -> Any:
        """必須スロット用: 未知の判別子は UnsupportedVariantError"""
        if isinstance(value, Mapping):
            self.lookup(value.get(DISCRIMINATOR))
        return value

    def optional(self, value: Any) -> Any:
        """任意スロット用: 未知の判別子はNoneに置き換える"""
        if isinstance(value, Mapping) and value.get(DISCRIMINATOR) not in self:
            logger.warning("Skipping unknown %s type: %r", self.family, value.get(DISCRIMINATOR))
            return None
        return value

    def skip_unknown(self, values: Any) -> Any:
        """リスト用: 未知の判別子を持つ要素を取り除く（順序保持）"""
        if not isinstance(values, list):
            return values
        kept = []
        for value in values:
            if isinstance(value, Mapping) and value.get(DISCRIMINATOR) not in self:
                logger.warning("Skipping unknown %s type: %r", self.family, value.get(DISCRIMINATOR))
                continue
            kept.append(value)
        return kept

    def restrict(self, context: str) -> Callable[[Any], Any]:
        """許可リスト用: 登録外のエレメントは UnsupportedElementInContextError"""

        def validate(value: Any) -> Any:
            if value is None:
                return value
            type_name = _type_of(value)
            if type_name not in self:
                raise UnsupportedElementInContextError(context, type_name)
            return value

        return validate
