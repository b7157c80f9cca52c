"""ブロックのテスト"""

import pytest

from slack_webhook_kit.exceptions import DecodeError, UnsupportedElementInContextError, UnsupportedVariantError
from slack_webhook_kit.models.blocks import (
    BLOCKS,
    ActionsBlock,
    CallBlock,
    CallData,
    CallInfo,
    CallParticipant,
    CallRecording,
    ContextBlock,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    decode_block,
    decode_blocks,
    encode_block,
)
from slack_webhook_kit.models.composition import Option
from slack_webhook_kit.models.elements import (
    ButtonElement,
    DatePickerElement,
    ImageElement,
    OverflowElement,
    PlainTextInputElement,
    StaticSelectElement,
)
from slack_webhook_kit.models.text import Markdown, PlainText, markdown, plain_text

_VARIANTS = [
    (
        SectionBlock(),
        SectionBlock(
            text=markdown("*Deploy* finished"),
            fields=[markdown("*Env*"), plain_text("production")],
            accessory=ButtonElement(text=plain_text("Open"), url="https://example.com"),
            block_id="section-1",
        ),
    ),
    (
        DividerBlock(),
        DividerBlock(block_id="divider-1"),
    ),
    (
        HeaderBlock(text=plain_text("Title")),
        HeaderBlock(text=plain_text("Title", emoji=True), block_id="header-1"),
    ),
    (
        ImageBlock(image_url="https://example.com/a.png", alt_text="a"),
        ImageBlock(image_url="https://example.com/a.png", alt_text="a", title=plain_text("Chart"), block_id="image-1"),
    ),
    (
        ActionsBlock(elements=[ButtonElement(text=plain_text("OK"))]),
        ActionsBlock(
            elements=[
                ButtonElement(text=plain_text("OK"), action_id="ok", value="1"),
                OverflowElement(options=[Option(text=plain_text("More"), value="more")]),
                DatePickerElement(placeholder=plain_text("Date")),
            ],
            block_id="actions-1",
        ),
    ),
    (
        ContextBlock(elements=[plain_text("note")]),
        ContextBlock(
            elements=[
                markdown("*by* bot"),
                ImageElement(image_url="https://example.com/icon.png", alt_text="icon"),
                plain_text("footer", emoji=True),
            ],
            block_id="context-1",
        ),
    ),
    (
        InputBlock(label=plain_text("Name"), element=PlainTextInputElement()),
        InputBlock(
            label=plain_text("Fruit"),
            element=StaticSelectElement(
                placeholder=plain_text("Pick"),
                options=[Option(text=plain_text("Apple"), value="apple")],
            ),
            hint=plain_text("Pick one"),
            optional=True,
            dispatch_action=False,
            block_id="input-1",
        ),
    ),
    (
        CallBlock(call_id="R123"),
        CallBlock(
            call_id="R123",
            api_call_id="api-1",
            call=CallData(
                call_info=CallInfo(
                    id="R123",
                    app_id="A1",
                    created_by="U1",
                    date_start=1700000000,
                    has_ended=False,
                    desktop_app_join_url="https://example.com/join",
                    participants=[CallParticipant(slack_id="U1", display_name="Alice")],
                    external_id="ext-1",
                    title="Standup",
                    recordings=[CallRecording(title="rec", url="https://example.com/rec", duration=60)],
                    channels=["C1"],
                    is_huddle=True,
                )
            ),
            block_id="call-1",
        ),
    ),
]

_MINIMAL = [minimal for minimal, _ in _VARIANTS]
_FULL = [full for _, full in _VARIANTS]


def test_every_registered_block_is_covered() -> None:
    """全ブロックがテスト対象に含まれていること"""
    assert [block.type for block in _MINIMAL] == list(BLOCKS.type_names)


@pytest.mark.parametrize("block", _MINIMAL + _FULL, ids=lambda b: b.type)
def test_round_trip(block: object) -> None:
    """encodeしてdecodeすると元の値に戻ること（全フィールド未設定/設定の両方）"""
    assert decode_block(encode_block(block)) == block


@pytest.mark.parametrize("block", _MINIMAL, ids=lambda b: b.type)
def test_encode_emits_fixed_type(block: object) -> None:
    """encode結果のtypeがバリアント固有の値であること"""
    assert encode_block(block)["type"] == block.type  # type: ignore[attr-defined]


class TestSectionBlock:
    """SectionBlockのテスト"""

    def test_encode_with_block_id(self) -> None:
        """block_idがワイヤに出力されること"""
        encoded = encode_block(SectionBlock(text=plain_text("hi"), block_id="b1"))

        assert encoded == {"type": "section", "text": {"type": "plain_text", "text": "hi"}, "block_id": "b1"}

    def test_decode_accessory(self) -> None:
        """accessoryが具象エレメントとしてデコードされること"""
        block = decode_block(
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "Pick a date"},
                "accessory": {
                    "type": "datepicker",
                    "placeholder": {"type": "plain_text", "text": "Date"},
                    "initial_date": "2024-05-01",
                },
            }
        )

        assert isinstance(block, SectionBlock)
        assert isinstance(block.accessory, DatePickerElement)
        assert block.accessory.initial_date is not None
        assert block.accessory.initial_date.isoformat() == "2024-05-01"

    def test_decode_unknown_accessory_is_dropped(self) -> None:
        """未知のaccessoryは読み飛ばされ、ブロック自体はデコードされること"""
        block = decode_block(
            {
                "type": "section",
                "text": {"type": "plain_text", "text": "hello"},
                "accessory": {"type": "future_widget"},
            }
        )

        assert isinstance(block, SectionBlock)
        assert block.accessory is None
        assert block.text == PlainText(text="hello")

    def test_decode_malformed_accessory_fails(self) -> None:
        """既知のtypeで中身が不正なaccessoryはDecodeErrorになること"""
        with pytest.raises(DecodeError):
            decode_block({"type": "section", "accessory": {"type": "button"}})

    def test_decode_unknown_text_type_fails(self) -> None:
        """textのtypeが未知の場合はUnsupportedVariantErrorになること"""
        with pytest.raises(UnsupportedVariantError):
            decode_block({"type": "section", "text": {"type": "rich_text", "text": "x"}})


class TestHeaderBlock:
    """HeaderBlockのテスト"""

    def test_of_creates_plain_text_header(self) -> None:
        """文字列からplain_textのヘッダーが作られること"""
        assert HeaderBlock.of("Release", block_id="h") == HeaderBlock(text=PlainText(text="Release"), block_id="h")

    def test_decode_markdown_text_fails(self) -> None:
        """ヘッダーのtextにmrkdwnは使えないこと"""
        with pytest.raises(DecodeError):
            decode_block({"type": "header", "text": {"type": "mrkdwn", "text": "*x*"}})


class TestActionsBlock:
    """ActionsBlockのテスト"""

    def test_decode_skips_unknown_elements(self) -> None:
        """未知のエレメントを読み飛ばし、既知のエレメントは順序を保つこと"""
        block = decode_block(
            {
                "type": "actions",
                "elements": [
                    {"type": "button", "text": {"type": "plain_text", "text": "A"}},
                    {"type": "workflow_button", "text": {"type": "plain_text", "text": "W"}},
                    {"type": "button", "text": {"type": "plain_text", "text": "B"}},
                ],
            }
        )

        assert isinstance(block, ActionsBlock)
        assert [element.text.text for element in block.elements] == ["A", "B"]  # type: ignore[union-attr]


class TestContextBlock:
    """ContextBlockのテスト"""

    def test_decode_text_and_image_elements(self) -> None:
        """テキストと画像のエレメントがデコードされること"""
        block = decode_block(
            {
                "type": "context",
                "elements": [
                    {"type": "mrkdwn", "text": "*Author*"},
                    {"type": "image", "image_url": "https://example.com/a.png", "alt_text": "avatar"},
                    {"type": "plain_text", "text": "2024-01-01"},
                ],
            }
        )

        assert isinstance(block, ContextBlock)
        assert block.elements == [
            Markdown(text="*Author*"),
            ImageElement(image_url="https://example.com/a.png", alt_text="avatar"),
            PlainText(text="2024-01-01"),
        ]

    def test_decode_skips_non_context_elements(self) -> None:
        """contextに置けないエレメントは読み飛ばすこと"""
        block = decode_block(
            {
                "type": "context",
                "elements": [
                    {"type": "button", "text": {"type": "plain_text", "text": "no"}},
                    {"type": "plain_text", "text": "yes"},
                ],
            }
        )

        assert isinstance(block, ContextBlock)
        assert block.elements == [PlainText(text="yes")]


class TestInputBlock:
    """InputBlockのテスト"""

    def test_decode_overflow_element_fails(self) -> None:
        """許可リスト外のoverflowはUnsupportedElementInContextErrorになること"""
        with pytest.raises(UnsupportedElementInContextError) as exc_info:
            decode_block(
                {
                    "type": "input",
                    "label": {"type": "plain_text", "text": "Menu"},
                    "element": {
                        "type": "overflow",
                        "options": [{"text": {"type": "plain_text", "text": "A"}, "value": "a"}],
                    },
                }
            )

        assert exc_info.value.type_name == "overflow"
        assert exc_info.value.context == "input block"

    def test_decode_unknown_element_fails(self) -> None:
        """未知のエレメントも読み飛ばさずにエラーになること"""
        with pytest.raises(UnsupportedElementInContextError):
            decode_block(
                {
                    "type": "input",
                    "label": {"type": "plain_text", "text": "Future"},
                    "element": {"type": "future_input"},
                }
            )

    def test_decode_missing_element_fails(self) -> None:
        """elementがない場合はDecodeErrorになること"""
        with pytest.raises(DecodeError):
            decode_block({"type": "input", "label": {"type": "plain_text", "text": "Name"}})

    def test_construct_with_button_fails(self) -> None:
        """Pythonから許可リスト外のエレメントを渡した場合もエラーになること"""
        with pytest.raises(UnsupportedElementInContextError):
            InputBlock(label=plain_text("Button"), element=ButtonElement(text=plain_text("x")))  # type: ignore[arg-type]


class TestCallBlock:
    """CallBlockのテスト"""

    def test_encode_uses_wire_keys(self) -> None:
        """通話情報がSlackのキー名で出力されること"""
        block = CallBlock(
            call_id="R1",
            call=CallData(call_info=CallInfo(id="R1", external_id="ext", is_huddle=False)),
        )

        assert encode_block(block) == {
            "type": "call",
            "call_id": "R1",
            "call": {"call": {"id": "R1", "external_unique_id": "ext", "is_a_huddle": False}},
        }


class TestDecodeBlocks:
    """decode_blocks関数のテスト"""

    def test_unknown_block_is_skipped(self) -> None:
        """未知のブロックを読み飛ばし、前後のブロックを順序通りに返すこと"""
        blocks = decode_blocks(
            [
                {"type": "section", "text": {"type": "mrkdwn", "text": "hello"}},
                {"type": "future_block_xyz", "payload": {"a": 1}},
                {"type": "divider"},
            ]
        )

        assert len(blocks) == 2
        assert isinstance(blocks[0], SectionBlock)
        assert isinstance(blocks[1], DividerBlock)

    def test_block_without_type_is_skipped(self) -> None:
        """typeのないオブジェクトも読み飛ばすこと"""
        assert decode_blocks([{"text": "orphan"}, {"type": "divider"}]) == [DividerBlock()]

    def test_malformed_known_block_propagates(self) -> None:
        """既知のtypeで中身が不正なブロックはDecodeErrorになること"""
        with pytest.raises(DecodeError):
            decode_blocks([{"type": "divider"}, {"type": "image", "alt_text": "missing url"}])

    def test_non_array_fails(self) -> None:
        """配列以外はDecodeErrorになること"""
        with pytest.raises(DecodeError):
            decode_blocks({"type": "divider"})

    def test_decode_single_unknown_block_fails(self) -> None:
        """単体デコードでは未知のブロックはUnsupportedVariantErrorになること"""
        with pytest.raises(UnsupportedVariantError):
            decode_block({"type": "future_block_xyz"})
