"""Unit tests for tool-call status message classification."""

import re
from unittest.mock import patch

import pytest

from backend.src.models.tool_messaging import ToolContext, ToolDisplayInfo
from backend.src.services import tool_messaging
from backend.src.services.tool_messaging import (
    COMPONENT_PATTERNS,
    INTENT_PATTERNS,
    all_matches,
    classify_tool_call,
    detect_component_type,
    detect_intent,
    first_match,
    generate_tool_message,
    get_intent_modifier,
    get_operation_type,
    get_tool_display_info,
)


class TestPatternTraversal:
    """Tests for the generic first/all match helpers."""

    def test_first_match_uses_table_order(self) -> None:
        table = (("second", re.compile("x")), ("first", re.compile("x")))

        assert first_match(table, "x", "none") == "second"
        assert first_match(tuple(reversed(table)), "x", "none") == "first"

    def test_first_match_returns_default(self) -> None:
        assert first_match((("a", re.compile("a")),), "zzz", "none") == "none"

    def test_all_matches_preserves_table_order(self) -> None:
        table = (("b", re.compile("b")), ("a", re.compile("a")), ("c", re.compile("c")))

        assert all_matches(table, "abc") == ["b", "a", "c"]
        assert all_matches(table, "xyz") == []

    def test_table_order_is_fixed(self) -> None:
        assert [tag for tag, _ in COMPONENT_PATTERNS] == [
            "card", "button", "form", "nav", "modal", "table",
            "chart", "gallery", "sidebar", "hero", "footer", "layout",
        ]
        assert [tag for tag, _ in INTENT_PATTERNS] == [
            "elegant", "modern", "professional", "fun", "dark", "responsive", "interactive",
        ]


class TestDetectComponentType:
    """Tests for detect_component_type()."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Make me a nice modal", "modal"),
            ("pricing panel", "card"),
            ("login page", "form"),
            ("image carousel", "gallery"),
            ("hero banner", "hero"),
            ("site footer", "footer"),
            ("sales chart", "chart"),
            ("SHOW A DIALOG", "modal"),
        ],
    )
    def test_detects_category(self, text: str, expected: str) -> None:
        assert detect_component_type(text) == expected

    def test_defaults_to_component(self) -> None:
        assert detect_component_type("random text") == "component"
        assert detect_component_type("") == "component"

    def test_first_match_wins(self) -> None:
        # "menu" is listed under nav before sidebar
        assert detect_component_type("sidebar menu") == "nav"
        # "grid" is listed under table before layout
        assert detect_component_type("responsive data grid") == "table"
        assert detect_component_type("a card inside a modal") == "card"


class TestDetectIntent:
    """Tests for detect_intent()."""

    def test_returns_every_match_in_table_order(self) -> None:
        assert detect_intent("elegant modern dashboard") == ["elegant", "modern"]
        assert detect_intent("modern and elegant") == ["elegant", "modern"]

    def test_multiple_intents(self) -> None:
        intents = detect_intent("a dark, playful, mobile-friendly button with hover effects")

        assert intents == ["fun", "dark", "responsive", "interactive"]

    def test_no_intent(self) -> None:
        assert detect_intent("") == []
        assert detect_intent("a table") == []

    def test_synonyms(self) -> None:
        assert detect_intent("minimal") == ["elegant"]
        assert detect_intent("corporate") == ["professional"]


class TestGetOperationType:
    """Tests for get_operation_type()."""

    @pytest.mark.parametrize(
        "tool_name,command,expected",
        [
            ("str_replace_editor", "create", "create"),
            ("str_replace_editor", "str_replace", "modify"),
            ("str_replace_editor", "insert", "enhance"),
            ("str_replace_editor", "view", "process"),
            ("file_manager", "rename", "organize"),
            ("file_manager", "delete", "cleanup"),
            ("file_manager", "create", "process"),
            ("str_replace_editor", "rename", "process"),
        ],
    )
    def test_decision_table(self, tool_name: str, command: str, expected: str) -> None:
        assert get_operation_type(tool_name, {"command": command}) == expected

    def test_unknown_tool_defaults_to_process(self) -> None:
        assert get_operation_type("unknown_tool", {}) == "process"
        assert get_operation_type("unknown_tool", {"command": "create"}) == "process"

    def test_missing_args_default_to_process(self) -> None:
        assert get_operation_type("str_replace_editor", None) == "process"
        assert get_operation_type("str_replace_editor", {"path": "/App.jsx"}) == "process"
        assert get_operation_type("str_replace_editor", {"command": 3}) == "process"


class TestIntentModifier:
    """Tests for get_intent_modifier()."""

    def test_precedence(self) -> None:
        assert get_intent_modifier(["interactive", "elegant"]) == "elegant "
        assert get_intent_modifier(["fun", "modern"]) == "modern "
        assert get_intent_modifier(["fun", "professional"]) == "professional "
        assert get_intent_modifier(["interactive", "fun"]) == "playful "
        assert get_intent_modifier(["interactive"]) == "interactive "

    def test_intents_without_modifier(self) -> None:
        assert get_intent_modifier(["dark", "responsive"]) == ""
        assert get_intent_modifier([]) == ""


class TestGetToolDisplayInfo:
    """Tests for get_tool_display_info() and generate_tool_message()."""

    def test_editor_create_with_intent(self) -> None:
        info = get_tool_display_info(
            "str_replace_editor", "build an elegant card", {"command": "create"}
        )

        assert "elegant " in info.message
        assert "card" in info.message
        assert info.message == "Crafting your elegant card..."
        assert info.emoji == "🚀"
        assert info.color == "text-blue-600"

    def test_editor_create_playful_modifier(self) -> None:
        info = get_tool_display_info(
            "str_replace_editor", "build a fun button", {"command": "create"}
        )

        assert info.message == "Crafting your playful button..."

    def test_editor_modify_ignores_intent(self) -> None:
        info = get_tool_display_info(
            "str_replace_editor", "make the signup form elegant", {"command": "str_replace"}
        )

        assert info == ToolDisplayInfo(
            message="Perfecting your form...", emoji="🔧", color="text-amber-600"
        )

    def test_editor_enhance(self) -> None:
        info = get_tool_display_info("str_replace_editor", "card", {"command": "insert"})

        assert info == ToolDisplayInfo(
            message="Adding finishing touches...", emoji="✨", color="text-purple-600"
        )

    def test_editor_default(self) -> None:
        info = get_tool_display_info("str_replace_editor", "something", {"command": "view"})

        assert info == ToolDisplayInfo(
            message="Bringing your component to life...", emoji="🎨", color="text-blue-600"
        )

    @pytest.mark.parametrize(
        "command,message,emoji,color",
        [
            ("rename", "Organizing your project...", "📁", "text-green-600"),
            ("delete", "Cleaning up files...", "🧹", "text-gray-600"),
            ("list", "Managing files...", "📂", "text-blue-600"),
        ],
    )
    def test_file_manager(self, command: str, message: str, emoji: str, color: str) -> None:
        info = get_tool_display_info("file_manager", "elegant modal", {"command": command})

        assert info == ToolDisplayInfo(message=message, emoji=emoji, color=color)

    def test_unknown_tool_falls_back(self) -> None:
        info = get_tool_display_info("web_search", "show a popup")

        assert info == ToolDisplayInfo(
            message="Working on your modal...", emoji="⚡", color="text-blue-600"
        )

    def test_is_deterministic(self) -> None:
        args = {"command": "create"}
        first = get_tool_display_info("str_replace_editor", "modern hero banner", args)
        second = get_tool_display_info("str_replace_editor", "modern hero banner", args)

        assert first == second
        assert args == {"command": "create"}

    def test_generate_tool_message_without_operation(self) -> None:
        context = ToolContext(
            user_request="a clean table",
            component_type="table",
            tool_name="str_replace_editor",
        )

        assert generate_tool_message(context).message == "Bringing your table to life..."


class TestClassifyToolCall:
    """Tests for classify_tool_call()."""

    def test_returns_intermediate_classification(self) -> None:
        result = classify_tool_call(
            "str_replace_editor", "elegant modern dashboard", {"command": "create"}
        )

        assert result.component_type == "chart"
        assert result.intents == ["elegant", "modern"]
        assert result.operation == "create"
        assert result.display.message == "Crafting your elegant chart..."

    def test_detects_intents_once_per_call(self) -> None:
        with patch.object(
            tool_messaging, "detect_intent", wraps=tool_messaging.detect_intent
        ) as detect:
            result = classify_tool_call(
                "str_replace_editor", "a playful hero banner", {"command": "create"}
            )

        detect.assert_called_once_with("a playful hero banner")
        assert result.intents == ["fun"]
        assert result.display.message == "Crafting your playful hero..."

    def test_generate_tool_message_uses_given_intents(self) -> None:
        context = ToolContext(
            user_request="a simple card",
            component_type="card",
            tool_name="str_replace_editor",
            operation="create",
        )

        display = generate_tool_message(context, ["modern"])

        assert display.message == "Crafting your modern card..."
