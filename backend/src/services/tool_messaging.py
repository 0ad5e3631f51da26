"""
Friendly status messages for AI tool calls.

Classifies the user's request into a component type and a set of style
intents with ordered regex tables, derives the operation kind from the tool
call arguments, and maps the result to a short message, emoji and Tailwind
color class for the chat UI.

Table order is significant: component detection returns the first matching
entry, intent detection returns every match in table order.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..models.tool_messaging import ToolClassification, ToolContext, ToolDisplayInfo

PatternTable = Sequence[Tuple[str, re.Pattern[str]]]

DEFAULT_COMPONENT_TYPE = "component"
DEFAULT_OPERATION = "process"

EDITOR_TOOL = "str_replace_editor"
FILE_MANAGER_TOOL = "file_manager"

# ============================================================================
# Pattern tables
# ============================================================================

COMPONENT_PATTERNS: PatternTable = (
    ("card", re.compile(r"card|panel|tile", re.I)),
    ("button", re.compile(r"button|btn|click|cta", re.I)),
    ("form", re.compile(r"form|input|field|contact|signup|login", re.I)),
    ("nav", re.compile(r"nav|menu|header|navigation", re.I)),
    ("modal", re.compile(r"modal|dialog|popup|overlay", re.I)),
    ("table", re.compile(r"table|grid|list|data", re.I)),
    ("chart", re.compile(r"chart|graph|dashboard|analytics", re.I)),
    ("gallery", re.compile(r"gallery|carousel|slider|image", re.I)),
    ("sidebar", re.compile(r"sidebar|drawer|menu", re.I)),
    ("hero", re.compile(r"hero|banner|jumbotron", re.I)),
    ("footer", re.compile(r"footer|bottom", re.I)),
    ("layout", re.compile(r"layout|container|wrapper|grid", re.I)),
)

INTENT_PATTERNS: PatternTable = (
    ("elegant", re.compile(r"elegant|sophisticated|clean|minimal", re.I)),
    ("modern", re.compile(r"modern|sleek|contemporary", re.I)),
    ("professional", re.compile(r"professional|business|corporate", re.I)),
    ("fun", re.compile(r"fun|playful|colorful|vibrant", re.I)),
    ("dark", re.compile(r"dark|night|black", re.I)),
    ("responsive", re.compile(r"responsive|mobile|adaptive", re.I)),
    ("interactive", re.compile(r"interactive|hover|animate|click", re.I)),
)

# (intent, modifier word) in precedence order
INTENT_MODIFIERS: Tuple[Tuple[str, str], ...] = (
    ("elegant", "elegant "),
    ("modern", "modern "),
    ("professional", "professional "),
    ("fun", "playful "),
    ("interactive", "interactive "),
)

OPERATION_TABLE: Mapping[Tuple[str, str], str] = {
    (EDITOR_TOOL, "create"): "create",
    (EDITOR_TOOL, "str_replace"): "modify",
    (EDITOR_TOOL, "insert"): "enhance",
    (FILE_MANAGER_TOOL, "rename"): "organize",
    (FILE_MANAGER_TOOL, "delete"): "cleanup",
}


def first_match(patterns: PatternTable, text: str, default: str) -> str:
    """Return the tag of the first pattern found in text, else default."""
    for tag, pattern in patterns:
        if pattern.search(text):
            return tag
    return default


def all_matches(patterns: PatternTable, text: str) -> List[str]:
    """Return the tags of every pattern found in text, in table order."""
    return [tag for tag, pattern in patterns if pattern.search(text)]


# ============================================================================
# Classification
# ============================================================================


def detect_component_type(user_message: str) -> str:
    return first_match(COMPONENT_PATTERNS, user_message, DEFAULT_COMPONENT_TYPE)


def detect_intent(user_message: str) -> List[str]:
    return all_matches(INTENT_PATTERNS, user_message)


def get_operation_type(tool_name: str, args: Optional[Mapping[str, Any]]) -> str:
    """Map a tool name and its ``command`` argument to an operation kind."""
    command = args.get("command") if args else None
    if not isinstance(command, str):
        return DEFAULT_OPERATION
    return OPERATION_TABLE.get((tool_name, command), DEFAULT_OPERATION)


def get_intent_modifier(intents: Sequence[str]) -> str:
    for intent, modifier in INTENT_MODIFIERS:
        if intent in intents:
            return modifier
    return ""


# ============================================================================
# Messages
# ============================================================================


def _editor_message(
    component_type: str, operation: Optional[str], intents: Sequence[str]
) -> ToolDisplayInfo:
    if operation == "create":
        modifier = get_intent_modifier(intents)
        return ToolDisplayInfo(
            message=f"Crafting your {modifier}{component_type}...",
            emoji="🚀",
            color="text-blue-600",
        )
    if operation == "modify":
        return ToolDisplayInfo(
            message=f"Perfecting your {component_type}...",
            emoji="🔧",
            color="text-amber-600",
        )
    if operation == "enhance":
        return ToolDisplayInfo(
            message="Adding finishing touches...",
            emoji="✨",
            color="text-purple-600",
        )
    return ToolDisplayInfo(
        message=f"Bringing your {component_type} to life...",
        emoji="🎨",
        color="text-blue-600",
    )


def _file_manager_message(operation: Optional[str]) -> ToolDisplayInfo:
    if operation == "organize":
        return ToolDisplayInfo(
            message="Organizing your project...",
            emoji="📁",
            color="text-green-600",
        )
    if operation == "cleanup":
        return ToolDisplayInfo(
            message="Cleaning up files...",
            emoji="🧹",
            color="text-gray-600",
        )
    return ToolDisplayInfo(
        message="Managing files...",
        emoji="📂",
        color="text-blue-600",
    )


def generate_tool_message(
    context: ToolContext, intents: Optional[Sequence[str]] = None
) -> ToolDisplayInfo:
    """Build the display info for a tool call from its classified context.

    Intents are detected from the user request unless already known.
    """
    if intents is None:
        intents = detect_intent(context.user_request)

    if context.tool_name == EDITOR_TOOL:
        return _editor_message(context.component_type, context.operation, intents)

    if context.tool_name == FILE_MANAGER_TOOL:
        return _file_manager_message(context.operation)

    return ToolDisplayInfo(
        message=f"Working on your {context.component_type}...",
        emoji="⚡",
        color="text-blue-600",
    )


def classify_tool_call(
    tool_name: str,
    user_request: str,
    tool_args: Optional[Mapping[str, Any]] = None,
) -> ToolClassification:
    """Classify a tool call and build its display info."""
    component_type = detect_component_type(user_request)
    intents = detect_intent(user_request)
    operation = get_operation_type(tool_name, tool_args)
    context = ToolContext(
        user_request=user_request,
        component_type=component_type,
        operation_phase="creating",
        tool_name=tool_name,
        operation=operation,
    )
    return ToolClassification(
        component_type=component_type,
        intents=intents,
        operation=operation,
        display=generate_tool_message(context, intents),
    )


def get_tool_display_info(
    tool_name: str,
    user_request: str,
    tool_args: Optional[Mapping[str, Any]] = None,
) -> ToolDisplayInfo:
    return classify_tool_call(tool_name, user_request, tool_args).display


__all__ = [
    "COMPONENT_PATTERNS",
    "INTENT_PATTERNS",
    "DEFAULT_COMPONENT_TYPE",
    "DEFAULT_OPERATION",
    "first_match",
    "all_matches",
    "detect_component_type",
    "detect_intent",
    "get_operation_type",
    "get_intent_modifier",
    "generate_tool_message",
    "classify_tool_call",
    "get_tool_display_info",
]
