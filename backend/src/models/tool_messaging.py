"""Models for tool-call status messages shown in the chat UI."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

OperationPhase = Literal["creating", "styling", "enhancing", "organizing"]


class ToolDisplayInfo(BaseModel):
    """User-facing progress text for a single tool call."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Short progress message")
    emoji: str = Field(..., description="Single glyph shown next to the message")
    color: str = Field(..., description="Tailwind text color class, e.g. text-blue-600")


class ToolContext(BaseModel):
    """Inputs to message generation for one tool call."""

    model_config = ConfigDict(frozen=True)

    user_request: str
    component_type: str
    operation_phase: OperationPhase = "creating"
    tool_name: str
    operation: Optional[str] = None


class ToolClassification(BaseModel):
    """Classification of a tool call together with its display info."""

    component_type: str = Field(..., description="Detected component category")
    intents: List[str] = Field(default_factory=list, description="Detected style intents")
    operation: str = Field(..., description="Operation kind derived from the tool call")
    display: ToolDisplayInfo


class ToolDisplayRequest(BaseModel):
    """Request body for the tool display route."""

    tool_name: str = Field(..., min_length=1, max_length=128)
    user_request: str = Field("", max_length=10_000)
    args: Dict[str, Any] = Field(default_factory=dict, description="Raw tool arguments")


__all__ = [
    "OperationPhase",
    "ToolDisplayInfo",
    "ToolContext",
    "ToolClassification",
    "ToolDisplayRequest",
]
