"""Tool-call status message routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...models.tool_messaging import ToolClassification, ToolDisplayRequest
from ...services.tool_messaging import classify_tool_call
from ..middleware import SessionContext, get_session_context

router = APIRouter()


@router.post("/api/tools/display", response_model=ToolClassification)
async def tool_display(
    body: ToolDisplayRequest,
    session: SessionContext = Depends(get_session_context),
):
    """Classify a tool call and return the status message to show for it."""
    return classify_tool_call(body.tool_name, body.user_request, body.args)


__all__ = ["router"]
