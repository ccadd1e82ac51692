"""Session Schemas — Pydantic models for the edit-session API boundary.

Invariants:
    - EditRequest.raw accepts any string, including "" (no stripping, no length cap)
    - Response models are built from core views via model_validate(view.to_dict())

Design Decisions:
    - No field validators on raw text: the parser owns what the text means
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class EditRequest(BaseModel):
    """Full replacement of the session's raw text."""
    raw: str = Field(description="Complete current text of the input pane")


class InputPaneResponse(BaseModel):
    text: str
    placeholder: str
    rows: int = Field(ge=1)
    editable: bool


class OutputPaneResponse(BaseModel):
    text: str
    editable: bool
    monospace: bool


class PanesResponse(BaseModel):
    """Both panes of one snapshot."""
    revision: int = Field(ge=0)
    widths: list[int]
    input: InputPaneResponse
    output: OutputPaneResponse


class ShellResponse(BaseModel):
    """Title slot plus panes (ready) or error (failed)."""
    status: str
    title: str
    panes: PanesResponse | None = None
    error: dict[str, Any] | None = None


class SessionResponse(BaseModel):
    """Edit session — public-facing session data."""
    id: UUID
    status: str
    panes: PanesResponse
