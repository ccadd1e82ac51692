"""Session Lifecycle — create, read, edit, and close in-memory edit sessions.

Invariants:
    - EditSession is per-editor, in-memory (module-level dict)
    - A session is only created from a READY capability; LOADING/FAILED → 503
    - PUT /text replaces the raw text and returns the pair from that same parse
    - _edit_sessions dict is the single source for in-memory sessions

Design Decisions:
    - _edit_sessions as module-level dict: single-process uvicorn, sessions are
      discarded on restart (no persistence by design of the product)
    - get_session_or_404 exported for reuse by the stream route
"""

import logging
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, status

from playground.api.dependencies import get_shell_labels
from playground.core.domain_types import SessionId
from playground.core.edit_session import EditSession
from playground.core.errors import ResourceNotFoundError
from playground.core.panes import ShellLabels, build_panes
from playground.infrastructure.capability_loader import (
    CapabilityLoader, get_capability_loader,
)
from playground.schemas.session import (
    EditRequest, PanesResponse, SessionResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])

_edit_sessions: dict[UUID, EditSession] = {}


def get_session_or_404(session_id: UUID) -> EditSession:
    """Get session or raise 404. Exported for session_stream."""
    session = _edit_sessions.get(session_id)
    if session is None:
        raise ResourceNotFoundError("Session", str(session_id))
    return session


def _session_response(
    session: EditSession, labels: ShellLabels,
) -> SessionResponse:
    view = build_panes(session.snapshot, labels)
    return SessionResponse(
        id=session.session_id,
        status=session.status.value,
        panes=PanesResponse.model_validate(view.to_dict()),
    )


@router.post(
    "", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    loader: CapabilityLoader = Depends(get_capability_loader),
    labels: ShellLabels = Depends(get_shell_labels),
):
    """Create a new edit session bound to the loaded parser."""
    capability = loader.require_capability()
    session_id = SessionId(uuid4())
    session = EditSession(capability, session_id)
    _edit_sessions[session_id] = session
    logger.info("Edit session created", extra={"session_id": str(session_id)})
    return _session_response(session, labels)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: UUID, labels: ShellLabels = Depends(get_shell_labels),
):
    """Current raw/derived pair. A faulted session reports its last good pair."""
    return _session_response(get_session_or_404(session_id), labels)


@router.put("/{session_id}/text", response_model=SessionResponse)
async def edit_session_text(
    session_id: UUID, body: EditRequest,
    labels: ShellLabels = Depends(get_shell_labels),
):
    """Replace the raw text, parse synchronously, return the new pair."""
    session = get_session_or_404(session_id)
    snapshot = session.edit(body.raw)
    logger.debug(
        "Edit applied",
        extra={"session_id": str(session_id), "revision": snapshot.revision},
    )
    return _session_response(session, labels)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: UUID):
    """Close and discard the session. Open streams receive a closed event."""
    session = get_session_or_404(session_id)
    _edit_sessions.pop(session_id, None)
    session.close()
    logger.info("Edit session closed", extra={"session_id": str(session_id)})
