"""Capability Status — the shell view for the current load state.

Invariants:
    - LOADING, READY and FAILED produce three distinguishable views
    - Never blocks on acquisition; reports whatever state the loader is in
"""

from fastapi import APIRouter, Depends

from playground.api.dependencies import get_shell_labels
from playground.core.panes import ShellLabels, build_shell_view
from playground.infrastructure.capability_loader import (
    CapabilityLoader, get_capability_loader,
)
from playground.schemas.session import ShellResponse

router = APIRouter(prefix="/api/v1/capability", tags=["capability"])


@router.get("", response_model=ShellResponse)
async def get_capability_status(
    loader: CapabilityLoader = Depends(get_capability_loader),
    labels: ShellLabels = Depends(get_shell_labels),
):
    """Title slot and status; the page polls this while the parser loads."""
    view = build_shell_view(loader.state, labels=labels)
    return ShellResponse.model_validate(view.to_dict())
