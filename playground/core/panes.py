"""Pane Views — the dual-pane presentation contract, as plain data.

Invariants:
    - The input pane is editable, the output pane never is
    - Both panes of a DualPaneView come from the same EditSnapshot (same revision)
    - Text is carried verbatim: no stripping, no truncation, line breaks preserved
    - Input rows grow with the text and never drop below min_rows
    - LOADING shows the fallback title and no panes; FAILED shows the error and no
      panes, so it can never look like a working editor

Design Decisions:
    - Views are frozen dataclasses built by pure functions; the HTTP layer only
      serializes them and the page only draws them
    - Shell labels are passed in (ShellLabels), not read from settings: core stays IO-free
"""

from dataclasses import dataclass, field

from playground.core.domain_types import LoadStatus, Revision
from playground.core.edit_session import EditSnapshot
from playground.core.load_state import LoadState


@dataclass(frozen=True)
class ShellLabels:
    """Static text for the title slot and the input placeholder."""
    ready_title: str = "todo.txt"
    loading_title: str = "loading..."
    failed_title: str = "parser unavailable"
    placeholder: str = "(A) enter a task here @example +todo.txt"
    min_rows: int = 3


@dataclass(frozen=True)
class InputPane:
    """Editable raw-text surface."""
    text: str
    placeholder: str
    rows: int
    editable: bool = True


@dataclass(frozen=True)
class OutputPane:
    """Read-only derived-text surface."""
    text: str
    editable: bool = False
    monospace: bool = True


@dataclass(frozen=True)
class DualPaneView:
    """Raw and derived panes side by side, equal width by default."""
    input: InputPane
    output: OutputPane
    revision: Revision
    widths: tuple[int, int] = (50, 50)

    def to_dict(self) -> dict:
        return {
            "revision": self.revision,
            "widths": list(self.widths),
            "input": {
                "text": self.input.text,
                "placeholder": self.input.placeholder,
                "rows": self.input.rows,
                "editable": self.input.editable,
            },
            "output": {
                "text": self.output.text,
                "editable": self.output.editable,
                "monospace": self.output.monospace,
            },
        }


@dataclass(frozen=True)
class ShellView:
    """What the hosting shell shows: title slot plus panes or error."""
    status: LoadStatus
    title: str
    panes: DualPaneView | None = None
    error: dict | None = field(default=None, compare=False)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "title": self.title,
            "panes": self.panes.to_dict() if self.panes else None,
            "error": self.error,
        }


def input_rows(text: str, min_rows: int = 3) -> int:
    """Auto-expanding height: one row per line, at least min_rows."""
    return max(min_rows, text.count("\n") + 1)


def build_panes(
    snapshot: EditSnapshot, labels: ShellLabels = ShellLabels(),
) -> DualPaneView:
    """Project one snapshot onto the two panes."""
    return DualPaneView(
        input=InputPane(
            text=snapshot.raw,
            placeholder=labels.placeholder,
            rows=input_rows(snapshot.raw, labels.min_rows),
        ),
        output=OutputPane(text=snapshot.derived),
        revision=snapshot.revision,
    )


def build_shell_view(
    load_state: LoadState,
    snapshot: EditSnapshot | None = None,
    labels: ShellLabels = ShellLabels(),
) -> ShellView:
    """Select fallback, error, or editor view from the load state."""
    if load_state.status == LoadStatus.LOADING:
        return ShellView(LoadStatus.LOADING, labels.loading_title)
    if load_state.status == LoadStatus.FAILED:
        return ShellView(
            LoadStatus.FAILED, labels.failed_title,
            error=load_state.error.to_response()["error"],
        )
    panes = build_panes(snapshot, labels) if snapshot is not None else None
    return ShellView(LoadStatus.READY, labels.ready_title, panes=panes)
