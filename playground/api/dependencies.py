"""Shared route dependencies.

Design Decisions:
    - Shell labels come from settings through a dependency so every router
      renders the same titles and placeholder, and tests can override them
"""

from playground.config import get_settings
from playground.core.panes import ShellLabels


def get_shell_labels() -> ShellLabels:
    """Shell labels from settings."""
    settings = get_settings()
    return ShellLabels(
        ready_title=settings.shell_title,
        loading_title=settings.loading_title,
        failed_title=settings.failed_title,
        placeholder=settings.input_placeholder,
        min_rows=settings.input_min_rows,
    )
