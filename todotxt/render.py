"""Renderers — the text-to-text entrypoints loaded by the playground.

Invariants:
    - Every renderer has the signature (raw: str) -> str and never raises
    - Input without any task renders as the empty string
    - Output is deterministic for a given input (pure)
"""

import json

from todotxt.parser import parse_tasks
from todotxt.task import Task


def parse(raw: str) -> str:
    """Render tasks as a pretty-printed JSON list."""
    tasks = parse_tasks(raw)
    if not tasks:
        return ""
    return json.dumps(
        [task.to_dict() for task in tasks], indent=2, ensure_ascii=False,
    )


def outline(raw: str) -> str:
    """Render tasks as an indented field outline, one block per task."""
    return "\n".join(_outline_task(task) for task in parse_tasks(raw))


def _outline_task(task: Task) -> str:
    description = task.description
    tags = [
        f"    {tag.kind.value.lower()}: {tag.value(description)}"
        for tag in task.tags()
    ]
    lines = [
        "Task",
        f"  completion_date: {_or_none(task.completion_date)}",
        f"  creation_date: {_or_none(task.creation_date)}",
        f"  description: {description!r}",
        f"  is_complete: {task.is_complete}",
        f"  priority: {_or_none(task.priority)}",
        "  tags:" if tags else "  tags: []",
        *tags,
    ]
    return "\n".join(lines)


def _or_none(value) -> str:
    if value is None:
        return "None"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
