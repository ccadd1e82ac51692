"""Task — a single complete or incomplete todo.txt task.

Invariants:
    - A complete task never has a priority
    - An incomplete task never has a completion date
    - Completion and creation dates come as a pair on complete tasks (both or neither)
    - to_dict() omits absent dates and priority; "tags" and "type" are always present

Design Decisions:
    - TaskState as one frozen dataclass with is_complete: one shape for both
      variants keeps to_dict()/__str__ flat, constructors enforce the invariants
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from todotxt.priority import Priority
from todotxt.tags import Tag, iter_tags


@dataclass(frozen=True)
class TaskState:
    """Disjoint complete/incomplete state of a task."""
    is_complete: bool
    priority: Priority | None = None
    completion_date: date | None = None
    creation_date: date | None = None

    @classmethod
    def complete(
        cls, dates: tuple[date, date] | None = None,
    ) -> "TaskState":
        if dates is None:
            return cls(is_complete=True)
        completion, creation = dates
        return cls(
            is_complete=True, completion_date=completion,
            creation_date=creation,
        )

    @classmethod
    def incomplete(
        cls, priority: Priority | None = None,
        creation_date: date | None = None,
    ) -> "TaskState":
        return cls(
            is_complete=False, priority=priority, creation_date=creation_date,
        )


@dataclass(frozen=True)
class Task:
    """A parsed task: its state plus the free-text description."""
    state: TaskState
    description: str

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def priority(self) -> Priority | None:
        return self.state.priority

    @property
    def completion_date(self) -> date | None:
        return self.state.completion_date

    @property
    def creation_date(self) -> date | None:
        return self.state.creation_date

    def tags(self) -> Iterator[Tag]:
        """Lazily iterate over the tags in the description."""
        return iter_tags(self.description)

    def to_dict(self) -> dict:
        """Serialize to the todo.txt JSON shape."""
        data: dict = {}
        if self.completion_date is not None:
            data["completion_date"] = self.completion_date.isoformat()
        if self.creation_date is not None:
            data["creation_date"] = self.creation_date.isoformat()
        data["description"] = self.description
        if self.priority is not None:
            data["priority"] = self.priority.value
        data["tags"] = [tag.to_dict() for tag in self.tags()]
        data["type"] = "COMPLETE" if self.is_complete else "INCOMPLETE"
        return data

    def __str__(self) -> str:
        parts = []
        if self.is_complete:
            parts.append("x")
        if self.priority is not None:
            parts.append(str(self.priority))
        if self.completion_date is not None:
            parts.append(self.completion_date.isoformat())
        if self.creation_date is not None:
            parts.append(self.creation_date.isoformat())
        parts.append(self.description)
        return " ".join(parts)
