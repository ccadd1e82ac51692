"""Parser — turns todo.txt text into Task values, one task per non-blank line.

Invariants:
    - Total: every input string parses; there is no error path
    - Lines are split on "\n" and trimmed; blank lines are skipped
    - Prefix tokens (x, priority, dates) only count when followed by whitespace
    - Dates must be YYYY-MM-DD and a real calendar date, otherwise they are text
    - Without "x", a line starting with two dates and no priority is complete

Design Decisions:
    - Regex prefix matching over a combinator library: the grammar is three
      optional tokens, each anchored at the current position
"""

import re
from datetime import date
from typing import Iterator

from todotxt.priority import Priority
from todotxt.task import Task, TaskState

_COMPLETE_MARK = re.compile(r"x[ \t]+")
_PRIORITY = re.compile(r"\(([A-Z])\)[ \t]+")
_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})[ \t]+")


def _take_date(line: str, pos: int) -> tuple[date | None, int]:
    """Match "YYYY-MM-DD " at pos. Returns (date, new_pos) or (None, pos)."""
    match = _DATE.match(line, pos)
    if not match:
        return None, pos
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day), match.end()
    except ValueError:
        return None, pos


def _take_priority(line: str, pos: int) -> tuple[Priority | None, int]:
    match = _PRIORITY.match(line, pos)
    if not match:
        return None, pos
    return Priority(match.group(1)), match.end()


def _parse_state(line: str) -> tuple[TaskState, int]:
    """Parse the task prefix. Returns the state and where the description starts."""
    mark = _COMPLETE_MARK.match(line)
    if mark:
        pos = mark.end()
        completion, after_first = _take_date(line, pos)
        if completion is not None:
            creation, after_second = _take_date(line, after_first)
            if creation is not None:
                return TaskState.complete((completion, creation)), after_second
        return TaskState.complete(), pos

    priority, pos = _take_priority(line, 0)
    first, pos = _take_date(line, pos)
    second = None
    if first is not None:
        second, pos = _take_date(line, pos)

    if priority is None and first is not None and second is not None:
        return TaskState.complete((first, second)), pos
    return TaskState.incomplete(priority, first), pos


def parse_task(line: str) -> Task:
    """Parse a single line (already known to be non-blank) into a Task."""
    line = line.strip()
    state, pos = _parse_state(line)
    return Task(state=state, description=line[pos:].lstrip())


def iter_tasks(text: str) -> Iterator[Task]:
    """Yield a Task for every non-blank line of text."""
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if line:
            yield parse_task(line)


def parse_tasks(text: str) -> list[Task]:
    return list(iter_tasks(text))
