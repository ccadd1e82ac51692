"""Priority — the (A)–(Z) priority of an incomplete task.

Invariants:
    - (A) is the highest priority: Priority.A > Priority.B
    - Display form is the todo.txt token, e.g. "(A)"; JSON form is the bare letter
"""

from enum import Enum
from functools import total_ordering
from string import ascii_uppercase


@total_ordering
class Priority(Enum):
    """Task priority, ordered so that earlier letters compare greater."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    @property
    def rank(self) -> int:
        """0 for (A), 25 for (Z)."""
        return ascii_uppercase.index(self.value)

    def __str__(self) -> str:
        return f"({self.value})"
