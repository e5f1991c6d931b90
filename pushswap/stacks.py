"""The two stacks of the puzzle and the eleven moves allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Node:
    """One number on a stack, with its rank among all numbers once indexed."""

    value: int
    index: int = 0


class Stacks:
    """Stacks ``a`` and ``b``; every move made is recorded in ``operations``.

    The top of a stack is its first element.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Node] = deque(Node(int(v)) for v in values)
        self.b: deque[Node] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"

    def values_a(self) -> list[int]:
        """Values on stack ``a``, top first."""
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        """Values on stack ``b``, top first."""
        return [node.value for node in self.b]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse_rotate(stack: deque[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    def sa(self) -> bool:
        """Swap the top two of ``a``."""
        if self._swap(self.a):
            self._record("sa")
            return True
        return False

    def sb(self) -> bool:
        """Swap the top two of ``b``."""
        if self._swap(self.b):
            self._record("sb")
            return True
        return False

    def ss(self) -> bool:
        """Swap the top two of both stacks at once."""
        if len(self.a) < 2 and len(self.b) < 2:
            return False
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")
        return True

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self._record("pa")
        self.a.appendleft(self.b.popleft())
        return True

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self._record("pb")
        self.b.appendleft(self.a.popleft())
        return True

    def ra(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a):
            self._record("ra")
            return True
        return False

    def rb(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b):
            self._record("rb")
            return True
        return False

    def rr(self) -> bool:
        """Rotate both stacks at once."""
        if len(self.a) < 2 and len(self.b) < 2:
            return False
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")
        return True

    def rra(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        if self._reverse_rotate(self.a):
            self._record("rra")
            return True
        return False

    def rrb(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        if self._reverse_rotate(self.b):
            self._record("rrb")
            return True
        return False

    def rrr(self) -> bool:
        """Reverse-rotate both stacks at once."""
        if len(self.a) < 2 and len(self.b) < 2:
            return False
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")
        return True