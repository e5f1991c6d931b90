"""Sorting larger stacks: push ``a`` to ``b`` in chunks, then pull back."""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import Node, Stacks


def find_max(nodes: Sequence[Node]) -> Node | None:
    """The first node with the largest value, or None if there are none."""
    best: Node | None = None
    for node in nodes:
        if best is None or node.value > best.value:
            best = node
    return best


def find_next_below(nodes: Sequence[Node], top: Node) -> Node | None:
    """The node whose value is the largest one below ``top``'s.

    Gives ``top`` itself when no value is smaller, and None for no nodes.
    """
    if not nodes:
        return None
    below: Node | None = None
    for node in nodes:
        if node.value < top.value and (below is None or node.value > below.value):
            below = node
    return top if below is None else below


def _position(nodes: Sequence[Node], target: Node) -> int:
    return next(
        (pos for pos, node in enumerate(nodes) if node.value == target.value), 0
    )


def _bring_to_top(stacks: Stacks, target: Node, forward: bool) -> None:
    move = stacks.rb if forward else stacks.rrb
    while stacks.b[0].value != target.value:
        move()


def push_chunks(stacks: Stacks) -> None:
    """Move all of ``a`` onto ``b`` in rank chunks; ``a`` needs indices set."""
    divider = 5 if len(stacks.a) > 200 else 3
    while len(stacks.a) > 3:
        div = len(stacks.a) // divider
        size = len(stacks.b)
        pushed = 0
        while pushed <= div and len(stacks.a) > 3:
            index = stacks.a[0].index
            if index <= div // 2 + size:
                stacks.pb()
                stacks.rb()
                pushed += 1
            elif index <= div + size:
                stacks.pb()
                pushed += 1
            else:
                stacks.ra()
    for _ in range(3):
        stacks.pb()


def pull_back(stacks: Stacks) -> None:
    """Return everything from ``b`` to ``a`` largest first, leaving ``a`` sorted."""
    while stacks.b:
        max_node = find_max(stacks.b)
        max_pos = _position(stacks.b, max_node)
        below = find_next_below(stacks.b, max_node)
        below_pos = _position(stacks.b, below)
        half = len(stacks.b) // 2
        if abs(half - max_pos) < abs(half - below_pos):
            _bring_to_top(stacks, below, below_pos <= half)
            stacks.pa()
        _bring_to_top(stacks, max_node, max_pos <= len(stacks.b) // 2)
        stacks.pa()
        a = stacks.a
        if len(a) > 1 and a[1].value < a[0].value:
            stacks.sa()