"""Sorting stack ``a`` when it holds at most five numbers."""

from __future__ import annotations

from .stacks import Stacks


def is_sorted(stacks: Stacks) -> bool:
    """True if stack ``a`` is in ascending order from top to bottom."""
    values = stacks.values_a()
    return all(first <= second for first, second in zip(values, values[1:]))


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two or three numbers."""
    a = stacks.a
    if len(a) == 2:
        stacks.sa()
        return
    if a[0].value > a[1].value and a[0].value > a[2].value:
        stacks.ra()
    if a[1].value > a[0].value and a[1].value > a[2].value:
        stacks.rra()
    if a[0].value > a[1].value:
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort four indexed numbers: park the smallest on ``b``, sort three."""
    while len(stacks.a) > 3:
        if stacks.a[0].index == 0:
            stacks.pb()
        else:
            stacks.ra()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five indexed numbers: park the two smallest on ``b``, sort three."""
    while len(stacks.a) > 3:
        if stacks.a[0].index in (0, 1):
            stacks.pb()
        else:
            stacks.ra()
    b = stacks.b
    if b[0].value < b[1].value:
        stacks.sb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()