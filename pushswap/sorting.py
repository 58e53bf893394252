"""Choosing the instructions that sort stack ``a`` using stack ``b``."""

from itertools import pairwise
from typing import Iterable, List

from pushswap.analysis import (
    cheapest_index,
    is_above_median,
    smallest_index,
    target_index,
)
from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` is non-empty and in ascending order."""
    items = list(values)
    if not items:
        return False
    return all(first <= second for first, second in pairwise(items))


def _repeat(action, stack: str, times: int) -> None:
    for _ in range(times):
        action(stack)


def _steps_to_top(index: int, size: int) -> int:
    return index if is_above_median(index, size) else size - index


def _bring_to_top(stacks: Stacks, stack: str, index: int) -> None:
    """Rotate ``stack`` the short way round until ``index`` is on top."""
    size = len(stacks.a if stack == "a" else stacks.b)
    if is_above_median(index, size):
        _repeat(stacks.rotate, stack, index)
    else:
        _repeat(stacks.reverse_rotate, stack, size - index)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most three elements."""
    a = stacks.a
    if len(a) == 3:
        first, second, third = a
        if first > second and first > third:
            stacks.rotate("a")
        elif second > first and second > third:
            stacks.reverse_rotate("a")
    if len(a) >= 2 and a[0] > a[1]:
        stacks.swap("a")


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four or five elements.

    The smallest elements are moved to ``b`` until three remain, those
    three are sorted, and everything in ``b`` is pushed back.
    """
    if is_sorted(stacks.a):
        return
    while len(stacks.a) > 3:
        _bring_to_top(stacks, "a", smallest_index(stacks.a))
        stacks.push("b")
    sort_three(stacks)
    while stacks.b:
        stacks.push("a")


def _move_cheapest(stacks: Stacks) -> None:
    """Bring the cheapest element of ``b`` above its target in ``a`` and push it."""
    a, b = stacks.a, stacks.b
    index = cheapest_index(a, b)
    target = target_index(a, b[index])
    b_up = is_above_median(index, len(b))
    a_up = is_above_median(target, len(a))
    b_steps = _steps_to_top(index, len(b))
    a_steps = _steps_to_top(target, len(a))
    if a_up == b_up:
        shared = min(a_steps, b_steps)
        both = stacks.rotate if a_up else stacks.reverse_rotate
        _repeat(both, "both", shared)
        a_steps -= shared
        b_steps -= shared
    _repeat(stacks.rotate if b_up else stacks.reverse_rotate, "b", b_steps)
    _repeat(stacks.rotate if a_up else stacks.reverse_rotate, "a", a_steps)
    stacks.push("a")


def sort_all(stacks: Stacks) -> None:
    """Sort a stack ``a`` of any size by cheapest insertion from ``b``."""
    while len(stacks.a) > 3:
        stacks.push("b")
    sort_three(stacks)
    while stacks.b:
        _move_cheapest(stacks)
    if stacks.a:
        _bring_to_top(stacks, "a", smallest_index(stacks.a))


def push_swap(values: Iterable[int]) -> List[str]:
    """The instructions that sort ``values``, top of the stack first."""
    stacks = Stacks(values)
    if is_sorted(stacks.a):
        return []
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        sort_all(stacks)
    return list(stacks.operations)