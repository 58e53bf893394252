"""Position, target and cost computations used to choose the next move.

Stacks are sequences with their top at index 0.
"""

from operator import itemgetter
from typing import Optional, Sequence

from pushswap.libft.strings import INT_MAX


def is_above_median(index: int, size: int) -> bool:
    """True when ``index`` lies in the upper half of a stack of ``size``."""
    return index <= size // 2


def smallest_index(values: Sequence[int]) -> Optional[int]:
    """Index of the first smallest value, or None for an empty stack."""
    if not values:
        return None
    return min(enumerate(values), key=itemgetter(1))[0]


def biggest_index(values: Sequence[int]) -> Optional[int]:
    """Index of the first biggest value, or None for an empty stack."""
    if not values:
        return None
    return max(enumerate(values), key=itemgetter(1))[0]


def target_index(a: Sequence[int], value: int) -> Optional[int]:
    """Index in ``a`` above which ``value`` belongs.

    That is the smallest element bigger than ``value``; an element equal
    to INT_MAX never qualifies. Without one, it is the smallest element.
    """
    candidates = [(x, i) for i, x in enumerate(a) if value < x < INT_MAX]
    if not candidates:
        return smallest_index(a)
    return min(candidates)[1]


def move_cost(a: Sequence[int], b: Sequence[int], index: int) -> int:
    """Rotations needed to bring ``b[index]`` and its target in ``a`` to the top."""
    if not a:
        raise ValueError("stack a is empty")
    size_a, size_b = len(a), len(b)
    cost = index if is_above_median(index, size_b) else size_b - index
    target = target_index(a, b[index])
    cost += target if is_above_median(target, size_a) else size_a - target
    return cost


def cheapest_index(a: Sequence[int], b: Sequence[int]) -> Optional[int]:
    """Index of the first element of ``b`` with the lowest move cost."""
    if not b:
        return None
    return min(range(len(b)), key=lambda i: move_cost(a, b, i))