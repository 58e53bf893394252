"""The two stacks and the instructions that rearrange them."""

from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Tuple


class Stacks:
    """Stacks ``a`` and ``b`` of integers with the sorting instructions.

    The top of each stack is at index 0. Each instruction that is carried
    out is appended to ``operations`` under its name (``sa``, ``pb``,
    ``rrr`` ...). A single-stack instruction with nothing to do is not
    recorded; an instruction on both stacks always is.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: Deque[int] = deque(int(v) for v in values)
        self.b: Deque[int] = deque()
        self.operations: List[str] = []

    def _selected(self, stack: str) -> List[Deque[int]]:
        if stack == "a":
            return [self.a]
        if stack == "b":
            return [self.b]
        if stack == "both":
            return [self.a, self.b]
        raise ValueError(f"unknown stack {stack!r}; expected 'a', 'b' or 'both'")

    def _run(
        self,
        stack: str,
        prefix: str,
        both_suffix: str,
        action: Callable[[Deque[int]], None],
    ) -> None:
        changed = False
        for selected in self._selected(stack):
            if len(selected) >= 2:
                action(selected)
                changed = True
        if stack == "both":
            self.operations.append(prefix + both_suffix)
        elif changed:
            self.operations.append(prefix + stack)

    @staticmethod
    def _swap_top(items: Deque[int]) -> None:
        items[0], items[1] = items[1], items[0]

    def swap(self, stack: str) -> None:
        """Swap the two top elements of ``a``, ``b`` or both."""
        self._run(stack, "s", "s", self._swap_top)

    def push(self, target: str) -> None:
        """Move the top of the other stack onto ``target`` ("a" or "b")."""
        if target == "a":
            source, dest = self.b, self.a
        elif target == "b":
            source, dest = self.a, self.b
        else:
            raise ValueError(f"unknown stack {target!r}; expected 'a' or 'b'")
        if not source:
            return
        dest.appendleft(source.popleft())
        self.operations.append("p" + target)

    def rotate(self, stack: str) -> None:
        """Move the top element of ``a``, ``b`` or both to the bottom."""
        self._run(stack, "r", "r", lambda items: items.rotate(-1))

    def reverse_rotate(self, stack: str) -> None:
        """Move the bottom element of ``a``, ``b`` or both to the top."""
        self._run(stack, "rr", "r", lambda items: items.rotate(1))

    def apply(self, operation: str) -> None:
        """Carry out an instruction given by name, such as ``"rra"``."""
        try:
            kind, stack = _OPERATIONS[operation]
        except KeyError:
            raise ValueError(f"unknown operation {operation!r}") from None
        handlers: Dict[str, Callable[[str], None]] = {
            "swap": self.swap,
            "push": self.push,
            "rotate": self.rotate,
            "reverse_rotate": self.reverse_rotate,
        }
        handlers[kind](stack)

    def render(self, stack: str) -> str:
        """Text listing of one stack, e.g. ``"a: 1 2 3 \\n"``; empty if empty."""
        if stack == "a":
            items = self.a
        elif stack == "b":
            items = self.b
        else:
            raise ValueError(f"unknown stack {stack!r}; expected 'a' or 'b'")
        if not items:
            return ""
        return f"{stack}: " + "".join(f"{value} " for value in items) + "\n"

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"


_OPERATIONS: Dict[str, Tuple[str, str]] = {
    "sa": ("swap", "a"),
    "sb": ("swap", "b"),
    "ss": ("swap", "both"),
    "pa": ("push", "a"),
    "pb": ("push", "b"),
    "ra": ("rotate", "a"),
    "rb": ("rotate", "b"),
    "rr": ("rotate", "both"),
    "rra": ("reverse_rotate", "a"),
    "rrb": ("reverse_rotate", "b"),
    "rrr": ("reverse_rotate", "both"),
}