"""Two stacks of integers and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class Item:
    """A value on a stack together with its rank among all the values."""

    value: int
    index: int


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))


def find_min(values: Iterable[int]) -> int:
    """Return the smallest value, or 0 for no values."""
    return min(values, default=0)


def find_max(values: Iterable[int]) -> int:
    """Return the largest value, or 0 for no values."""
    return max(values, default=0)


def index_values(values: Sequence[int]) -> List[int]:
    """Rank every value by the number of values strictly smaller than it."""
    ordered = sorted(values)
    ranks = {}
    for position, value in enumerate(ordered):
        ranks.setdefault(value, position)
    return [ranks[value] for value in values]


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of every operation applied.

    Every operation is logged even when it leaves the stacks unchanged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        numbers = list(values)
        self._a: Deque[Item] = deque(
            Item(value, index) for value, index in zip(numbers, index_values(numbers))
        )
        self._b: Deque[Item] = deque()
        self.operations: List[str] = []

    @property
    def a(self) -> List[int]:
        """Values of stack ``a``, top first."""
        return [item.value for item in self._a]

    @property
    def b(self) -> List[int]:
        """Values of stack ``b``, top first."""
        return [item.value for item in self._b]

    @property
    def a_items(self) -> Tuple[Item, ...]:
        """Items of stack ``a``, top first."""
        return tuple(self._a)

    @property
    def b_items(self) -> Tuple[Item, ...]:
        """Items of stack ``b``, top first."""
        return tuple(self._b)

    @staticmethod
    def _swap(stack: Deque[Item]) -> None:
        if len(stack) >= 2:
            first = stack.popleft()
            stack.insert(1, first)

    @staticmethod
    def _push(src: Deque[Item], dest: Deque[Item]) -> None:
        if src:
            dest.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: Deque[Item]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[Item]) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two items of ``a``."""
        self._swap(self._a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the top two items of ``b``."""
        self._swap(self._b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the top two items of both stacks."""
        self._swap(self._a)
        self._swap(self._b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self._b, self._a)
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self._a, self._b)
        self.operations.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self._a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self._b)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self._a)
        self._rotate(self._b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self._a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self._b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self._a)
        self._reverse_rotate(self._b)
        self.operations.append("rrr")