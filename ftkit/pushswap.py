"""Parse a list of integers and print the stack operations that sort it."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from ftkit.stack import Stacks, find_max, is_sorted

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
WHITESPACE = " \t\n\r\v\f"


class PushSwapError(ValueError):
    """The input is not a list of distinct integers in the 32-bit range."""


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("+", "-"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def _in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def is_valid_number(text: Optional[str]) -> bool:
    """True for an optional sign followed by digits only, within the int range."""
    if not text:
        return False
    sign, digits = _split_sign(text)
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        return False
    return _in_range(sign * int(digits))


def parse_int(text: str) -> int:
    """Parse an optional sign and the digits that follow it.

    Parsing stops at the first non-digit. A value outside the signed 32-bit
    range raises PushSwapError.
    """
    sign, rest = _split_sign(text)
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if not _in_range(sign * result):
            raise PushSwapError(f"number out of range: {text!r}")
    return sign * result


def split_words(text: str, separators: str) -> List[str]:
    """Split ``text`` into the maximal runs of characters not in ``separators``."""
    words: List[str] = []
    current: List[str] = []
    for ch in text:
        if ch in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn command arguments into a list of distinct integers.

    A single argument is split on whitespace; several arguments are taken
    one number each.
    """
    if not args:
        return []
    words = split_words(args[0], WHITESPACE) if len(args) == 1 else list(args)
    values: List[int] = []
    seen = set()
    for word in words:
        if not is_valid_number(word):
            raise PushSwapError(f"not a valid number: {word!r}")
        number = parse_int(word)
        if number in seen:
            raise PushSwapError(f"duplicate number: {number}")
        seen.add(number)
        values.append(number)
    return values


def sort_two(stacks: Stacks) -> None:
    """Sort the two items of ``a``."""
    a = stacks.a
    if len(a) >= 2 and a[0] > a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three items of ``a`` in at most two operations."""
    a = stacks.a
    largest = find_max(a)
    if a[0] == largest:
        stacks.ra()
    elif a[1] == largest:
        stacks.rra()
    a = stacks.a
    if a[0] > a[1]:
        stacks.sa()


def _bring_min_to_top(stacks: Stacks) -> None:
    values = stacks.a
    pos = values.index(min(values))
    size = len(values)
    if pos <= size // 2:
        for _ in range(pos):
            stacks.ra()
    else:
        for _ in range(size - pos):
            stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Sort four items: park the smallest on ``b``, sort three, bring it back."""
    _bring_min_to_top(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five items: park the two smallest on ``b``, sort three, bring them back."""
    _bring_min_to_top(stacks)
    stacks.pb()
    _bring_min_to_top(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort on the ranks of the items of ``a``, using ``b`` as bucket."""
    size = len(stacks.a_items)
    max_bits = (size - 1).bit_length() if size > 0 else 0
    for bit in range(max_bits):
        for _ in range(size):
            if (stacks.a_items[0].index >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b_items:
            stacks.pa()


def dispatch_sort(stacks: Stacks) -> None:
    """Pick the sort suited to the number of items on ``a``."""
    size = len(stacks.a_items)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)


def solve(values: Sequence[int]) -> List[str]:
    """Return the operations that sort ``values``; none when already sorted."""
    numbers = list(values)
    if len(set(numbers)) != len(numbers):
        raise PushSwapError("duplicate numbers")
    if is_sorted(numbers):
        return []
    stacks = Stacks(numbers)
    dispatch_sort(stacks)
    return list(stacks.operations)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: print one operation per line, or ``Error`` on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())