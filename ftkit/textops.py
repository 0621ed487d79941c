"""Splitting, trimming, slicing, joining and mapping of strings."""

from __future__ import annotations

from typing import Callable, List, Optional


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character in order.

    A returned string replaces the character; None leaves it unchanged.
    The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)