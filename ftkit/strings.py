"""Integer conversion and searching, comparing and bounded copying of strings."""

from __future__ import annotations

from typing import Optional, Tuple, Union

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap a value into the signed 32-bit range."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _as_char(c: Union[str, int]) -> Tuple[str, bool]:
    """Return the character searched for and whether the search is for the terminator."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c, c == "\0"
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF), c == 0
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps to the signed 32-bit range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus sign if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def strchr(text: str, c: Union[str, int]) -> Optional[str]:
    """Return the suffix starting at the first ``c``, or None.

    Searching for the terminator returns the empty suffix.
    """
    ch, terminator = _as_char(c)
    if terminator:
        return ""
    if ch == "\0":
        return None
    index = text.find(ch)
    return text[index:] if index >= 0 else None


def strrchr(text: str, c: Union[str, int]) -> Optional[str]:
    """Return the suffix starting at the last ``c``, or None.

    Searching for the terminator returns the empty suffix.
    """
    ch, terminator = _as_char(c)
    if terminator:
        return ""
    if ch == "\0":
        return None
    index = text.rfind(ch)
    return text[index:] if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    compared = min(len(s1), len(s2), n)
    if compared == n:
        return 0
    a = ord(s1[compared]) if compared < len(s1) else 0
    b = ord(s2[compared]) if compared < len(s2) else 0
    return a - b


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Return the suffix of ``haystack`` at the first ``needle`` lying wholly
    within its first ``length`` characters, or None. An empty needle matches
    at the start."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    return haystack[index:] if index >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; a size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` is not larger than ``dst``, ``dst`` is left as it is and
    ``size + len(src)`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)