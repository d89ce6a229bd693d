"""String helpers: case conversion, lenient number parsing, trimming, splitting."""

from __future__ import annotations

import re
import struct
from collections.abc import Iterable

__all__ = [
    "to_lower",
    "to_upper",
    "to_char",
    "to_short",
    "to_int",
    "to_long",
    "to_float",
    "to_double",
    "to_string",
    "trim_start",
    "trim_end",
    "trim",
    "split",
    "split_any",
    "join",
    "capitalize",
    "compare",
    "format",
    "is_numeric",
]

DEFAULT_TRIM = " \r\n"
FORMAT_LIMIT = 1023

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_lower(text: str) -> str:
    return text.lower()


def to_upper(text: str) -> str:
    return text.upper()


def to_char(text: str) -> str:
    """Return the first non-whitespace character, or ``""`` when there is none."""
    stripped = text.lstrip()
    return stripped[0] if stripped else ""


def _parse_int(text: str, bits: int) -> int:
    match = _INT_RE.match(text)
    if match is None:
        return 0
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return max(low, min(high, int(match.group(1))))


def to_short(text: str) -> int:
    """Parse a leading 16-bit integer; 0 when none, clamped on overflow."""
    return _parse_int(text, 16)


def to_int(text: str) -> int:
    """Parse a leading 32-bit integer; 0 when none, clamped on overflow."""
    return _parse_int(text, 32)


def to_long(text: str) -> int:
    """Parse a leading 64-bit integer; 0 when none, clamped on overflow."""
    return _parse_int(text, 64)


def to_double(text: str) -> float:
    """Parse a leading decimal number; 0.0 when none."""
    match = _FLOAT_RE.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def to_float(text: str) -> float:
    """Like :func:`to_double`, rounded to single precision."""
    value = to_double(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def to_string(value: object) -> str:
    """Render numbers the way a default text stream does (``%g`` for floats)."""
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def trim_start(text: str, chars: str = DEFAULT_TRIM) -> str:
    return text.lstrip(chars)


def trim_end(text: str, chars: str = DEFAULT_TRIM) -> str:
    return text.rstrip(chars)


def trim(text: str, chars: str = DEFAULT_TRIM) -> str:
    return text.strip(chars)


def split(text: str, separator: str | None = None) -> list[str]:
    """Split on whitespace runs, or on ``separator`` dropping one trailing empty field."""
    if separator is None:
        return text.split()
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def split_any(text: str, separators: str) -> list[str]:
    """Split at every character found in ``separators``, keeping empty fields."""
    parts: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in separators:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def join(items: Iterable[str], separator: str = " ") -> str:
    """Concatenate items, each one followed by ``separator``."""
    return "".join(f"{item}{separator}" for item in items)


def capitalize(text: str) -> str:
    """Upper-case a leading ASCII lowercase letter; any other leading character is dropped."""
    if not text:
        return ""
    head = text[0]
    return (head.upper() if "a" <= head <= "z" else "") + text[1:]


def compare(a: str, b: str, ignore_case: bool = False) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    if ignore_case:
        a, b = a.lower(), b.lower()
    return (a > b) - (a < b)


def format(fmt: str, *args: object) -> str:  # noqa: A001
    """printf-style formatting, truncated to 1023 characters."""
    text = fmt % args if args else fmt
    return text[:FORMAT_LIMIT]


def is_numeric(text: str) -> bool:
    """True when ``text`` holds only digits and at most one dot."""
    return all(ch in "0123456789." for ch in text) and text.count(".") <= 1