"""String helpers: comparisons, value conversion, tokenizing and splitting."""

from __future__ import annotations

import enum
import re
from typing import Any, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

_INT_PATTERN = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)
_TRUE_WORDS = frozenset({"true", "1"})
_FALSE_WORDS = frozenset({"false", "0"})


def _upper_char(char: str) -> str:
    """Upper-case a single character, keeping it a single character."""
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _fold(value: str) -> list[str]:
    return [_upper_char(char) for char in value]


def string_less(left: str, right: str, case_sensitive: bool = True) -> bool:
    """Return True if ``left`` sorts before ``right``, optionally ignoring case."""
    if case_sensitive:
        return left < right
    return _fold(left) < _fold(right)


def char_less(left: str, right: str, case_sensitive: bool = True) -> bool:
    """Return True if character ``left`` sorts before ``right``, optionally ignoring case."""
    if case_sensitive:
        return left < right
    return _upper_char(left) < _upper_char(right)


def string_equal_case_insensitive(string1: str, string2: str) -> bool:
    """Return True if the strings are equal when compared character by character, ignoring case."""
    return _fold(string1) == _fold(string2)


def _convert_int(value: str) -> Optional[int]:
    match = _INT_PATTERN.fullmatch(value)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        number = int(digits[2:], 16)
    elif len(digits) > 1 and digits[0] == "0":
        number = int(digits[1:], 8)
    else:
        number = int(digits, 10)
    return -number if sign == "-" else number


def _convert_float(value: str) -> Optional[float]:
    if _FLOAT_PATTERN.fullmatch(value) is None:
        return None
    return float(value)


def _convert_bool(value: str) -> Optional[bool]:
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    return None


def lexical_convert(value: str, target_type: type[T]) -> Optional[T]:
    """Convert ``value`` to ``target_type``; return None if it cannot be converted.

    Integers take their base from a prefix (``0x`` hexadecimal, a leading ``0`` octal),
    booleans accept ``true``/``false`` in any case as well as ``1``/``0``, enumerations are
    looked up by member name, and any other type is called with the string.
    The whole string must be consumed by the conversion.
    """
    result: Any
    if target_type is str:
        result = value
    elif target_type is bool:
        result = _convert_bool(value)
    elif target_type is int:
        result = _convert_int(value)
    elif target_type is float:
        result = _convert_float(value)
    elif isinstance(target_type, type) and issubclass(target_type, enum.Enum):
        result = target_type.__members__.get(value)
    else:
        try:
            result = target_type(value)  # type: ignore[call-arg]
        except (ValueError, TypeError):
            result = None
    return result


def tokenize(value: str, separator: Optional[str]) -> Iterator[str]:
    """Yield the tokens of ``value`` divided by ``separator``.

    A trailing empty token is not produced; an empty or None separator yields the whole
    value as a single token.
    """
    remaining = value
    while remaining:
        index = remaining.find(separator) if separator else -1
        if index < 0:
            token, remaining = remaining, ""
        else:
            token, remaining = remaining[:index], remaining[index + len(separator):]
        if not token and not remaining:
            return
        yield token


def strip_prefix(value: str, prefix: str) -> Optional[str]:
    """Return ``value`` without ``prefix`` if it starts with it, otherwise None."""
    if value.startswith(prefix):
        return value[len(prefix):]
    return None


def split_once(value: str, separator: str) -> Tuple[str, Optional[str]]:
    """Split ``value`` on the first ``separator``; the second part is None if absent."""
    head, found, tail = value.partition(separator)
    if not found:
        return value, None
    return head, tail