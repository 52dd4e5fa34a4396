"""Helpers for lists, tuples and other sequences."""

from __future__ import annotations

import math
import random
import re
from decimal import Decimal
from typing import Any, Iterable, Sequence

_SEQUENCE_TYPES = (list, tuple, bytes, bytearray)
_INT_RE = re.compile(r"[+-]?\d+")


class InvalidTypeError(TypeError):
    """The input value is not a list, tuple or bytes sequence."""

    def __init__(self, message: str = "the input param type is invalid") -> None:
        super().__init__(message)


class Ints(list):
    """A list of ints rendered as comma-separated text."""

    def __str__(self) -> str:
        return ",".join(str(v) for v in self)

    def has(self, value: int) -> bool:
        """Report whether ``value`` is in the list."""
        return value in self


class Strings(list):
    """A list of strings rendered as comma-separated text."""

    def __str__(self) -> str:
        return ",".join(self)

    def has(self, value: str) -> bool:
        """Report whether ``value`` is in the list."""
        return value in self


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCE_TYPES)


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"cannot convert {type(value).__name__} to int")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not _INT_RE.fullmatch(text):
            raise ValueError(f"invalid integer string: {value!r}")
        return int(text)
    raise TypeError(f"cannot convert {type(value).__name__} to int")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    raise TypeError(f"cannot convert {type(value).__name__} to string")


def _must_str(value: Any) -> str:
    try:
        return _to_str(value)
    except TypeError:
        return ""


def reverse(ss: list) -> None:
    """Reverse the list in place."""
    ss.reverse()


def strings_remove(ss: Iterable[str], s: str) -> list[str]:
    """Return a new list without any item equal to ``s``."""
    return [v for v in ss if v != s]


def trim_strings(ss: Iterable[str], *cut_set: str) -> list[str]:
    """Trim every item, by the given characters or by whitespace."""
    if cut_set and cut_set[0] != "":
        chars = "".join(cut_set)
        return [s.strip(chars) for s in ss]
    return [s.strip() for s in ss]


def get_random_one(arr: Any) -> Any:
    """Return a random element of a sequence; other values come back as given."""
    if not _is_sequence(arr):
        return arr
    return random.choice(arr)


def ints_has(ints: Iterable[int], val: int) -> bool:
    """Report whether ``val`` is among ``ints``."""
    return val in ints


def strings_has(ss: Iterable[str], val: str) -> bool:
    """Report whether ``val`` is among ``ss``."""
    return val in ss


def in_strings(elem: str, ss: Iterable[str]) -> bool:
    """Report whether ``elem`` is among ``ss``."""
    return strings_has(ss, elem)


def contains(arr: Any, val: Any) -> bool:
    """Report whether the sequence holds the string or integer ``val``.

    String values match exactly in a list of strings, and case-insensitively
    against the string items of a mixed sequence. Other values are compared
    as integers, converting each item of the sequence.
    """
    if val is None or arr is None:
        return False

    if isinstance(val, str):
        if not _is_sequence(arr):
            return False
        items = list(arr)
        if all(isinstance(item, str) for item in items):
            return val in items
        folded = val.casefold()
        return any(isinstance(item, str) and item.casefold() == folded for item in items)

    try:
        int_val = _to_int(val)
        return int_val in to_int64s(arr)
    except (TypeError, ValueError):
        return False


def has_value(arr: Any, val: Any) -> bool:
    """Alias of contains()."""
    return contains(arr, val)


def not_contains(arr: Any, val: Any) -> bool:
    """Report whether the sequence does not hold ``val``."""
    return not contains(arr, val)


def join_strings(sep: str, *ss: str) -> str:
    """Join the strings with ``sep``."""
    return sep.join(ss)


def strings_join(sep: str, *ss: str) -> str:
    """Join the strings with ``sep``."""
    return sep.join(ss)


def strings_to_ints(ss: Iterable[str]) -> list[int]:
    """Convert decimal strings to ints; raise ValueError on a bad item."""
    result = []
    for s in ss:
        if not _INT_RE.fullmatch(s):
            raise ValueError(f"invalid integer string: {s!r}")
        result.append(int(s))
    return result


def strings_to_slice(ss: Iterable[str]) -> list[Any]:
    """Return the strings as a plain list."""
    return list(ss)


def to_int64s(arr: Any) -> list[int]:
    """Convert every item of a sequence to int."""
    if not _is_sequence(arr):
        raise InvalidTypeError()
    return [_to_int(v) for v in arr]


def must_to_int64s(arr: Any) -> list[int]:
    """Like to_int64s(), but return an empty list on failure."""
    try:
        return to_int64s(arr)
    except (TypeError, ValueError):
        return []


def slice_to_int64s(arr: Sequence[Any]) -> list[int]:
    """Convert every item to int, using 0 for items that cannot be converted."""
    result = []
    for v in arr:
        try:
            result.append(_to_int(v))
        except (TypeError, ValueError):
            result.append(0)
    return result


def to_strings(arr: Any) -> list[str]:
    """Convert every item of a sequence to a string."""
    if not _is_sequence(arr):
        raise InvalidTypeError()
    return [_to_str(v) for v in arr]


def must_to_strings(arr: Any) -> list[str]:
    """Like to_strings(), but return an empty list on failure."""
    try:
        return to_strings(arr)
    except TypeError:
        return []


def slice_to_strings(arr: Sequence[Any]) -> list[str]:
    """Convert every item to a string, using "" for unconvertible items."""
    return [_must_str(v) for v in arr]


def slice_to_string(*args: Any) -> str:
    """Render the arguments as ``[a,b,c]``."""
    return to_string(list(args))


def to_string(arr: Sequence[Any] | None) -> str:
    """Render a sequence as ``[a,b,c]``."""
    if arr is None:
        return "[]"
    return "[" + ",".join(_must_str(v) for v in arr) + "]"


def join_slice(sep: str, *args: Any) -> str:
    """Join the arguments, converted to strings, with ``sep``."""
    return sep.join(_must_str(v) for v in args)