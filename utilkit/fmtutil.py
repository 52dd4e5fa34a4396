"""Formatting helpers for sizes, durations and argument lists."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from utilkit import arrutil, jsonutil

ONE_KBYTE = 1024
ONE_MBYTE = 1024 * 1024
ONE_GBYTE = 1024 * 1024

_TIME_FORMATS: tuple[tuple[int, int | None, str], ...] = (
    (0, None, "< 1 sec"),
    (1, None, "1 sec"),
    (2, 1, "secs"),
    (60, None, "1 min"),
    (120, 60, "mins"),
    (3600, None, "1 hr"),
    (7200, 3600, "hrs"),
    (86400, None, "1 day"),
    (172800, 86400, "days"),
)


def data_size(size: int) -> str:
    """Format a byte count as B, K, M or G."""
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return "%.2fK" % (size / 1024)
    if size < 1024 * 1024 * 1024:
        return "%.2fM" % (size / 1024 / 1024)
    return "%.2fG" % (size / 1024 / 1024 / 1024)


def pretty_json(value: Any) -> str:
    """Return ``value`` as JSON indented by four spaces."""
    return jsonutil.pretty(value)


def strings_to_ints(ss: Iterable[str]) -> list[int]:
    """Convert decimal strings to ints; raise ValueError on a bad item."""
    return arrutil.strings_to_ints(ss)


def args_with_spaces(args: Sequence[Any]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(str(arg) for arg in args)


def how_long_ago(sec: int) -> str:
    """Describe a number of seconds, e.g. ``"5 mins"``."""
    sec = int(sec)
    uppers = [item[0] for item in _TIME_FORMATS[1:]] + [None]
    for (threshold, divisor, message), upper in zip(_TIME_FORMATS, uppers):
        if sec >= threshold and (upper is None or sec < upper):
            if divisor is None:
                return message
            return f"{sec // divisor} {message}"
    return "unknown"