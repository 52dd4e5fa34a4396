"""Small helpers for turning errors into raised exceptions."""

from __future__ import annotations


def panic_if_err(err: BaseException | None) -> None:
    """Raise ``err`` if it is not None."""
    if err is not None:
        raise err


def panicf(fmt: str, *args: object) -> None:
    """Raise a RuntimeError with a %-formatted message."""
    raise RuntimeError(fmt % args if args else fmt)