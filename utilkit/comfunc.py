"""Shared helpers used across the package."""

from __future__ import annotations

import dataclasses
from typing import Any


def try_struct_to_map(obj: Any) -> dict[str, Any]:
    """Return the public fields of an object as a dict.

    None gives an empty dict; values that are not record-like objects raise
    TypeError.
    """
    if obj is None:
        return {}

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        items = [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    elif isinstance(obj, type) or not isinstance(getattr(obj, "__dict__", None), dict):
        raise TypeError("must be an struct")
    else:
        items = list(vars(obj).items())

    return {name: value for name, value in items if not name.startswith("_")}