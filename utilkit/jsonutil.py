"""JSON encoding and decoding helpers, including comment stripping."""

from __future__ import annotations

import dataclasses
import io
import json
import os
import re
from typing import IO, Any

_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}
_LINE_ESCAPES = {"\u2028": "\\u2028", "\u2029": "\\u2029"}
_ML_COMMENTS = re.compile(r"/\*.*?\*/\s*", re.S)
_WHITESPACE = " \t\n\r"


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any, indent: int | None = None, escape_html: bool = True) -> str:
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(
        value,
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=separators,
        default=_default,
    )
    escapes = dict(_LINE_ESCAPES)
    if escape_html:
        escapes.update(_HTML_ESCAPES)
    for char, escaped in escapes.items():
        text = text.replace(char, escaped)
    return text


def write_file(file_path: str | os.PathLike, data: Any) -> None:
    """Encode ``data`` and write it to a file."""
    payload = encode(data)
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o664)
    with os.fdopen(fd, "wb") as fh:
        fh.write(payload)


def read_file(file_path: str | os.PathLike) -> Any:
    """Read and decode a JSON file."""
    with open(file_path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def encode(value: Any) -> bytes:
    """Encode ``value`` to compact JSON bytes."""
    return _dumps(value).encode("utf-8")


def encode_to_writer(value: Any, writer: IO) -> None:
    """Write ``value`` as JSON followed by a newline."""
    text = _dumps(value) + "\n"
    if isinstance(writer, io.TextIOBase):
        writer.write(text)
    else:
        writer.write(text.encode("utf-8"))


def encode_unescape_html(value: Any) -> bytes:
    """Encode ``value`` without escaping HTML characters, newline-terminated."""
    return (_dumps(value, escape_html=False) + "\n").encode("utf-8")


def decode(data: bytes | str) -> Any:
    """Decode JSON bytes."""
    return json.loads(data)


def decode_string(text: str) -> Any:
    """Decode a JSON string."""
    return json.loads(text)


def decode_reader(reader: IO) -> Any:
    """Decode JSON read from a file-like object."""
    return json.loads(reader.read())


def pretty(value: Any) -> str:
    """Return ``value`` as JSON indented by four spaces."""
    return _dumps(value, indent=4)


def _scan_quoted(src: str, pos: int, quote: str) -> int:
    """Return the end of a quoted literal whose body starts at ``pos``."""
    n = len(src)
    while pos < n:
        ch = src[pos]
        if ch == quote:
            return pos + 1
        if ch == "\n":
            return pos
        if ch == "\\" and pos + 1 < n and src[pos + 1] != "\n":
            pos += 2
        else:
            pos += 1
    return n


def _strip_tokens(src: str) -> str:
    """Drop comments and whitespace outside of string literals."""
    out = []
    pos, n = 0, len(src)
    while pos < n:
        ch = src[pos]
        if ch in _WHITESPACE:
            pos += 1
        elif src.startswith("//", pos):
            end = src.find("\n", pos)
            pos = n if end < 0 else end
        elif src.startswith("/*", pos):
            end = src.find("*/", pos + 2)
            pos = n if end < 0 else end + 2
        elif ch in "\"'":
            end = _scan_quoted(src, pos + 1, ch)
            out.append(src[pos:end])
            pos = end
        elif ch == "`":
            end = src.find("`", pos + 1)
            end = n if end < 0 else end + 1
            out.append(src[pos:end])
            pos = end
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


def strip_comments(src: str) -> str:
    """Remove ``/* */`` and ``//`` comments from JSON text.

    When line comments are present, whitespace outside strings is removed too.
    """
    if "/*" in src:
        src = _ML_COMMENTS.sub("", src)
    if "//" not in src:
        return src.strip()
    return _strip_tokens(src)