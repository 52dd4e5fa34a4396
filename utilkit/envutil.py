"""Environment variable helpers and platform/terminal detection."""

from __future__ import annotations

import functools
import os
import re
import sys
from typing import Callable

_ENV_REGEX = re.compile(r"\$\{.+?\}")
_SHELL_SPECIAL = set("*#$@!?-0123456789")
_SPECIAL_COLOR_TERMS = {"alacritty"}


def _is_alnum(ch: str) -> bool:
    return ch == "_" or ("0" <= ch <= "9") or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _shell_name(s: str) -> tuple[str, int]:
    """Return the variable name after a ``$`` and how many characters it used."""
    if s[0] == "{":
        if len(s) > 2 and s[1] in _SHELL_SPECIAL and s[2] == "}":
            return s[1:2], 3
        for k in range(1, len(s)):
            if s[k] == "}":
                if k == 1:
                    return "", 2
                return s[1:k], k + 1
        return "", 1
    if s[0] in _SHELL_SPECIAL:
        return s[0:1], 1
    k = 0
    while k < len(s) and _is_alnum(s[k]):
        k += 1
    return s[:k], k


def var_replace(s: str) -> str:
    """Replace ``${var}`` and ``$var`` with environment values; unset ones become ""."""
    out = []
    i, n = 0, len(s)
    while i < n:
        j = s.find("$", i)
        if j < 0 or j + 1 >= n:
            out.append(s[i:])
            break
        out.append(s[i:j])
        name, width = _shell_name(s[j + 1:])
        if name:
            out.append(os.environ.get(name, ""))
        elif width == 0:
            out.append("$")
        i = j + 1 + width
    return "".join(out)


def _default_getter(name: str) -> str:
    return os.environ.get(name, "")


def parse_env_value(val: str, getter: Callable[[str], str] | None = None) -> str:
    """Expand ``${VAR}`` and ``${VAR | default}`` references in ``val``.

    A reference with no default whose variable is empty is left as written.
    """
    if "${" not in val:
        return val
    lookup = getter or _default_getter

    def replace(match: re.Match) -> str:
        raw = match.group(0)
        parts = raw[2:-1].split("|", 1)
        if len(parts) == 2:
            name, default = parts[0].strip(), parts[1].strip()
        else:
            name, default = parts[0].strip(), raw
        return lookup(name) or default

    return _ENV_REGEX.sub(replace, val)


def var_parse(s: str) -> str:
    """Alias of parse_env_value()."""
    return parse_env_value(s)


def getenv(name: str, default: str = "") -> str:
    """Return an environment value, or ``default`` if it is unset or empty."""
    return os.environ.get(name, "") or default


def environ() -> dict[str, str]:
    """Return the environment as a plain dict."""
    return dict(os.environ)


def is_win() -> bool:
    """Report whether running on Windows."""
    return sys.platform == "win32"


def is_windows() -> bool:
    """Alias of is_win()."""
    return is_win()


def is_mac() -> bool:
    """Report whether running on macOS."""
    return sys.platform == "darwin"


def is_linux() -> bool:
    """Report whether running on Linux."""
    return sys.platform.startswith("linux")


@functools.lru_cache(maxsize=1)
def _proc_version() -> str:
    try:
        with open("/proc/version", "rb") as fh:
            return fh.read(1024).decode("utf-8", errors="replace")
    except OSError:
        return ""


def is_wsl() -> bool:
    """Report whether running under the Windows Subsystem for Linux."""
    return "Microsoft" in _proc_version()


def is_terminal(fd: int) -> bool:
    """Report whether the file descriptor is a terminal."""
    try:
        return os.isatty(fd)
    except OSError:
        return False


def std_is_terminal() -> bool:
    """Report whether standard output is a terminal."""
    try:
        return is_terminal(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def is_support_color() -> bool:
    """Report whether the current terminal supports colour output."""
    term = os.environ.get("TERM", "")
    if "xterm" in term or term in _SPECIAL_COLOR_TERMS:
        return True
    if os.environ.get("ConEmuANSI", "") == "ON":
        return True
    if os.environ.get("ANSICON", ""):
        return True
    return is_support_256_color()


def is_support_256_color() -> bool:
    """Report whether the current terminal supports 256 colours."""
    if "256color" in os.environ.get("TERM", ""):
        return True
    return is_support_true_color()


def is_support_true_color() -> bool:
    """Report whether the current terminal supports true colour."""
    return "truecolor" in os.environ.get("COLORTERM", "")