"""Command-line helpers: build and parse lines, run commands, read input."""

from __future__ import annotations

import getpass
import os
import posixpath
import subprocess
import sys
from typing import IO, Iterable

from utilkit import cmdline

_DEFAULT_PROMPT = "Enter Password: "


def line_build(bin_file: str, args: Iterable[str]) -> str:
    """Build a command-line string from a binary and its arguments."""
    return cmdline.line_build(bin_file, args)


def build_line(bin_file: str, args: Iterable[str]) -> str:
    """Alias of line_build()."""
    return cmdline.line_build(bin_file, args)


def string_to_os_args(line: str) -> list[str]:
    """Parse a command-line string into an argument list."""
    return cmdline.parse_line(line)


def parse_line(line: str) -> list[str]:
    """Alias of string_to_os_args()."""
    return cmdline.parse_line(line)


def exec_cmd(
    bin_name: str, args: Iterable[str], work_dir: str | os.PathLike | None = None
) -> str:
    """Run a program and return its standard output.

    Raises subprocess.CalledProcessError if the program exits non-zero.
    """
    result = subprocess.run(
        [bin_name, *args],
        cwd=work_dir or None,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def exec_line(cmd_line: str, work_dir: str | os.PathLike | None = None) -> str:
    """Parse a command line and run it, returning its standard output."""
    bin_name, args = cmdline.LineParser(cmd_line).bin_and_args()
    if not bin_name:
        raise ValueError("empty command line")
    return exec_cmd(bin_name, args, work_dir)


def shell_exec(cmd_line: str, shell: str = "sh") -> str:
    """Run a command line through a shell and return its standard output."""
    return exec_cmd(shell, ["-c", cmd_line])


def workdir() -> str:
    """Return the current working directory."""
    return os.getcwd()


def bin_file() -> str:
    """Return the path the running program was started as."""
    return sys.argv[0]


def bin_dir() -> str:
    """Return the directory part of bin_file()."""
    return posixpath.normpath(posixpath.dirname(bin_file()) or ".")


def _ask(question: str) -> None:
    if question:
        sys.stdout.write(question)
        sys.stdout.flush()


def read_input(question: str = "", stream: IO[str] | None = None) -> str:
    """Read one line of input, stripped; return "" at end of input."""
    _ask(question)
    stream = stream if stream is not None else sys.stdin
    return stream.readline().strip()


def read_line(question: str = "", stream: IO[str] | None = None) -> str:
    """Read one line of input, stripped; raise EOFError at end of input."""
    _ask(question)
    stream = stream if stream is not None else sys.stdin
    line = stream.readline()
    if line == "":
        raise EOFError("end of input")
    return line.strip()


def read_first(question: str = "", stream: IO[str] | None = None) -> str:
    """Read the first character of input; raise EOFError at end of input."""
    _ask(question)
    stream = stream if stream is not None else sys.stdin
    char = stream.read(1)
    if char == "":
        raise EOFError("end of input")
    return char


def read_password(question: str | None = None) -> str:
    """Read a password from the terminal without echo; return "" on failure."""
    prompt = question if question is not None else _DEFAULT_PROMPT
    try:
        return getpass.getpass(prompt)
    except (EOFError, OSError):
        return ""