"""Build command-line strings from arguments and parse them back."""

from __future__ import annotations

from typing import Iterable

from utilkit.envutil import var_replace

_QUOTES = ("'", '"')


class LineBuilder:
    """Build a command line, quoting arguments that need it."""

    def __init__(self, bin_file: str | None = None, *args: str) -> None:
        self._buf: str | None = None
        if bin_file is not None:
            self.add_arg(bin_file)
            self.add_array(args)

    def add_arg(self, arg: str) -> None:
        """Append one argument."""
        self.write_string(arg)

    def add_args(self, *args: str) -> None:
        """Append several arguments."""
        self.add_array(args)

    def add_array(self, args: Iterable[str]) -> None:
        """Append every argument of an iterable."""
        for arg in args:
            self.write_string(arg)

    def write_string(self, arg: str) -> int:
        """Append an argument, quoting it if needed; return the length written."""
        quote = ""
        if '"' in arg:
            quote = "'"
        elif arg == "" or "'" in arg or " " in arg:
            quote = '"'

        if self._buf is None:
            self._buf = ""
        else:
            self._buf += " "

        if not quote:
            self._buf += arg
            return len(arg) + 1

        self._buf += quote + arg + quote
        return len(arg) + 3

    def reset(self) -> None:
        """Clear everything written so far."""
        self._buf = None

    def __str__(self) -> str:
        return self._buf or ""

    def __len__(self) -> int:
        return len(self._buf or "")


def line_build(bin_file: str, args: Iterable[str]) -> str:
    """Build a command-line string from a binary and its arguments."""
    return str(LineBuilder(bin_file, *args))


class LineParser:
    """Split a command-line string into arguments, honouring quotes."""

    def __init__(self, line: str, parse_env: bool = False) -> None:
        self.line = line
        self.parse_env = parse_env
        self._parsed = False
        self._args: list[str] = []

    def also_env_parse(self) -> list[str]:
        """Parse the line, expanding environment variables first."""
        self.parse_env = True
        return self.parse()

    def parse(self) -> list[str]:
        """Parse the line into a list of arguments."""
        if self._parsed:
            return self._args
        self._parsed = True

        self.line = self.line.strip()
        if not self.line:
            return self._args

        if self.parse_env:
            self.line = var_replace(self.line)

        nodes = self.line.split(" ")
        if len(nodes) == 1:
            self._args = nodes
            return self._args

        quote_char = ""
        full_node = ""
        for node in nodes:
            if not node:
                continue

            start, end = node[0], node[-1]
            clear = False
            if start in _QUOTES:
                if not quote_char:
                    if end == start:
                        self._args.append(node[1:-1])
                        continue
                    full_node += node[1:]
                    quote_char = start
                elif quote_char == start:
                    self._append_with_prefix(node.strip(quote_char), full_node)
                    clear = True
                elif quote_char == end:
                    self._append_with_prefix(node[:-1], full_node)
                    clear = True
                else:
                    full_node += " " + node
            elif end in _QUOTES:
                if not quote_char or quote_char == end:
                    self._append_with_prefix(node[:-1], full_node)
                    clear = True
                else:
                    full_node += " " + node
            elif quote_char:
                full_node += " " + node
            else:
                self._args.append(node)

            if clear:
                quote_char, full_node = "", ""

        if full_node:
            self._args.append(full_node)
        return self._args

    def bin_and_args(self) -> tuple[str, list[str]]:
        """Return the binary name and the remaining arguments."""
        args = self.parse()
        if not args:
            return "", []
        return args[0], list(args[1:])

    def _append_with_prefix(self, node: str, prefix: str) -> None:
        self._args.append(f"{prefix} {node}" if prefix else node)


def parse_line(line: str) -> list[str]:
    """Parse a command-line string into arguments."""
    return LineParser(line).parse()