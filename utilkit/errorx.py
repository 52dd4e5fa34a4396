"""Errors that carry a message, an optional previous error and a call stack."""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from typing import IO, Iterator


@dataclass
class ErrStackOpt:
    """How many frames to skip and how many to record for a stack."""

    skip_depth: int = 3
    trace_depth: int = 15


_std_opt = ErrStackOpt()


@dataclass(frozen=True)
class FuncInfo:
    """A function recorded in a call stack."""

    name: str
    file: str
    line: int

    def file_line(self) -> tuple[str, int]:
        """Return the file path and line number."""
        return self.file, self.line

    def location(self) -> str:
        """Return ``name(), file.py:line``."""
        return f"{self.name}(), {os.path.basename(self.file)}:{self.line}"

    def __str__(self) -> str:
        return f"{self.name}()\n  At {self.file}:{self.line}"


def _qualified_name(code) -> str:
    module = inspect.getmodulename(code.co_filename) or ""
    return f"{module}.{code.co_name}" if module else code.co_name


def _callers_stack(skip: int, depth: int) -> tuple[FuncInfo, ...]:
    """Record up to ``depth`` frames, skipping ``skip`` counted from this helper's caller's caller."""
    try:
        frame = sys._getframe(max(skip - 1, 0))
    except ValueError:
        return ()
    frames = []
    while frame is not None and len(frames) < depth:
        code = frame.f_code
        frames.append(FuncInfo(_qualified_name(code), code.co_filename, frame.f_lineno))
        frame = frame.f_back
    return tuple(frames)


def _format_stack(stack: tuple[FuncInfo, ...] | None) -> str:
    if not stack:
        return ""
    lines = "".join(f"{fn.name}()\n  {fn.file}:{fn.line}\n" for fn in stack)
    return "\nSTACK:\n" + lines


def _sprintf(tpl: str, args: tuple) -> str:
    return tpl % args if args else tpl


class ErrorX(Exception):
    """An error with a message, an optional previous error and a call stack.

    ``str()`` gives the messages of the chain joined by ``"; "``;
    ``detail()`` adds the stacks and previous errors.
    """

    def __init__(
        self,
        msg: str = "",
        prev: BaseException | None = None,
        stack: tuple[FuncInfo, ...] | None = None,
    ) -> None:
        super().__init__(msg)
        self.message = msg
        self.prev = prev
        self.stack = stack
        if prev is not None:
            self.__cause__ = prev

    def __str__(self) -> str:
        parts = []
        if self.message:
            parts.append(self.message)
        if self.prev is not None:
            parts.append("; " + str(self.prev))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"ErrorX({self.message!r})"

    def cause(self) -> BaseException:
        """Return the first error of the chain."""
        if self.prev is None:
            return self
        if isinstance(self.prev, ErrorX):
            return self.prev.cause()
        return self.prev

    def unwrap(self) -> BaseException | None:
        """Return the previous error, or None."""
        return self.prev

    def detail(self) -> str:
        """Return the messages with their stacks and previous errors."""
        out = []
        if self.message:
            out.append(self.message)
            out.append(_format_stack(self.stack))
        if self.prev is not None:
            out.append("\nPrevious: ")
            if isinstance(self.prev, ErrorX):
                out.append(self.prev.detail())
            else:
                out.append(str(self.prev))
        return "".join(out)

    def write_to(self, writer: IO[str]) -> int:
        """Write detail() to a text writer; return the number of characters."""
        text = self.detail()
        writer.write(text)
        return len(text)

    def stack_string(self) -> str:
        """Return the stack of this error as text, or "" without one."""
        return _format_stack(self.stack)

    def caller_func(self) -> FuncInfo | None:
        """Return the function that created the error, or None without a stack."""
        if not self.stack:
            return None
        return self.stack[0]

    def location(self) -> str:
        """Return where the error was created, or ``"unknown"``."""
        fn = self.caller_func()
        if fn is None:
            return "unknown"
        return fn.location()


class ErrorR(Exception):
    """An error with a code for service replies; code 0 means success."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        return self.describe()

    def is_suc(self) -> bool:
        """Report whether the code means success."""
        return self.code == 0

    def is_fail(self) -> bool:
        """Report whether the code means failure."""
        return self.code != 0

    def describe(self) -> str:
        """Return ``msg(code: N)``."""
        return f"{self.msg}(code: {self.code})"


def config(skip_depth: int | None = None, trace_depth: int | None = None) -> None:
    """Change the default stack options."""
    if skip_depth is not None:
        _std_opt.skip_depth = skip_depth
    if trace_depth is not None:
        _std_opt.trace_depth = trace_depth


def new(msg: str) -> ErrorX:
    """Create an error with a call stack."""
    return ErrorX(msg, stack=_callers_stack(_std_opt.skip_depth, _std_opt.trace_depth))


def newf(tpl: str, *args: object) -> ErrorX:
    """Create an error with a %-formatted message and a call stack."""
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(_sprintf(tpl, args), stack=stack)


def errorf(tpl: str, *args: object) -> ErrorX:
    """Alias of newf()."""
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(_sprintf(tpl, args), stack=stack)


def with_prev(err: BaseException | None, msg: str) -> ErrorX:
    """Create an error on top of ``err`` with a call stack."""
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(msg, prev=err, stack=stack)


def with_prevf(err: BaseException | None, tpl: str, *args: object) -> ErrorX:
    """Create an error on top of ``err`` with a formatted message and a call stack."""
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(_sprintf(tpl, args), prev=err, stack=stack)


def withf(err: BaseException | None, tpl: str, *args: object) -> ErrorX:
    """Alias of with_prevf()."""
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(_sprintf(tpl, args), prev=err, stack=stack)


def with_stack(err: BaseException | None) -> ErrorX | None:
    """Copy the message of ``err`` into an error with a call stack; None stays None."""
    if err is None:
        return None
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(str(err), stack=stack)


def traced(err: BaseException | None) -> ErrorX | None:
    """Alias of with_stack()."""
    if err is None:
        return None
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(str(err), stack=stack)


def stacked(err: BaseException | None) -> ErrorX | None:
    """Alias of with_stack()."""
    if err is None:
        return None
    stack = _callers_stack(_std_opt.skip_depth, _std_opt.trace_depth)
    return ErrorX(str(err), stack=stack)


def with_options(
    msg: str, *, skip_depth: int | None = None, trace_depth: int | None = None
) -> ErrorX:
    """Create an error with its own stack options."""
    opt = ErrStackOpt()
    if skip_depth is not None:
        opt.skip_depth = skip_depth
    if trace_depth is not None:
        opt.trace_depth = trace_depth
    return ErrorX(msg, stack=_callers_stack(opt.skip_depth, opt.trace_depth))


def wrap(err: BaseException | None, msg: str) -> Exception:
    """Wrap ``err`` with a message and no stack; a None error gives a plain one."""
    if err is None:
        return Exception(msg)
    return ErrorX(msg, prev=err)


def wrapf(err: BaseException | None, tpl: str, *args: object) -> Exception:
    """Wrap ``err`` with a formatted message and no stack."""
    msg = _sprintf(tpl, args)
    if err is None:
        return Exception(msg)
    return ErrorX(msg, prev=err)


def raw(msg: str) -> Exception:
    """Create a plain error."""
    return Exception(msg)


def rawf(tpl: str, *args: object) -> Exception:
    """Create a plain error with a formatted message."""
    return Exception(_sprintf(tpl, args))


def cause(err: BaseException | None) -> BaseException | None:
    """Return the first error of the chain, or ``err`` itself."""
    if err is None:
        return None
    if isinstance(err, ErrorX):
        return err.cause()
    return err


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the previous error, or None."""
    if err is None:
        return None
    if isinstance(err, ErrorX):
        return err.unwrap()
    return err.__cause__


def previous(err: BaseException | None) -> BaseException | None:
    """Alias of unwrap()."""
    return unwrap(err)


def _chain(err: BaseException | None) -> Iterator[BaseException]:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def has(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether ``target`` is ``err`` or one of its previous errors."""
    if err is None or target is None:
        return err is target
    return any(e is target or e == target for e in _chain(err))


def to(err: BaseException | None, target_type: type) -> BaseException | None:
    """Return the first error of the chain that is an instance of ``target_type``."""
    for e in _chain(err):
        if isinstance(e, target_type):
            return e
    return None


def new_r(code: int, msg: str) -> ErrorR:
    """Create a reply error with a code."""
    return ErrorR(code, msg)


def fail(code: int, msg: str) -> ErrorR:
    """Create a failed reply with a code."""
    return ErrorR(code, msg)


def suc(msg: str) -> ErrorR:
    """Create a successful reply."""
    return ErrorR(0, msg)