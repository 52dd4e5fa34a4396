"""Helpers for sequences, formatting, JSON, command lines, environment variables and chained errors."""

__version__ = "0.1.0"
__all__ = [
    "core",
    "arrutil",
    "fmtutil",
    "jsonutil",
    "cmdline",
    "cliutil",
    "envutil",
    "errorx",
    "comfunc",
]