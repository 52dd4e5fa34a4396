# utilkit

Small helpers for everyday Python work. The package uses only the standard
library.

## Installation

```
pip install utilkit
```

To run the tests:

```
pip install "utilkit[test]"
pytest
```

## Modules

- `utilkit.core`
  - `panic_if_err(err)` raises `err` if it is not `None`.
  - `panicf(fmt, *args)` raises a `RuntimeError` with a %-formatted message.
- `utilkit.arrutil` has the sequence helpers:
  - Simple list operations: `reverse` (in place), `strings_remove`,
    `trim_strings` (strips whitespace, or the given characters).
  - `get_random_one` picks a random element.
  - Membership checks: `ints_has`, `strings_has`, `in_strings`, `contains`,
    `has_value`, `not_contains`.
  - Conversions: `to_int64s` and `to_strings`, which raise
    `InvalidTypeError` for values that are not sequences. `must_to_int64s`,
    `must_to_strings`, `slice_to_int64s`, `slice_to_strings`,
    `strings_to_ints` and `strings_to_slice` do related conversions.
  - Joining: `join_strings`, `strings_join`, `join_slice`, `to_string` and
    `slice_to_string` (which render `[a,b,c]`).
  - `Ints` and `Strings` are list types whose `str()` is comma-separated and
    which have a `has()` method.
- `utilkit.fmtutil` has `data_size` (`"3.39K"`), `how_long_ago` (`"5 mins"`),
  `pretty_json`, `strings_to_ints` and `args_with_spaces`.
- `utilkit.jsonutil` has:
  - `encode`, `encode_to_writer` and `encode_unescape_html`, which write
    compact JSON.
  - `decode`, `decode_string` and `decode_reader`.
  - `pretty`, which indents by four spaces.
  - `write_file` and `read_file`.
  - `strip_comments`, which removes `/* */` and `//` comments from JSON text.
- `utilkit.cmdline` has:
  - `LineBuilder`, which joins arguments into a command line and quotes
    arguments that contain spaces or quotes.
  - `LineParser`, which splits a line back into arguments while honouring
    quotes. `also_env_parse()` expands `$VAR` first, and `bin_and_args()`
    splits off the program name.
  - `line_build` and `parse_line`, which do the same as functions.
- `utilkit.cliutil` has:
  - `line_build`, `build_line`, `parse_line` and `string_to_os_args`.
  - `exec_cmd`, `exec_line` and `shell_exec`, which run a program and return
    its standard output. They raise `subprocess.CalledProcessError` when the
    program exits with a non-zero status.
  - `workdir`, `bin_file` and `bin_dir`.
  - `read_input`, `read_line`, `read_first` and `read_password`, which read
    from the user. The first three take an optional `stream`.
- `utilkit.envutil` has:
  - `parse_env_value` and `var_parse`, which expand `${NAME}` and
    `${NAME | default}`.
  - `var_replace`, which expands `$NAME` and `${NAME}`.
  - `getenv` and `environ`.
  - Platform checks: `is_win`, `is_windows`, `is_mac`, `is_linux`, `is_wsl`.
  - Terminal checks: `is_terminal`, `std_is_terminal`, `is_support_color`,
    `is_support_256_color`, `is_support_true_color`.
- `utilkit.errorx` has:
  - `ErrorX`, an exception that holds a message, an optional previous error
    and the call stack where it was made. You create one with `new`, `newf`,
    `errorf`, `with_prev`, `withf`, `with_prevf`, `with_stack`, `traced`,
    `stacked` or `with_options`.
  - `wrap` and `wrapf`, which chain errors without recording a stack.
  - `raw` and `rawf`, which make plain exceptions.
  - Chain helpers: `cause`, `unwrap`, `previous`, `has` and `to(err, type)`,
    which returns the first error in the chain of that type, or `None`.
  - `config(skip_depth=..., trace_depth=...)`, which changes the default
    stack options.
  - `ErrorR`, a coded reply error made with `new_r`, `fail` or `suc`. It has
    `is_suc()`, `is_fail()` and `describe()`, which returns
    `"msg(code: N)"`.
- `utilkit.comfunc` has `try_struct_to_map`, which returns the public fields
  of an object or dataclass as a dict.

## Examples

```python
from utilkit.cmdline import LineParser, line_build
from utilkit.envutil import parse_env_value
from utilkit.jsonutil import strip_comments

line_build("myapp", ["-m", "this is message"])   # 'myapp -m "this is message"'
LineParser('./app --msg "has multi words"').parse()
# ['./app', '--msg', 'has multi words']

parse_env_value("${SHELL|/bin/bash}")
strip_comments('{"name":"app"} // comments')      # '{"name":"app"}'
```

```python
from utilkit import errorx

try:
    raise errorx.new("something failed")
except errorx.ErrorX as err:
    print(err.location())
    print(err.detail())
```

## What it does not do

The package has no command-line program of its own. It does not pretty-print
arbitrary values with their types. It has no file-system helpers, such as file
checks, MIME sniffing, temporary files or unzipping. It has no directory walker
with file filters either. For those tasks, use `os`, `pathlib`, `shutil`,
`zipfile` and `pprint` from the standard library.