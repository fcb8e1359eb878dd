# minishell

The core pieces of a small command shell, as a plain Python library with no
third-party dependencies.

## Modules

- `minishell.chars`: ASCII character tests and case mapping (`is_alnum`,
  `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_whitespace`,
  `to_lower`, `to_upper`). Each accepts a one-character string or an integer
  code. The case functions return the same kind they were given.
- `minishell.ftstring`: string helpers with classic C-library edge cases
  (`atoi`, `itoa`, `split`, `strtrim`, `substr`, `strncmp`, `strnstr`,
  `strchr`, `strrchr`, `map_indexed`). `atoi` stops at the first non-digit
  and wraps its result to 32 bits. `split` drops empty pieces.
- `minishell.envdict`: `EnvDict`, an ordered key/value store for environment
  variables. `EnvDict.from_list` builds one from `KEY=VALUE` strings, and an
  entry without a value holds `None`. The store supports `add`, `remove` (by
  key prefix), `get`, `update`, `format` and `write`, along with `len()` and
  iteration over `(key, value)` pairs.
- `minishell.printf`: printf-style formatting with `%c %s %d %i %u %x %X %p %%`.
  `format_printf` returns the string. `printf` writes to standard output and
  `fprintf` writes to a stream; both return the number of characters written.
  `put_endl` and `put_nbr` are also provided.
- `minishell.linereader`: `LineReader`, which reads lines from a file
  descriptor or from a text or binary stream through a fixed-size buffer.
  `read_line` returns `None` at end of input. Iterating over the reader
  yields lines.
- `minishell.ast`: turns a list of `Token`s (typed by `TokenType`) into
  `CommandNode`s. Each node holds its command, flag, arguments and
  `Redirect`s (typed by `RedirType`). `build_command` builds one node and
  stops at the first pipe. `build_commands` returns a `ParseResult` for a
  whole pipeline, with `commands`, `pipe_count`, `errors` and
  `syntax_error`. A redirect target written as `$NAME` is looked up in the
  given environment. An unset name is recorded as a
  "no such file or directory" error on the node.

## Example

```python
from minishell.envdict import EnvDict
from minishell.ftstring import atoi, itoa

env = EnvDict.from_list(["HOME=/home/user", "SHLVL=1"], "=")
env.update("SHLVL", itoa(atoi(env.get("SHLVL")) + 1))
print(env.format("="), end="")
# HOME=/home/user
# SHLVL=2
```

## What it does not do

This package is a library only. It has no interactive prompt and no command to
run. It does not split command lines into tokens: `minishell.ast` expects
tokens that have already been classified. It does not run commands, builtins,
pipes, redirections or here-documents, and it does no signal or terminal
handling.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```