# kssh

The pieces of a small POSIX-style shell, usable on their own from Python.
The package has no dependencies outside the standard library.

## Modules

- `kssh.tokens` holds the token model: the `TokenType` enum, the `Token`
  dataclass and `TokenList`, a doubly linked list with `append`,
  `insert_after`, `remove`, `last`, `renumber`, `strip_trailing_pipes`,
  `texts` and `types`. `is_space` tells whether a character is whitespace.
- `kssh.lexer` turns a command line into a `TokenList` with `tokenize`.
  Quoted text becomes a quote token, a string token and a closing quote
  token; `<<` and `>>` become here-document and append tokens. An
  unterminated quote raises `QuoteError`. `char_type` gives the token type
  a single character starts.
- `kssh.syntax` refines token types in place with `build_syntax`: words
  after a redirection take the redirection's type, the pieces glued to a
  redirection target are merged into one token, and standalone empty quotes
  become words. Helpers: `pipeline_count`, `next_pipe`, `is_redirection`,
  `has_command`, `only_whitespace`, `merge_redirection_targets`.
- `kssh.checker` rejects malformed token lists by raising
  `ShellSyntaxError`: `check_pipes` (leading, trailing or doubled pipes and
  pipes right after a redirection), `check_redirections`,
  `check_heredoc_append` (missing targets, more than sixteen
  here-documents), `check_semicolons` and `check_backslashes`.
  `check_syntax` runs the pipe, redirection and here-document checks in
  order. The checks look at direct neighbours, so whitespace tokens between
  operators should be removed first.
- `kssh.environment` keeps variables in insertion order in `Environment`:
  `from_strings`, `get`, `set`, `sorted_items`, `to_strings`, `change_pwd`
  (sets `OLDPWD` and `PWD`), `set_underscore` and `increment_shlvl`
  (resets to 1 with a warning once `SHLVL` is 999). `export_key` extracts
  the name of an `export` argument such as `A=1` or `A+=1`, and
  `is_valid_identifier` checks one character of a variable name.
- `kssh.commands` builds argument vectors: `split_words`, `command_argv`
  (the arguments of one pipeline segment) and `blank_quote_args`. It also
  looks programs up: `find_command` searches the `PATH` entry for an
  executable, with `path_entry`, `command_name`, `is_dot_path` and
  `is_builtin` (echo, cd, pwd, export, unset, env, exit).
- `kssh.redirects` applies `<`, `>` and `>>` targets of a segment to file
  descriptors with `apply_input_redirections` and
  `apply_output_redirections`, returning the paths opened; `open_output`
  opens a single output target. Failures raise `RedirectionError`, which
  carries a `status`.
- `kssh.state` holds `ShellState`: the last exit status, signal notes and
  here-document flags, with `reset`, `update_status` (turns a raw wait
  status into an exit status, 130 or 131 after an interrupt or quit),
  `on_child_interrupt` and `on_child_quit`.

## Example

```python
from kssh.lexer import tokenize
from kssh.syntax import build_syntax
from kssh.commands import command_argv
from kssh.checker import check_syntax, ShellSyntaxError
from kssh.environment import Environment

tokens = build_syntax(tokenize("ls -l | wc"))
print(command_argv(tokens.head))        # ['ls', '-l']

try:
    check_syntax(tokenize("ls || wc"))
except ShellSyntaxError as exc:
    print(exc)

env = Environment.from_strings(["HOME=/home/user", "SHLVL=1"])
env.increment_shlvl()
print(env.get("SHLVL"))                 # 2
```

## What it does not do

kssh provides no interactive prompt, command loop or executable command.
It does not read here-documents or expand `$NAME` variables, does not start
processes or connect pipelines, and does not implement the built-in
commands; `is_builtin` only recognises their names. Those are left to the
program that uses these pieces.