# minish

minish is the front end of a small interactive shell. It reads a line and
splits it into tokens. It checks the token sequence for syntax errors and
groups the tokens into pipeline commands with their redirections. It then
expands `$VAR`, `$?` and quotes against an environment. It does not run the
commands. Instead it prints how each command was parsed.

## Installing

```
pip install .
```

## Running

```
minish
```

The shell starts from the process environment. If that environment is empty,
or holds an entry it cannot read, the shell exits with status 1.

The prompt is `$ `. To leave, type `exit` or send end-of-file. For each valid
line the shell prints every argument and redirection of every command in the
pipeline:

```
$ echo "hello $USER" > out.txt | wc -l
Argument: echo
Argument: hello alice
Redirection: > out.txt
----------
Argument: wc
Argument: -l
----------
```

The following errors are reported on standard error with the prefix
`minishell: `, and the line is then skipped:

- an unclosed quote (`unexpected EOF for ...`)
- a leading pipe
- an operator at the end of the line or just before a pipe
- two redirections in a row (`syntax error near token ...`)
- a redirection target that expands to nothing or to several words (`... : ambiguous redirect`)

Here-document delimiters (`<< word`) are kept as written.

## What it does not do

- It does not run programs.
- It does not open redirection files.
- It does not read here-documents.
- It has no built-in commands apart from `exit`.
- It never changes `$?`, which always expands to `0`.
- Lines that are not only whitespace are collected in `Shell.history`. This list lives in memory only and is never saved.

## Using it as a library

```python
from minish.shell import Shell, format_commands

shell = Shell({"HOME": "/home/alice"})
commands = shell.process_input("cat < $HOME/notes | grep todo")
if commands:
    print(format_commands(commands), end="")
```

`Shell.process_input` returns a list of expanded `Command` objects, or `None`
when the line yields nothing usable. `Shell.run(lines, out)` processes an
iterable of lines in the same way and writes to `out`.

The building blocks are available on their own:

- `minish.tokens`:
  - `extract_tokens` and `validate_tokens`, which raise `UnclosedQuoteError` and `ShellSyntaxError`.
  - the token checks `is_pipe`, `is_redirection`, `is_input_redirection`, `is_output_redirection` and `is_heredoc`.
- `minish.commands`: `Command`, `Redirection`, `parse_command` and `extract_commands`.
- `minish.env`:
  - `Environment`, an ordered store of variables with the newest first, supporting `get`, `add`, `set` and `unset`.
  - `Environment.from_mapping`, which builds a store from a mapping.
  - `to_envp`, which turns the store back into `KEY=value` strings.
  - `env_string`.
- `minish.expand`:
  - `split_vars`, `expand_token`, `expand_arguments`, `expand_redirections` and `expand_commands`.
  - `AmbiguousRedirectError`.
- `minish.chars`:
  - ASCII character tests such as `is_space`, `is_alpha` and `is_xdigit`.
  - `to_upper` and `to_lower`.
  - `all_chars` and `count_if`.
- `minish.strings`:
  - string helpers: `atoi`, `strtol`, `itoa`, `split`, `strtrim`, `strnstr`, `substr`, `strjoin` and `tokenize`.
  - `read_lines`, which reads lines from a stream in chunks.
  - `put_string`, `put_line` and `put_number` for output.

## Tests

```
pip install ".[test]"
pytest
```