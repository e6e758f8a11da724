# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
input from a file, and the second command's output goes to another file.
It does much the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

It takes exactly four arguments:

1. `infile`: the file the first command reads from.
2. `cmd1`: the first command and its arguments. The command is split on
   single spaces. Quotes get no special treatment.
3. `cmd2`: the second command, which reads the first command's output.
4. `outfile`: the file the second command writes to. If the file is
   missing it is created with mode 0777, less the umask. If it already
   exists it is emptied.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

### How commands are run

- **Lookup.** The first word of a command is looked up in the directories
  listed in `PATH`, in order. The first entry that exists and is executable
  is used.
  - If no entry is found and the name contains a `/`, such as `/bin/cat`, it
    is run as given.
  - A bare name that is not in `PATH` is run from the current directory.
- **Order.** The commands run one after the other, not at the same time. The
  first command's output is collected in a temporary file, and that file
  then becomes the second command's input.
- **Environment.** Each command gets the current environment.

### When something goes wrong

- **A command cannot be started.** `pipex` prints `Command not found` to
  standard error. If this happens to the first command, the second command
  still runs, with empty input.
- **The input file cannot be opened.** `pipex` prints `Error opening file:`
  and the reason. The first command is skipped and the second runs with
  empty input.
- **The output file cannot be opened.** The same message is printed. The
  second command then writes to standard output.
- **The first command exits with a non-zero status.** The second command is
  not run, and `0` followed by a newline is written to the output file.
- **The argument count is wrong.** Any count other than four prints
  `Error: Bad arguments` to standard error.

The `pipex` command always exits with status 0.

## Using it from Python

```python
import os

from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)
```

### `pipex.cli`

- `run_pipeline` returns the status of the last command it ran. A negative
  value means that command was ended by a signal.
- `run_command(command_line, env, stdin, stdout)` runs a single command with
  the given binary streams.
- Both functions raise `PipelineError` when a command they have to run
  cannot be started.
- `main(argv=None)` is the command-line entry point.

### `pipex.commands`

| Function | What it does |
| --- | --- |
| `get_env(name, env)` | Returns the value of the first variable whose name starts with `name`. |
| `split_command(command_line)` | Splits a command line on spaces. |
| `resolve_command(command, env)` | Finds a command in `PATH`. |
| `open_file(path, for_writing)` | Opens a file for binary reading, or creates or truncates it for writing. |

### `pipex.textutils`

This module holds the string helpers:

- `parse_int`
- `format_int`
- `count_words`
- `split_words`
- `trim`
- `substring`
- `find_within`
- `compare_prefix`
- `find_char`
- `rfind_char`
- `bounded_copy`
- `bounded_concat`

## What it does not do

`pipex` is not a shell. It does not:

- handle quoting, escapes, globbing or variables in commands;
- accept more than two commands;
- read input from a here-document;
- report the commands' exit status through its own exit status.

## Running the tests

```sh
pip install ".[test]"
pytest
```