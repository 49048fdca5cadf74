# pipexpy

`pipexpy` runs two commands joined by a pipe. The first command reads its
standard input from a file. The second command writes its standard output to a
file. This is the same as the shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To install the test requirements as well:

```sh
pip install ".[test]"
```

## Command line

```sh
pipexpy <infile> <cmd1> <cmd2> <outfile>
```

Example:

```sh
pipexpy input.txt "grep error" "wc -l" count.txt
```

You can also start it with `python -m pipexpy.pipeline` and the same
arguments.

- The command takes exactly four arguments. With any other number it prints
  the usage line to standard error and exits with status 1.
- Each command string is split on spaces, and empty words are dropped.
- If the whole command string names an executable file, that file is run.
  Otherwise the first word is looked up in each directory listed in `PATH`,
  in order.
- The output file is created with mode `0777` (minus the umask) if it does
  not exist. If it does exist, it is truncated.
- Both commands run at the same time. If one side cannot start, the reason
  is printed to standard error as `pipex error: ...` and the other side
  still runs. Possible reasons are a missing input file, an empty command,
  a command that cannot be found, or a missing `PATH`.
- The command exits with status 0 once both sides have finished, whatever
  their own exit statuses were. It exits with status 1 if the pipe itself
  cannot be created.

## Library use

```python
import os
from pipexpy.pipeline import run_pipeline

first_status, second_status = run_pipeline(
    "input.txt", "grep error", "wc -l", "count.txt", dict(os.environ)
)
```

`run_pipeline` returns the exit statuses of both commands. A side that could
not be started counts as status 1. Passing `None` as the environment uses
the current process environment.

You can also look up commands directly:

```python
from pipexpy.pathfind import resolve_command, search_dirs

search_dirs({"PATH": "/usr/bin:/bin"})             # ['/usr/bin/', '/bin/']
resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})  # ('/usr/bin/ls', ['ls', '-l']) on most systems
```

A failed lookup raises `PipexError`:

- An empty command raises its subclass `EmptyCommandError`.
- A command with no executable found raises its subclass
  `CommandNotFoundError`.
- An environment without `PATH` raises `PipexError` itself.

## Supporting modules

- `pipexpy.chars`: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case conversion (`to_lower`,
  `to_upper`), and `atoi`/`itoa`.
- `pipexpy.memory`: operations on `bytearray` buffers: `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`.
- `pipexpy.textops`: string helpers: `split`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`, `strtrim`, `substr`.
- `pipexpy.linkedlist`: `LinkedList` and `Node`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `for_each` and `map`.
- `pipexpy.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  one writes to a raw file descriptor.
- `pipexpy.linereader`: `LineReader` and `get_next_line`. They read a file
  descriptor one line at a time.

## What it does not do

- It joins exactly two commands. Longer chains are not supported.
- It does not read its input from a here-document.
- Command strings get no shell processing. There is no quoting, escaping,
  globbing or variable expansion.