# ftkit

Text helpers for ASCII strings, a line reader for file descriptors, and two
command-line programs: a two-command pipeline runner and a push_swap sorter.

## Modules

- `ftkit.chars`: ASCII character tests and case conversion. The functions are
  `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower` and
  `to_upper`. Each one accepts a one-character string or an integer code.
  `to_lower` and `to_upper` return their result in the same form they were given.
- `ftkit.strings`: string routines in the classic C style.
  - `atoi` skips leading whitespace, reads one optional sign and stops at the
    first non-digit. The result wraps to the signed 32-bit range.
  - `itoa` returns an integer in decimal.
  - `strchr`, `strrchr` and `strnstr` return the matching suffix, or `None`.
  - `strncmp` returns the difference at the first mismatch.
  - `strlcpy` and `strlcat` return a `(text, length)` pair.
- `ftkit.textops`:
  - `split` splits on one character and drops empty words.
  - `strtrim` removes a set of characters from both ends.
  - `substr` returns a slice and gives `""` when the start is past the end.
  - `strjoin` joins two strings.
  - `strmapi` builds a string from `func(index, char)`.
  - `striteri` is like `strmapi`, but a `None` result keeps the character.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_number`. They
  write to a text stream, which is standard output by default. A NUL
  character ends the text that gets written.
- `ftkit.linereader`:
  - `LineReader(buffer_size=42)` reads a file descriptor through a buffer of
    that size and returns one line per call of `get_next_line(fd)`, newline
    included. It returns `None` at the end of the data, or when the descriptor
    is negative or cannot be read.
  - Data read past the end of a line is kept for each descriptor separately, so
    several descriptors can be read in turn. `reset(fd)` drops that kept data.
  - The module-level `get_next_line(fd)` uses one shared reader.
- `ftkit.pipex`:
  - `run_pipeline(infile, first, second, outfile, env=None)` runs
    `< infile first | second > outfile` and returns the exit status of the
    second command.
  - `get_path_variable` and `resolve_command` look commands up on `PATH`.
  - `CommandNotFoundError` is raised when a command has no executable on that path.
- `ftkit.stack`:
  - `Stacks` holds two stacks, `a` and `b`, and logs every operation in
    `operations`. The operations are `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`,
    `rr`, `rra`, `rrb` and `rrr`.
  - The helpers are `is_sorted`, `find_min`, `find_max` and `index_values`.
- `ftkit.pushswap`:
  - Input handling: `parse_arguments`, `is_valid_number`, `parse_int` and
    `split_words`.
  - Sorts: `sort_two`, `sort_three`, `sort_four`, `sort_five`, `radix_sort`
    and `dispatch_sort`.
  - `solve(values)` returns the list of operations that sorts `values`.
  - `PushSwapError` is raised for invalid or duplicate input.

## Installing

```
pip install .
```

## Commands

Run two commands as a pipeline between files:

```
ftkit-pipex infile "grep foo" "wc -l" outfile
```

This does the same as `< infile grep foo | wc -l > outfile`.

- The output file is created or truncated with mode 0644.
- Each command is split on spaces and looked up only through the directories
  in `PATH`.
- The exit status is that of the second command. It is 127 when that command
  is not found or when there is no `PATH`, and 1 when the output file cannot
  be opened.
- Any number of arguments other than four prints
  `Error: Invalid number of arguments` and exits with status 1.

Print the operations that sort a list of integers, one per line:

```
ftkit-push-swap 3 2 1
ftkit-push-swap "5 4 3 2 1"
```

- A single argument is split on whitespace.
- A list that is already sorted prints nothing, and so does running the
  command with no arguments.
- Input that is not a list of distinct integers in the signed 32-bit range
  prints `Error` on standard error and exits with status 1.

Both commands can also be run as `python -m ftkit.pipex` and
`python -m ftkit.pushswap`.

## Library use

```python
from ftkit.strings import atoi, itoa
from ftkit.textops import split
from ftkit.pushswap import solve

atoi("   -42")          # -42
itoa(-1234)             # "-1234"
split("a::b:c", ":")    # ["a", "b", "c"]
solve([2, 1, 3])        # ["sa"]
```

## Limitations

- The pipeline runner handles exactly two commands.
- The pipeline runner does not handle quoting in command strings.
- There is no command for checking an operation list against the input. To
  replay operations, apply them to a `Stacks` yourself.

## Tests

```
pip install .[test]
pytest
```