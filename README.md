# pipexpy

`pipexpy` runs a chain of commands the way a shell pipeline does. The first
command reads from an input file. The output of each command goes to the input
of the next. The last command writes to an output file.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Usage

### Pipeline mode

```
pipexpy infile "cmd1" "cmd2" ... "cmdN" outfile
```

This is like the shell line:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

For example:

```
pipexpy input.txt "grep foo" "wc -l" result.txt
```

- At least four arguments are needed in all, so at least two commands.
- The input file must exist and be readable.
- The output file is created with mode 0644, or emptied if it already exists.

### Here-document mode

```
pipexpy here_doc LIMITER "cmd1" "cmd2" outfile
```

This reads lines from standard input until a line that is exactly `LIMITER`.
It passes those lines through `cmd1 | cmd2` and writes the result to
`outfile`, like:

```
cmd1 << LIMITER | cmd2 > outfile
```

- Here-document mode takes exactly two commands.
- The limiter may contain only upper-case letters `A`–`Z`.
- The output file name must not be empty and, if the file already exists, it
  must be writable.
- The collected lines are held in a temporary file that is removed afterwards.

### How commands are resolved

- Each command string is split into words on the first whitespace or `:`
  character found in it. A string without such a character is one word.
- Commands are not run through a shell: there is no quoting, globbing,
  variable expansion or redirection inside a command string. The only
  unquoting is this: the first single-quoted single character in a word, such
  as `'x'`, is replaced by that character, and the rest of the word is dropped.
- A command string with more than one `/` is taken as a path. If it also holds
  whitespace, its first word is run as given; otherwise the whole string must
  be an executable file.
- Any other command has its first word looked up in the colon-separated
  directories of `PATH`; the first executable match is used.

### Exit status and errors

- `pipexpy` exits with status 1, with a message on standard error, when the
  arguments fail their checks or the input or output file cannot be opened.
- A command that cannot be found or started prints a message on standard
  error; the rest of the pipeline still runs, and that command reads or
  produces nothing. This does not change the exit status of `pipexpy`, which
  is 0 once the pipeline has run.

## Library use

```python
from pipexpy.parsing import split_command
from pipexpy.runner import run_pipeline, run_here_doc

split_command("grep -v foo")        # ['grep', '-v', 'foo']

statuses = run_pipeline("input.txt", ["grep foo", "wc -l"], "result.txt")

with open("lines.txt", "rb") as source:
    run_here_doc("END", ["cat", "sort"], "sorted.txt", stdin=source)
```

- `run_pipeline(infile, commands, outfile, env=None)` and
  `run_here_doc(limiter, commands, outfile, stdin=None, env=None)` return the
  exit status of each command, with 1 for a command that could not be started.
  `env` defaults to the current environment; `stdin` defaults to standard
  input. Neither function checks the number of commands.
- `pipexpy.checks` validates command lines (`check_pipex_args`,
  `check_here_doc_args`, `check_limiter`, `check_access`) and raises
  `PipexError`.
- `pipexpy.resolve` finds executables (`extract_path`, `find_in_path`,
  `resolve_command`) and raises `CommandError`.
- `pipexpy.lines` provides `iter_lines`, which reads a text or binary stream
  in small chunks and yields lines with their newlines, and `read_here_doc`,
  which returns a stream's contents up to a limiter line.
- `pipexpy.parsing` holds the word splitting and small text helpers
  (`split_words`, `split_command`, `has_whitespace`, `count_slashes`,
  `unquote_args`).