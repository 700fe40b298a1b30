"""Running a chain of commands between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from typing import IO, BinaryIO

from .checks import PipexError, check_here_doc_args, check_pipex_args
from .lines import read_here_doc
from .parsing import split_command
from .resolve import CommandError, resolve_command

_OUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC


def _open_outfile(path: str) -> BinaryIO:
    return open(os.open(path, _OUT_FLAGS, 0o644), "wb")


def _spawn(cmd: str, stdin, stdout, env: dict[str, str]) -> subprocess.Popen | None:
    try:
        exe_path, args = resolve_command(cmd, split_command(cmd), env)
        return subprocess.Popen(args, executable=exe_path, stdin=stdin, stdout=stdout, env=env)
    except (CommandError, OSError) as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return None


def _run_chain(
    source: IO, commands: Sequence[str], sink: IO, env: Mapping[str, str] | None
) -> list[int]:
    environment = dict(os.environ if env is None else env)
    procs: list[subprocess.Popen | None] = []
    stdin = source
    last = len(commands) - 1
    for index, cmd in enumerate(commands):
        stdout = sink if index == last else subprocess.PIPE
        proc = _spawn(cmd, stdin, stdout, environment)
        if stdin is not source and stdin is not subprocess.DEVNULL:
            stdin.close()
        procs.append(proc)
        if proc is not None and index != last:
            stdin = proc.stdout
        else:
            stdin = subprocess.DEVNULL
    return [1 if proc is None else proc.wait() for proc in procs]


def run_pipeline(
    infile: str, commands: Sequence[str], outfile: str, env: Mapping[str, str] | None = None
) -> list[int]:
    """Run ``commands`` as a pipeline from ``infile`` into ``outfile``.

    Returns the exit status of each command; a command that could not be
    started counts as status 1.
    """
    source = sink = None
    try:
        try:
            source = open(infile, "rb")
        except OSError:
            source = None
        try:
            sink = _open_outfile(outfile)
        except OSError:
            sink = None
        if source is None or sink is None:
            raise PipexError("File openning failed")
        return _run_chain(source, commands, sink, env)
    finally:
        if source is not None:
            source.close()
        if sink is not None:
            sink.close()


def run_here_doc(
    limiter: str,
    commands: Sequence[str],
    outfile: str,
    stdin: IO | None = None,
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Feed the lines of ``stdin`` up to ``limiter`` through ``commands`` into ``outfile``.

    The output file is appended to by nothing: it is truncated first.
    Returns the exit status of each command.
    """
    if stdin is None:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
    try:
        sink = _open_outfile(outfile)
    except OSError as exc:
        raise PipexError("File openning failed") from exc
    with sink, tempfile.TemporaryFile() as document:
        text = read_here_doc(stdin, limiter)
        document.write(text.encode() if isinstance(text, str) else text)
        document.flush()
        document.seek(0)
        return _run_chain(document, commands, sink, env)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if args and "here_doc".startswith(args[0]):
            limiter, commands, outfile = check_here_doc_args(args)
            run_here_doc(limiter, commands, outfile)
        else:
            infile, commands, outfile = check_pipex_args(args)
            run_pipeline(infile, commands, outfile)
    except PipexError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())