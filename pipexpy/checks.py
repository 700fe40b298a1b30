"""Validation of command-line arguments and of the input and output files."""

from __future__ import annotations

import os
from collections.abc import Sequence


class PipexError(Exception):
    """Raised when the arguments or files given to the program are unusable."""


def check_limiter(limiter: str) -> str:
    """Return ``limiter`` if it holds only upper-case letters A-Z."""
    if any(not ("A" <= ch <= "Z") for ch in limiter):
        raise PipexError("LIMITER must be written in major")
    return limiter


def check_access(infile: str) -> str:
    """Return ``infile`` if it exists and can be read."""
    if not os.path.exists(infile):
        raise PipexError("Infile does not exist")
    if not os.access(infile, os.R_OK):
        raise PipexError("Infile has not read permission")
    return infile


def check_here_doc_args(argv: Sequence[str]) -> tuple[str, list[str], str]:
    """Validate ``here_doc LIMITER cmd1 cmd2 outfile``.

    ``argv`` excludes the program name. Returns the limiter, the two commands
    and the output file.
    """
    if len(argv) != 5:
        raise PipexError("Total numbers of parameters are incorrect")
    outfile = argv[-1]
    if not outfile:
        raise PipexError("Enter vailable file")
    if os.path.exists(outfile) and not os.access(outfile, os.W_OK):
        raise PipexError("Outfile permission denied")
    limiter = check_limiter(argv[1])
    return limiter, list(argv[2:4]), outfile


def check_pipex_args(argv: Sequence[str]) -> tuple[str, list[str], str]:
    """Validate ``infile cmd1 cmd2 ... outfile``.

    ``argv`` excludes the program name. Returns the input file, the commands
    and the output file.
    """
    if len(argv) < 4:
        raise PipexError("Not enough parameters")
    infile, outfile = argv[0], argv[-1]
    if infile is None or outfile is None:
        raise PipexError("Enter vailable file")
    check_access(infile)
    return infile, list(argv[1:-1]), outfile