"""Finding the executable that a command string refers to."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from .parsing import count_slashes, has_whitespace, split_command, unquote_args


class CommandError(Exception):
    """Raised when a command cannot be resolved to an executable file."""


def extract_path(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in the ``PATH`` entry of ``env``, or None."""
    value = env.get("PATH")
    if value is None:
        return None
    return split_command(value)


def find_in_path(name: str, env: Mapping[str, str]) -> str | None:
    """Return the first ``<dir>/<name>`` from ``PATH`` that is executable, or None."""
    for directory in extract_path(env) or []:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(
    cmd: str, args: Iterable[str], env: Mapping[str, str]
) -> tuple[str, list[str]]:
    """Return the executable to run for ``cmd`` together with its final arguments.

    A command holding more than one '/' is taken as a path; otherwise the
    first argument is looked up in ``PATH``.
    """
    args = unquote_args(args)
    if not args:
        raise CommandError("No vailable command or path")
    if count_slashes(cmd) > 1:
        if has_whitespace(cmd):
            exe_path = args[0]
        elif os.access(cmd, os.X_OK):
            exe_path = cmd
        else:
            raise CommandError("Dose not have permissions")
    else:
        exe_path = find_in_path(args[0], env)
    if not exe_path:
        raise CommandError("No vailable command or path")
    return exe_path, args