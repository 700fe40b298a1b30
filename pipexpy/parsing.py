"""Splitting command strings into argument lists and small text predicates."""

from __future__ import annotations

from collections.abc import Iterable

WHITESPACE = " \t\n\v\f\r"
_SEPARATORS = WHITESPACE + ":"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def split_command(text: str) -> list[str]:
    """Split a command string on the first whitespace or ':' character found in it.

    If the string holds no such character it is returned whole as the only
    argument.
    """
    sep = next((ch for ch in text if ch in _SEPARATORS), None)
    if sep is None:
        return [text]
    return split_words(text, sep)


def has_whitespace(text: str) -> bool:
    """Return True if ``text`` contains a space or a control whitespace character."""
    return any(ch in WHITESPACE for ch in text)


def count_slashes(text: str) -> int:
    """Return how many '/' characters ``text`` contains."""
    return text.count("/")


def _unquote(arg: str) -> str:
    for pos, ch in enumerate(arg):
        if ch == "'" and pos + 2 < len(arg) and arg[pos + 2] == "'":
            # A quoted single character: keep only that character and cut the rest.
            return arg[:pos] + arg[pos + 1]
    return arg


def unquote_args(args: Iterable[str]) -> list[str]:
    """Replace single-quoted one-character arguments such as ``'a'`` by the character.

    The first such pattern in each argument is replaced and everything after it
    is dropped.
    """
    return [_unquote(arg) for arg in args]