"""Small text and sequence helpers used when formatting differences."""

from __future__ import annotations

from collections.abc import Sized


def _lines(text: str) -> list[str]:
    """Split text into lines, ignoring one trailing newline and stripping '\\r'."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def indent(text: object, level: int) -> str:
    """Prefix every line of ``str(text)`` with ``level`` spaces."""
    prefix = " " * level
    return "\n".join(prefix + line for line in _lines(str(text)))


def indexes(items: Sized) -> list[int]:
    """Return every valid index of ``items``, in ascending order."""
    return list(range(len(items)))