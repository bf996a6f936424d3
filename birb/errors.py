"""
errors.py

Responsibility: Exception types raised by the birb helpers.

Absence of a package in a repository is never an error here; only unreadable
configuration and malformed configuration lines are.
"""

from __future__ import annotations


class BirbError(RuntimeError):
    pass


class FileReadError(BirbError):
    """A file the caller depends on could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File [{path}] can't be opened!")
        self.path = path


class SourceConfigError(BirbError, ValueError):
    """A package-source configuration line does not have the `name;url;path` shape."""

    def __init__(self, line: str, index: int | None = None) -> None:
        where = f"entry {index}" if index is not None else "entry"
        super().__init__(f"Malformed package source {where}: {line!r} (expected `name;url;path`)")
        self.line = line
        self.index = index
