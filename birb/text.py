"""
text.py

Responsibility: Small text helpers shared by the source loader.

- `split_string`: cut a string on a literal delimiter.
- `read_file`: read a text file into its meaningful lines.
"""

from __future__ import annotations

import logging
from pathlib import Path

from birb.errors import FileReadError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def split_string(text: str, delimiter: str) -> list[str]:
    """
    Split `text` on every occurrence of `delimiter`, left to right.

    Unlike `str.split`, a trailing empty remainder is dropped, so
    `split_string("a;", ";") == ["a"]` and `split_string("", ";") == []`.
    Empty fields between delimiters are kept.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    result: list[str] = []
    rest = text
    pos = rest.find(delimiter)
    while pos != -1:
        result.append(rest[:pos])
        rest = rest[pos + len(delimiter) :]
        pos = rest.find(delimiter)

    if rest:
        result.append(rest)
    return result


def read_file(file_path: str | Path) -> list[str]:
    """
    Return the lines of `file_path` that are neither empty nor `#` comments.

    Raises `FileReadError` when the file cannot be opened. Deciding whether that
    is fatal is left to the caller.
    """
    path = Path(file_path)
    try:
        f = path.open("r", encoding="utf-8", errors="replace", newline="")
    except OSError as e:
        raise FileReadError(str(file_path)) from e

    lines: list[str] = []
    with f:
        for raw in f:
            line = raw[:-1] if raw.endswith("\n") else raw
            # Ignore empty lines and comments.
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            lines.append(line)

    logger.debug("Read %d line(s) from %s", len(lines), path)
    return lines
