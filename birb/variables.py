"""
variables.py

Responsibility: Read `VAR="value"` assignments out of package build scripts.

Lookups are memoized in a `VariableCache` owned by the caller. A cached empty
string is treated as a miss, so variables that are unset (or set to "") are
re-read from disk on every call.
"""

from __future__ import annotations

import logging
from typing import Iterable

from birb.sources import seed_path

logger = logging.getLogger(__name__)


class VariableCache:
    """Unbounded `package + variable` -> value store. Never evicts."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(pkg_name: str, var_name: str) -> str:
        # No separator between the two parts.
        return pkg_name + var_name

    def get(self, key: str) -> str | None:
        """Return the cached value, or None if it is absent or empty."""
        value = self._store.get(key, "")
        if not value:
            self.misses += 1
            return None
        self.hits += 1
        return value

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store


def _extract_assignment(lines: Iterable[str], var_name: str) -> str:
    prefix = f'{var_name}="'
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.startswith(prefix):
            # Drop `VAR="` and the closing quote.
            return line[len(prefix) :][:-1]
    return ""


def read_pkg_variable(
    pkg_name: str,
    var_name: str,
    repo_path: str,
    cache: VariableCache | None = None,
) -> str:
    """
    Return the value assigned to `var_name` in `<repo_path>/<pkg_name>/seed.sh`.

    Returns "" when the script cannot be opened or has no such assignment; a
    repository not carrying the package is an expected outcome, not an error.
    """
    key = VariableCache.key(pkg_name, var_name)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

    path = seed_path(repo_path, pkg_name)
    try:
        f = path.open("r", encoding="utf-8", errors="replace", newline="")
    except OSError:
        logger.debug("Cannot open %s", path)
        return ""

    with f:
        value = _extract_assignment(f, var_name)

    if cache is not None:
        cache.set(key, value)
    return value
