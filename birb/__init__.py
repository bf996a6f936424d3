"""
birb package

Helpers used by the birb package manager to work with its package repositories.

Key responsibilities are split across modules:
- `text.py`: delimiter splitting and comment-aware file reading
- `sources.py`: package-source configuration loading and repository lookup
- `variables.py`: cached extraction of `VAR="value"` lines from `seed.sh`
- `renderer.py`: text and YAML output of package sources
- `cli.py`: CLI entrypoint (`birb-repo`)
"""

from __future__ import annotations

from birb.errors import BirbError, FileReadError, SourceConfigError
from birb.sources import (
    PKG_SOURCE_CONFIG_PATH,
    PkgSource,
    get_pkg_source_list,
    get_pkg_sources,
    locate_pkg_repo,
)
from birb.text import read_file, split_string
from birb.variables import VariableCache, read_pkg_variable

__all__ = [
    "__version__",
    "BirbError",
    "FileReadError",
    "SourceConfigError",
    "PKG_SOURCE_CONFIG_PATH",
    "PkgSource",
    "get_pkg_source_list",
    "get_pkg_sources",
    "locate_pkg_repo",
    "read_file",
    "split_string",
    "VariableCache",
    "read_pkg_variable",
]

__version__ = "0.1.0"
