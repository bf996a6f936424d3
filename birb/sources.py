"""
sources.py

Responsibility: Load the package-source configuration and find which repository
holds a package.

Configuration format (one repository per line, blank lines and `#` comments ignored):

    name;url;path

`path` is a local directory with one subdirectory per package, each holding a
`seed.sh` build script.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from birb.errors import SourceConfigError
from birb.text import read_file, split_string

logger = logging.getLogger(__name__)

PKG_SOURCE_CONFIG_PATH = "/etc/birb-sources.conf"
SOURCE_FIELD_DELIMITER = ";"
SEED_FILE_NAME = "seed.sh"


@dataclass(frozen=True)
class PkgSource:
    """A package repository as listed in the package-source configuration."""

    name: str = ""
    url: str = ""
    path: str = ""

    def is_valid(self) -> bool:
        """
        True if ANY field is set.

        Note: this is an OR check, so a record with only a name counts as valid.
        Use `is_complete` when every field is required.
        """
        return bool(self.name or self.url or self.path)

    def is_complete(self) -> bool:
        """True if every field is set."""
        return bool(self.name and self.url and self.path)

    def is_empty(self) -> bool:
        return not self.is_valid()


def seed_path(repo_path: str, pkg_name: str) -> Path:
    """Path of the build script for `pkg_name` inside the repository at `repo_path`."""
    return Path(f"{repo_path}/{pkg_name}/{SEED_FILE_NAME}")


def parse_pkg_source_line(line: str, index: int | None = None) -> PkgSource:
    fields = split_string(line, SOURCE_FIELD_DELIMITER)
    if len(fields) < 3:
        raise SourceConfigError(line, index)
    # Anything after the third field is ignored.
    return PkgSource(name=fields[0], url=fields[1], path=fields[2])


def get_pkg_source_list(config_path: str | Path = PKG_SOURCE_CONFIG_PATH) -> list[str]:
    """Return the configuration lines without parsing them."""
    return read_file(config_path)


def get_pkg_sources(config_path: str | Path = PKG_SOURCE_CONFIG_PATH) -> list[PkgSource]:
    """
    Parse the package-source configuration into `PkgSource` records, in file order.

    Raises:
    - `FileReadError` if the configuration cannot be opened
    - `SourceConfigError` on the first line with fewer than three fields
    """
    lines = get_pkg_source_list(config_path)
    sources = [parse_pkg_source_line(line, index=i) for i, line in enumerate(lines, start=1)]
    logger.debug("Loaded %d package source(s) from %s", len(sources), config_path)
    return sources


def locate_pkg_repo(pkg_name: str, package_sources: Iterable[PkgSource]) -> PkgSource:
    """
    Return the first source whose `<path>/<pkg_name>/seed.sh` is a regular file.

    Returns an empty `PkgSource()` when no repository has the package; check it
    with `is_empty()`.
    """
    for source in package_sources:
        candidate = seed_path(source.path, pkg_name)
        if candidate.is_file():
            logger.debug("Found %s in %s (%s)", pkg_name, source.name, candidate)
            return source

    logger.debug("Package %s not found in any repository", pkg_name)
    return PkgSource()
