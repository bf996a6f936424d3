"""
renderer.py

Responsibility: Turn package-source records into text for the CLI.

Rules:
- Human-readable output uses a Jinja2 template, one block per source.
- Machine-readable output is YAML, keys in `name`, `url`, `path` order.

This module intentionally does NOT read configuration or touch the filesystem.
"""

from __future__ import annotations

from typing import Iterable

import yaml
from jinja2 import Environment, StrictUndefined

from birb.sources import PkgSource


SOURCE_TEMPLATE = "Name: \t{{ name }}\nURL: \t{{ url }}\nPath: \t{{ path }}\n"

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)
_source_template = _env.from_string(SOURCE_TEMPLATE)


def _as_mapping(source: PkgSource) -> dict[str, str]:
    # Deterministic key order; YAML output relies on it.
    return {"name": source.name, "url": source.url, "path": source.path}


def render_source(source: PkgSource) -> str:
    return _source_template.render(**_as_mapping(source))


def render_sources(sources: Iterable[PkgSource]) -> str:
    """Render each source, separated by a blank line."""
    return "\n".join(render_source(s) for s in sources)


def dump_sources_yaml(sources: Iterable[PkgSource]) -> str:
    return yaml.safe_dump([_as_mapping(s) for s in sources], sort_keys=False)
