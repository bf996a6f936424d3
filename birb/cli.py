"""
cli.py

Responsibility: CLI entrypoint for the birb repository helpers.

Commands:
- `sources`: list the configured package repositories
- `locate`: find which repository carries a package
- `var`: print a variable assigned in a package's `seed.sh`

An unreadable package-source configuration is fatal here (exit status 2); the
library functions only raise.
"""

from __future__ import annotations

import argparse
import logging
import sys

from birb.errors import FileReadError, SourceConfigError
from birb.renderer import dump_sources_yaml, render_source, render_sources
from birb.sources import PKG_SOURCE_CONFIG_PATH, get_pkg_source_list, get_pkg_sources, locate_pkg_repo
from birb.variables import VariableCache, read_pkg_variable

logger = logging.getLogger("birb")

EXIT_NOT_FOUND = 1
EXIT_CONFIG = 2


def sources_cmd(args: argparse.Namespace) -> int:
    if args.raw:
        for line in get_pkg_source_list(args.sources):
            print(line)
        return 0

    sources = get_pkg_sources(args.sources)
    if args.yaml:
        sys.stdout.write(dump_sources_yaml(sources))
    else:
        sys.stdout.write(render_sources(sources))
    return 0


def locate_cmd(args: argparse.Namespace) -> int:
    source = locate_pkg_repo(args.package, get_pkg_sources(args.sources))
    if source.is_empty():
        print(f"Package [{args.package}] was not found in any repository", file=sys.stderr)
        return EXIT_NOT_FOUND
    sys.stdout.write(render_source(source))
    return 0


def var_cmd(args: argparse.Namespace) -> int:
    repo_path = args.repo
    if repo_path is None:
        source = locate_pkg_repo(args.package, get_pkg_sources(args.sources))
        if source.is_empty():
            print(f"Package [{args.package}] was not found in any repository", file=sys.stderr)
            return EXIT_NOT_FOUND
        repo_path = source.path

    print(read_pkg_variable(args.package, args.variable, repo_path, cache=args.cache))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="birb-repo", description="Inspect birb package repositories")
    p.add_argument(
        "--sources",
        default=PKG_SOURCE_CONFIG_PATH,
        help=f"Package source configuration (default: {PKG_SOURCE_CONFIG_PATH})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("sources", help="List configured package repositories")
    fmt = s.add_mutually_exclusive_group()
    fmt.add_argument("--raw", action="store_true", help="Print configuration lines without parsing")
    fmt.add_argument("--yaml", action="store_true", help="Print sources as YAML")
    s.set_defaults(func=sources_cmd)

    loc = sub.add_parser("locate", help="Find the repository that carries a package")
    loc.add_argument("package", help="Package name")
    loc.set_defaults(func=locate_cmd)

    v = sub.add_parser("var", help="Print a variable from a package's seed.sh")
    v.add_argument("package", help="Package name")
    v.add_argument("variable", help="Variable name, e.g. DEPS")
    v.add_argument("--repo", default=None, help="Repository path (default: locate the package)")
    v.set_defaults(func=var_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args.cache = VariableCache()
    logger.debug("Running %s with sources from %s", args.command, args.sources)

    try:
        return int(args.func(args))
    except FileReadError as e:
        # Nothing useful can happen without the source list.
        print(e)
        return EXIT_CONFIG
    except SourceConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG


if __name__ == "__main__":
    raise SystemExit(main())
