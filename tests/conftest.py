from pathlib import Path

import pytest


def make_package(repo: Path, name: str, seed: str = "") -> Path:
    """Create `<repo>/<name>/seed.sh` and return its path."""
    pkg_dir = repo / name
    pkg_dir.mkdir(parents=True, exist_ok=True)
    script = pkg_dir / "seed.sh"
    script.write_text(seed, encoding="utf-8")
    return script


@pytest.fixture()
def repos(tmp_path: Path) -> dict[str, Path]:
    """Two repositories: `core` holds zlib and ncurses, `extra` holds ncurses and xterm."""
    core = tmp_path / "core"
    extra = tmp_path / "extra"
    make_package(core, "zlib", 'NAME="zlib"\nVERSION="1.3"\nDEPS=""\n')
    make_package(core, "ncurses", 'NAME="ncurses"\nDEPS="zlib"\n')
    make_package(extra, "ncurses", 'NAME="ncurses"\nDEPS="zlib readline"\n')
    make_package(extra, "xterm", 'NAME="xterm"\nDEPS="ncurses libx11"\n')
    return {"core": core, "extra": extra}


@pytest.fixture()
def sources_conf(tmp_path: Path, repos: dict[str, Path]) -> Path:
    conf = tmp_path / "birb-sources.conf"
    conf.write_text(
        "# name;url;path\n"
        "\n"
        f"core;https://example.invalid/core.git;{repos['core']}\n"
        f"extra;https://example.invalid/extra.git;{repos['extra']}\n",
        encoding="utf-8",
    )
    return conf


@pytest.fixture()
def make_pkg():
    return make_package
