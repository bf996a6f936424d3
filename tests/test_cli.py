from pathlib import Path

import pytest

from birb.cli import main


def test_sources_lists_records(sources_conf: Path, repos: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "sources"]) == 0
    out = capsys.readouterr().out
    assert "Name: \tcore\n" in out
    assert f"Path: \t{repos['extra']}\n" in out


def test_sources_raw(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "sources", "--raw"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("core;https://example.invalid/core.git;")


def test_sources_yaml(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "sources", "--yaml"]) == 0
    assert "- name: core\n" in capsys.readouterr().out


def test_missing_config_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.conf"
    assert main(["--sources", str(missing), "sources"]) == 2
    assert capsys.readouterr().out == f"File [{missing}] can't be opened!\n"


def test_malformed_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    conf = tmp_path / "bad.conf"
    conf.write_text("core;https://x\n", encoding="utf-8")
    assert main(["--sources", str(conf), "locate", "zlib"]) == 2
    assert "Malformed package source entry 1" in capsys.readouterr().err


def test_locate(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "locate", "xterm"]) == 0
    assert "Name: \textra\n" in capsys.readouterr().out


def test_locate_not_found(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "locate", "nothing"]) == 1
    assert "nothing" in capsys.readouterr().err


def test_var_locates_repository(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "var", "ncurses", "DEPS"]) == 0
    assert capsys.readouterr().out == "zlib\n"


def test_var_with_explicit_repo(repos: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    # The configuration is never read when --repo is given.
    argv = ["--sources", "/nonexistent/birb-sources.conf", "var", "ncurses", "DEPS", "--repo", str(repos["extra"])]
    assert main(argv) == 0
    assert capsys.readouterr().out == "zlib readline\n"


def test_var_unknown_package(sources_conf: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sources", str(sources_conf), "var", "nothing", "DEPS"]) == 1


def test_sources_raw_with_invalid_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    conf = tmp_path / "sources.conf"
    conf.write_bytes(b"# J\xf6rg's repos\ncore;u;/x\n")
    assert main(["--sources", str(conf), "sources", "--raw"]) == 0
    assert capsys.readouterr().out == "core;u;/x\n"
