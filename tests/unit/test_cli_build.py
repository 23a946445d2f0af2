"""Tests for the component-bundler CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from component_bundler.builder import DEFAULT_PATTERNS
from component_bundler.cli.build import make_options
from component_bundler.cli.main import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("component_bundler.cli.main.configure_logging", lambda level: None)


def _component(root: Path) -> Path:
    root.mkdir()
    (root / "a.js").write_text("var a = 1;", encoding="utf-8")
    (root / "b.js").write_text("var b = 2;", encoding="utf-8")
    (root / "a.spec.js").write_text("describe();", encoding="utf-8")
    return root


def test_make_options_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    options = make_options(cwd=None, patterns=())
    assert options.cwd == str(tmp_path)
    assert options.patterns == DEFAULT_PATTERNS


def test_make_options_absolutizes_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    options = make_options(cwd="widget", patterns=("*.js",), name="widget")
    assert options.cwd == str(tmp_path / "widget")
    assert options.component_name == "widget"


def test_build_prints_artifact_path(tmp_path: Path) -> None:
    root = _component(tmp_path / "widget")
    cache_dir = tmp_path / "out"
    runner = CliRunner()
    args = ["build", "--cwd", str(root), "--cache-dir", str(cache_dir), "--name", "widget"]
    result = runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    artifact = Path(result.output.strip())
    assert artifact.parent == cache_dir
    assert artifact.name.startswith("widget-")
    contents = artifact.read_text(encoding="utf-8")
    assert "var a = 1;" in contents
    assert "describe();" not in contents

    again = runner.invoke(cli, args)
    assert again.output == result.output


def test_build_verbose_reports_cache_state(tmp_path: Path) -> None:
    root = _component(tmp_path / "widget")
    runner = CliRunner()
    args = ["build", "--cwd", str(root), "--pattern", "a.js", "--verbose"]
    first = runner.invoke(cli, args)
    assert first.exit_code == 0
    assert "rebuilt: 1 file(s)" in first.output
    second = runner.invoke(cli, args)
    assert "cached: 1 file(s)" in second.output


def test_contents_prints_module(tmp_path: Path) -> None:
    root = _component(tmp_path / "widget")
    runner = CliRunner()
    result = runner.invoke(
        cli, ["contents", "--cwd", str(root), "--pattern", "*.js", "--pattern", "!a*.js"]
    )
    assert result.exit_code == 0
    assert result.output == "(function(){ 'use strict';\nvar b = 2;\n})();\n"


def test_resolve_lists_paths(tmp_path: Path) -> None:
    root = _component(tmp_path / "widget")
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "--cwd", str(root), "--pattern", "*.js"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        str(root / "a.js"),
        str(root / "a.spec.js"),
        str(root / "b.js"),
    ]


def test_bundler_errors_become_click_errors(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "--cwd", str(tmp_path), "--pattern", "[bad"])
    assert result.exit_code == 1
    assert "unterminated character class" in result.output
