"""Tests for the tessel command line."""

import logging

from typer.testing import CliRunner

from tessel import __version__
from tessel.main import typer_app

runner = CliRunner()


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert f"tessel {__version__}" in result.output


def test_build(project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(typer_app, ["build"])

    assert result.exit_code == 0, result.output
    assert "Built 2 pages from 3 components" in result.output
    assert (project / "public" / "index.html").exists()


def test_build_with_config_file(project, monkeypatch, tmp_path_factory):
    (project / "tessel.yaml").write_text("directories:\n  output: dist/\n")
    elsewhere = tmp_path_factory.mktemp("elsewhere")
    monkeypatch.chdir(elsewhere)

    result = runner.invoke(typer_app, ["build", "-c", str(project / "tessel.yaml")])

    assert result.exit_code == 0, result.output
    assert (project / "dist" / "about.html").exists()


def test_build_reports_missing_components(project, monkeypatch):
    (project / "src" / "pages" / "broken.html").write_text("{{Nope}}")
    monkeypatch.chdir(project)

    result = runner.invoke(typer_app, ["-q", "build"])

    assert result.exit_code == 1
    assert 'Component "Nope" not found' in result.output


def test_missing_config_file_exit_code(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(typer_app, ["build", "-c", "nope.yaml"])
    assert result.exit_code == 2


def test_compile_prints_page(project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(typer_app, ["-q", "compile", "index"])

    assert result.exit_code == 0, result.output
    assert "<body><header><h1>Hi</h1></header><button>Go</button></body>" in result.stdout
    assert not (project / "public").exists()


def test_compile_unknown_page(project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(typer_app, ["compile", "missing"])

    assert result.exit_code == 1
    assert 'Page "missing" not found' in result.output


def test_list(project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(typer_app, ["list"])

    assert result.exit_code == 0, result.output
    assert "ui/Button" in result.output
    assert "layout/Header" in result.output
    assert "about" in result.output


def test_init_then_build(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(typer_app, ["init"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "tessel.yaml").exists()
    assert (tmp_path / "src" / "components" / "ui" / "Button.html").exists()

    result = runner.invoke(typer_app, ["build"])
    assert result.exit_code == 0, result.output
    assert '<button class="btn">Hello</button>' in (
        tmp_path / "public" / "index.html"
    ).read_text()


def test_init_refuses_to_overwrite(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tessel.yaml").write_text("watch: false\n")

    result = runner.invoke(typer_app, ["init"])
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = runner.invoke(typer_app, ["init", "--force"])
    assert result.exit_code == 0


def test_quiet_flag_beats_verbose_config(project, monkeypatch):
    (project / "tessel.yaml").write_text("verbose: true\n")
    monkeypatch.chdir(project)

    result = runner.invoke(typer_app, ["-q", "build"])

    assert result.exit_code == 0, result.output
    assert logging.getLogger("tessel").level == logging.ERROR


def test_verbose_config_raises_default_level(project, monkeypatch):
    (project / "tessel.yaml").write_text("verbose: true\n")
    monkeypatch.chdir(project)

    result = runner.invoke(typer_app, ["build"])

    assert result.exit_code == 0, result.output
    assert logging.getLogger("tessel").level == logging.DEBUG
