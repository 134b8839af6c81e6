"""Integration tests for full site builds."""

import pytest

from tessel.lib.config import DirectoriesConfig, TesselConfig
from tessel.lib.errors import (
    CircularReferenceError,
    CompilationError,
    FileReadError,
    TesselError,
)
from tessel.lib.site import build_site, prepare_site


def test_build_writes_compiled_pages(project):
    result = build_site(TesselConfig(), project)

    out = project / "public"
    assert (out / "index.html").read_text() == (
        "<body><header><h1>Hi</h1></header><button>Go</button></body>"
    )
    assert (out / "about.html").read_text() == "<body><h1>Hi</h1></body>"
    assert not (out / "notes.html").exists()

    assert sorted(result.pages) == ["about", "index"]
    assert sorted(result.components) == ["Hero", "layout/Header", "ui/Button"]
    assert sorted(p.name for p in result.written) == ["about.html", "index.html"]


def test_build_copies_assets(project):
    result = build_site(TesselConfig(), project)

    assert result.assets_copied == 2
    assert (project / "public" / "css" / "site.css").exists()
    assert (project / "public" / "logo.svg").exists()


def test_build_respects_configured_directories(project):
    config = TesselConfig(directories=DirectoriesConfig(output="dist/"))
    build_site(config, project)

    assert (project / "dist" / "index.html").exists()
    assert not (project / "public").exists()


def test_failed_page_writes_nothing(project):
    (project / "src" / "pages" / "broken.html").write_text("{{Nope}}{{AlsoNope}}")

    with pytest.raises(CompilationError) as exc_info:
        build_site(TesselConfig(), project)

    assert exc_info.value.context_name == "broken"
    assert len(exc_info.value.errors) == 2
    assert not (project / "public" / "index.html").exists()


def test_cycle_fails_build(project):
    (project / "src" / "components" / "Hero.html").write_text("{{layout/Header}}")

    with pytest.raises(CircularReferenceError) as exc_info:
        build_site(TesselConfig(), project)
    assert "Hero -> layout/Header -> Hero" in str(exc_info.value)


def test_empty_project_creates_source_dirs(tmp_path):
    result = build_site(TesselConfig(), tmp_path)

    assert (tmp_path / "src" / "components").is_dir()
    assert (tmp_path / "src" / "pages").is_dir()
    assert (tmp_path / "public").is_dir()
    assert result.pages == []


def test_prepare_site_loads_without_writing(project):
    registry, compiler = prepare_site(TesselConfig(), project)

    assert registry.count() == 3
    assert compiler.page_count() == 2
    assert not (project / "public").exists()


def test_undecodable_component_fails_build(project):
    (project / "src" / "components" / "Hero.html").write_bytes(b"<h1>\xff</h1>")

    with pytest.raises(TesselError) as exc_info:
        build_site(TesselConfig(), project)
    assert isinstance(exc_info.value, FileReadError)
    assert not (project / "public").exists()
