import logging

import pytest

from tessel.lib.compiler import PageCompiler
from tessel.lib.registry import ComponentRegistry


@pytest.fixture(autouse=True)
def reset_tessel_logger():
    """CLI runs install their own handler; give caplog the logger back."""
    yield
    logger = logging.getLogger("tessel")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def registry():
    return ComponentRegistry()


@pytest.fixture
def compiler(registry):
    return PageCompiler(registry)


@pytest.fixture
def project(tmp_path):
    """A small site on disk using the default directory layout."""
    components = tmp_path / "src" / "components"
    pages = tmp_path / "src" / "pages"
    assets = tmp_path / "src" / "assets"
    (components / "ui").mkdir(parents=True)
    (components / "layout").mkdir()
    pages.mkdir(parents=True)
    (assets / "css").mkdir(parents=True)

    (components / "Hero.html").write_text("<h1>Hi</h1>")
    (components / "ui" / "Button.html").write_text("<button>${text}</button>")
    (components / "layout" / "Header.html").write_text("<header>{{Hero}}</header>")
    (pages / "index.html").write_text(
        '<body>{{layout/Header}}{{ui/Button text="Go"}}</body>'
    )
    (pages / "about.html").write_text("<body>{{Hero}}</body>")
    (pages / "notes.txt").write_text("not a page")
    (assets / "css" / "site.css").write_text("body { margin: 0 }")
    (assets / "logo.svg").write_text("<svg/>")
    return tmp_path
