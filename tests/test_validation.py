"""Tests for component name and file name validation."""

import pytest

from tessel.lib.errors import InvalidPathError
from tessel.lib.validation import (
    is_valid_component_name,
    is_valid_file_name,
    sanitize_path,
)


@pytest.mark.parametrize(
    "name",
    ["Hero", "ui/Button", "ui/inputs/TextInput", "blog-post", "nav_bar", "a1/B2-c_3"],
)
def test_valid_component_names(name):
    assert is_valid_component_name(name)


@pytest.mark.parametrize(
    "name",
    [
        "",
        "/Hero",
        "Hero/",
        "ui//Button",
        "ui/ Button",
        "my component",
        "Button.html",
        "../secret",
        "ui/but$ton",
        "Hero\n",
    ],
)
def test_invalid_component_names(name):
    assert not is_valid_component_name(name)


def test_non_string_component_names_are_invalid():
    assert not is_valid_component_name(None)
    assert not is_valid_component_name(42)


@pytest.mark.parametrize("name", ["Button.html", "site-v2.css", "logo_1.svg"])
def test_valid_file_names(name):
    assert is_valid_file_name(name)


@pytest.mark.parametrize(
    "name",
    ["../etc.html", "a..b.html", "evil\0.html", "noext", "dir/file.html", "two.dots.html"],
)
def test_invalid_file_names(name):
    assert not is_valid_file_name(name)


def test_sanitize_path_inside_base(tmp_path):
    assert sanitize_path("pages/index.html", tmp_path) == (
        tmp_path / "pages" / "index.html"
    ).resolve()


def test_sanitize_path_rejects_traversal(tmp_path):
    with pytest.raises(InvalidPathError):
        sanitize_path("../outside.html", tmp_path / "base")
