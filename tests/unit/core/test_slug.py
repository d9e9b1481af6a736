"""Unit tests for core/utils/slug.py"""

import pytest

from docindex.core.utils.slug import path_slug, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("backend/Read Me", "backend/read-me"),
    ("docs\\Setup", "docs/setup"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify lowercases and collapses non-alphanumeric runs into single hyphens."""
    assert slugify(text) == expected


@pytest.mark.parametrize("text", [
    "Hello World", "--x--", "backend/API Guide", "a.b.c", "Ünïcödé title", "already-slugified",
])
def test_slugify_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


@pytest.mark.parametrize("path,expected", [
    ("README.md", "readme"),
    ("PROJECT-PLAN.md", "project-plan"),
    ("backend/api-guide.md", "backend/api-guide"),
    ("frontend/state_stores.md", "frontend/state-stores"),
    ("docs\\Setup Notes.md", "docs/setup-notes"),
])
def test_path_slug(path, expected):
    """path_slug drops the .md suffix and keeps path separators."""
    assert path_slug(path) == expected


def test_path_slug_deterministic():
    assert path_slug("backend/README.md") == path_slug("backend/README.md")
