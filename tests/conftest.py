"""Root test configuration: a small documentation tree shared by core, web and CLI tests"""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from docindex.core.models import DocIndex, Document


README_MD = """\
---
title: Project Overview
tags: [intro]
---

# Music Collaboration Platform

This project lets musicians share stems and collaborate in real time.
"""

API_GUIDE_MD = """\
# API Guide

Start the backend:

```sh
npm run dev
```

Projects are exposed under `/api/projects`.
"""

STORES_MD = """\
# State Stores

Pinia stores wrap the API client.
"""


def write_docs_tree(root: Path) -> Path:
    """Create a docs tree with root, backend and frontend files plus ignored noise."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "README.md").write_text(README_MD)
    (root / "backend").mkdir()
    (root / "backend" / "api-guide.md").write_text(API_GUIDE_MD)
    (root / "frontend").mkdir()
    (root / "frontend" / "state_stores.md").write_text(STORES_MD)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "README.md").write_text("# vendored\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD.md").write_text("ref\n")
    (root / "notes.txt").write_text("not markdown\n")
    return root


@pytest.fixture(name="docs_root")
def docs_root_fixture(tmp_path):
    return write_docs_tree(tmp_path / "docs")


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """Keep DOCINDEX_* env vars and stray config.yaml files out of every test."""
    for name in list(os.environ):
        if name.startswith("DOCINDEX_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


FILLER = "<p>Audio and MIDI tracks are stored alongside waveform previews and metadata.</p>"


def _doc(title, content, slug, category="root", path=None) -> Document:
    return Document(
        path=path or f"{slug}.md",
        title=title,
        slug=slug,
        category=category,
        content=content,
        frontmatter={},
        last_modified=datetime(2026, 1, 15, tzinfo=timezone.utc),
    )


@pytest.fixture(name="sample_index")
def sample_index_fixture():
    """Four documents: "project" appears in one title and in two bodies."""
    files = [
        _doc("Setup", "<p>Install the project dependencies. The project uses npm.</p>", "setup"),
        _doc("Project Overview", "<h1>Overview</h1><p>Music collaboration.</p>", "readme"),
        _doc("Stems", "<p>Stems belong to a project.</p>" + FILLER +
                      "<p>Each project has many stems.</p>" + FILLER +
                      "<p>A project owner uploads them.</p>",
             "backend/stems", category="backend", path="backend/stems.md"),
        _doc("Stores", "<p>Pinia stores.</p>",
             "frontend/stores", category="frontend", path="frontend/stores.md"),
    ]
    return DocIndex(files=files, categories=["backend", "frontend", "root"])
