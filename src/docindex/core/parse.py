"""Frontmatter extraction and per-file processing into Document records"""

import re
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from docindex.core.models import Document
from docindex.core.render import MarkdownRenderer
from docindex.core.utils.slug import path_slug


FRONTMATTER_RE = re.compile(r'^---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|$)', re.DOTALL)
ROOT_CATEGORY = 'root'


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1) or '') or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def derive_title(path: str, frontmatter: dict[str, Any]) -> str:
    """Frontmatter title, else the filename with separators as spaces and words capitalized."""
    if frontmatter.get('title'):
        return str(frontmatter['title'])
    stem = PurePosixPath(path).stem
    words = re.sub(r'[-_]', ' ', stem)
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), words)


def derive_category(path: str) -> str:
    """First path segment, or 'root' for files at the top of the tree."""
    parts = PurePosixPath(path).parts
    return parts[0] if len(parts) > 1 else ROOT_CATEGORY


def process_file(root: Path, rel_path: str, renderer: MarkdownRenderer) -> Document:
    """Read, split and render one markdown file relative to root."""
    full_path = root / rel_path
    raw = full_path.read_text(encoding='utf-8')
    frontmatter, body = split_frontmatter(raw)
    mtime = full_path.stat().st_mtime
    return Document(
        path=rel_path,
        title=derive_title(rel_path, frontmatter),
        slug=path_slug(rel_path),
        category=derive_category(rel_path),
        content=renderer.render(body),
        frontmatter=frontmatter,
        last_modified=datetime.fromtimestamp(mtime, tz=timezone.utc),
    )
