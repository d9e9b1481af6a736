"""Slug generation for document identifiers"""

import re
from pathlib import PurePath


MD_SUFFIX = ".md"


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug. Path separators are kept."""
    text = text.replace("\\", "/").lower()
    text = re.sub(r'[^a-z0-9/]+', '-', text)
    return text.strip('-')


def path_slug(path: str | PurePath) -> str:
    """Return the slug of a root-relative markdown path (suffix dropped)."""
    text = str(path).replace("\\", "/")
    if text.endswith(MD_SUFFIX):
        text = text[:-len(MD_SUFFIX)]
    return slugify(text)
