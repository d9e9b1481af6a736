"""Markdown file discovery under a documentation root"""

import os
from pathlib import Path, PurePosixPath
from typing import Iterable

from docindex.config import DEFAULT_EXCLUDE_DIRS


MD_EXTENSIONS = {'.md'}


def scan_markdown_files(root: Path, exclude_dirs: Iterable[str] = None) -> list[str]:
    """Return sorted root-relative POSIX paths of .md files under root.

    Directories whose name is in exclude_dirs (default: build, dependency and VCS
    directories) are not descended into.
    """
    skip = set(DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)
    found: list[str] = []

    def _walk(directory: Path) -> None:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    if entry.name not in skip:
                        _walk(Path(entry.path))
                elif entry.is_file() and Path(entry.name).suffix in MD_EXTENSIONS:
                    rel = Path(entry.path).relative_to(root)
                    found.append(str(PurePosixPath(*rel.parts)))

    _walk(root)
    return sorted(found)
