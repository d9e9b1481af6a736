"""Aggregate processed markdown files into a single documentation index"""

import json
import logging
from pathlib import Path

from docindex.config import Settings
from docindex.core.models import DocIndex, Document
from docindex.core.parse import process_file
from docindex.core.render import MarkdownRenderer, make_renderer
from docindex.core.scan import scan_markdown_files


LOGGER = logging.getLogger(__name__)


def build_index(
    root: Path,
    settings: Settings = None,
    renderer: MarkdownRenderer = None,
    ) -> DocIndex:
    """Scan root, process every markdown file and return the index.

    A file that cannot be read or parsed is logged and left out; it never
    fails the whole build.
    """
    settings = settings or Settings()
    renderer = renderer or make_renderer(settings)
    root = Path(root)

    files: list[Document] = []
    for rel_path in scan_markdown_files(root, settings.exclude_dirs):
        try:
            files.append(process_file(root, rel_path, renderer))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            LOGGER.error("Skipping %s: %s", rel_path, e)

    categories = sorted({f.category for f in files})
    LOGGER.info("Processed documentation: files=%d categories=%d", len(files), len(categories))
    return DocIndex(files=files, categories=categories)


def serialize_index(index: DocIndex) -> str:
    """Render the index as the JSON text shared by every delivery mechanism."""
    return json.dumps(index.to_payload(), indent=2, ensure_ascii=False)


def load_index(path: Path) -> DocIndex:
    """Read a previously emitted index file."""
    return DocIndex.model_validate_json(Path(path).read_text(encoding='utf-8'))
