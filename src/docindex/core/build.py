"""Build-phase hooks: index at start, virtual module, and static asset emission.

Each hook is a plain function over build_index, called from the host build
pipeline's extension points:

  build_start              once per build or dev-server start
  resolve_virtual_module   module id resolution
  load_virtual_module      module source for the resolved id
  generate_assets          write docs-index.json into the output directory

The dev middleware lives in docindex.web.app.
"""

import logging
from pathlib import Path

from docindex.config import Settings
from docindex.core.index import build_index, serialize_index
from docindex.core.models import DocIndex


LOGGER = logging.getLogger(__name__)

VIRTUAL_MODULE_ID = "virtual:docs-index"


def build_start(root: Path, settings: Settings = None) -> DocIndex | None:
    """Build the index once; log and return None if the build fails outright."""
    LOGGER.info("Scanning for markdown files in: %s", root)
    try:
        return build_index(Path(root), settings)
    except Exception as e:
        LOGGER.error("Error processing docs during build: %s", e)
        return None


def resolve_virtual_module(module_id: str) -> str | None:
    return module_id if module_id == VIRTUAL_MODULE_ID else None


def load_virtual_module(module_id: str, index: DocIndex | None) -> str | None:
    """Return `export default <index json>` for the virtual module id, else None."""
    if module_id != VIRTUAL_MODULE_ID:
        return None
    payload = serialize_index(index) if index is not None else "null"
    return f"export default {payload}"


def generate_assets(root: Path, out_dir: Path, settings: Settings = None) -> Path | None:
    """Rebuild the index and write it as the static asset; returns the written path."""
    settings = settings or Settings()
    try:
        index = build_index(Path(root), settings)
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / settings.index_filename
        out_file.write_text(serialize_index(index), encoding='utf-8')
    except Exception as e:
        LOGGER.error("Error generating docs bundle: %s", e)
        return None
    LOGGER.info("Wrote %s", out_file)
    return out_file
