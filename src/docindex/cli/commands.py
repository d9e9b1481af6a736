"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docindex.config import Settings, load_config
from docindex.core.build import VIRTUAL_MODULE_ID, build_start, generate_assets, load_virtual_module
from docindex.core.index import load_index
from docindex.core.models import DocIndex
from docindex.core.search import get_by_slug, search_index


LOG_FORMAT = "[%(levelname)s] %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)
    return settings


def _index_path(settings: Settings, index: Optional[str]) -> Path:
    return Path(index) if index else Path(settings.output_dir) / settings.index_filename


def _load(path: Path) -> DocIndex:
    """Read a built index with standard CLI error handling."""
    if not path.exists():
        _fail(f"Index not found at {path}. Run 'docindex build' first.")
    try:
        return load_index(path)
    except ValueError as e:
        _fail(f"Invalid index file {path}", e)


def build_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Documentation root to scan")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    module: Annotated[Optional[Path], typer.Option("--module", help="Also write the virtual module source here")] = None,
    ):
    """Scan, render and write the static docs-index.json."""
    settings = _settings(overrides={"docs_root": root, "output_dir": out})
    out_file = generate_assets(Path(settings.docs_root), Path(settings.output_dir), settings)
    if out_file is None:
        _fail("Build failed; see log output above.")
    index = load_index(out_file)
    typer.echo(f"Indexed {len(index.files)} document(s) in {len(index.categories)} categories -> {out_file}")

    if module is not None:
        module.parent.mkdir(parents=True, exist_ok=True)
        module.write_text(load_virtual_module(VIRTUAL_MODULE_ID, index), encoding="utf-8")
        typer.echo(f"Wrote {VIRTUAL_MODULE_ID} -> {module}")


def serve_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Documentation root to scan")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Bind port")] = None,
    ):
    """Build the index once and serve it at /api/docs."""
    import uvicorn

    from docindex.web.app import create_app

    settings = _settings(overrides={"docs_root": root, "host": host, "port": port})
    index = build_start(Path(settings.docs_root), settings)
    uvicorn.run(create_app(index), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def search_cmd(
    query: Annotated[str, typer.Argument(help="Search terms; every term must match")],
    index: Annotated[Optional[str], typer.Option("--index", help="Path to docs-index.json")] = None,
    limit: Annotated[int, typer.Option("--limit", min=1, help="Max results to print")] = 20,
    ):
    """Search a built index, title matches first."""
    settings = _settings()
    doc_index = _load(_index_path(settings, index))
    results = search_index(doc_index, query, limit=limit)
    if not results:
        typer.echo("No matches.")
        raise typer.Exit(1)
    for r in results:
        typer.echo(f"{r.file.slug}  {r.file.title}  ({len(r.matches)} matches)")
        for m in r.matches:
            typer.echo(f"    ...{' '.join(m.text.split())}...")


def list_cmd(
    index: Annotated[Optional[str], typer.Option("--index", help="Path to docs-index.json")] = None,
    ):
    """List categories with their document counts."""
    settings = _settings()
    doc_index = _load(_index_path(settings, index))
    if not doc_index.files:
        typer.echo("No documents in index.")
        raise typer.Exit(1)
    for category in doc_index.categories:
        count = sum(1 for f in doc_index.files if f.category == category)
        typer.echo(f"{category}\t{count}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Document slug")],
    index: Annotated[Optional[str], typer.Option("--index", help="Path to docs-index.json")] = None,
    ):
    """Print one document's metadata."""
    settings = _settings()
    doc = get_by_slug(_load(_index_path(settings, index)), slug)
    if doc is None:
        _fail(f"No document with slug '{slug}'")
    typer.echo(f"title:         {doc.title}")
    typer.echo(f"path:          {doc.path}")
    typer.echo(f"category:      {doc.category}")
    typer.echo(f"last modified: {doc.last_modified.isoformat()}")
    for key, value in doc.frontmatter.items():
        typer.echo(f"  {key}: {value}")
