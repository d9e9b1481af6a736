"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docindex.cli.commands import build_cmd, list_cmd, search_cmd, serve_cmd, show_cmd


app = typer.Typer(name="docindex", no_args_is_help=True, help="Markdown documentation index builder")

app.command(name="build")(build_cmd)
app.command(name="serve")(serve_cmd)
app.command(name="search")(search_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
