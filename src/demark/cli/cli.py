"""CLI entrypoint: Typer app definition and command registration"""

import typer

from demark.cli.commands import render_cmd, show_cmd, slug_cmd


app = typer.Typer(name="demark", no_args_is_help=True, help="Render simple markdown with frontmatter to HTML")

app.command(name="render")(render_cmd)
app.command(name="show")(show_cmd)
app.command(name="slug")(slug_cmd)
