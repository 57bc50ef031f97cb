"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from demark.config import Settings, load_config
from demark.core.parse import create_slug
from demark.core.pipeline import render_file, run_render


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html or json")] = None,
    full_page: Annotated[bool, typer.Option("--full-page", help="Wrap output in an HTML page")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Render markdown files to HTML with sidecar JSON frontmatter."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "full_page": full_page or None})
    _setup_logging(settings, verbose)
    if not Path(path).exists():
        _fail(f"Path not found: {path}")

    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, output_dir, settings.output_format, settings.full_page)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found in {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to render")],
    frontmatter: Annotated[bool, typer.Option("--frontmatter", help="Print frontmatter as JSON instead of HTML")] = False,
    ):
    """Print the rendered HTML (or frontmatter) of a single file."""
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        rendered = render_file(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Failed to read {path}", e)
    if frontmatter:
        typer.echo(json.dumps(rendered.document.frontmatter, indent=2, ensure_ascii=False))
    else:
        typer.echo(rendered.document.content)


def slug_cmd(
    words: Annotated[list[str], typer.Argument(help="Text to convert")],
    ):
    """Print the URL slug for the given text."""
    typer.echo(create_slug(" ".join(words)))
