"""File discovery and render orchestration for the CLI"""

import logging
from pathlib import Path

from demark.core.export import write_doc
from demark.core.models import RenderedDoc
from demark.core.parse import parse_document
from demark.core.utils.slug import slugify


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.markdown'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files under path, or [path] if a single markdown file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def _doc_slug(frontmatter: dict, path: Path) -> str:
    """Slug from frontmatter `slug`, then `title`, then the filename stem."""
    for key in ('slug', 'title'):
        value = frontmatter.get(key)
        if isinstance(value, str) and slugify(value):
            return slugify(value)
    return slugify(path.stem) or path.stem


def render_file(path: Path) -> RenderedDoc:
    """Read a markdown file and render it into a RenderedDoc."""
    document = parse_document(path.read_text(encoding='utf-8'))
    return RenderedDoc(path=path, slug=_doc_slug(document.frontmatter, path), document=document)


def run_render(
    path: str,
    output_dir: Path,
    fmt: str = 'html',
    full_page: bool = False,
    ) -> list[tuple[Path, Path]]:
    """Render every markdown file under path into output_dir. Returns (source, output) pairs.

    Two sources that resolve to the same slug are an error; the second is not written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    seen: dict[str, Path] = {}
    for p in discover_files(Path(path)):
        try:
            rendered = render_file(p)
            if rendered.slug in seen:
                raise RuntimeError(
                    f"Failed to render {p}: duplicate slug '{rendered.slug}' (already used by {seen[rendered.slug]})"
                )
            out_file = write_doc(rendered, output_dir, fmt, full_page)
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        seen[rendered.slug] = p
        logger.debug("rendered %s -> %s", p, out_file)
        results.append((p, out_file))
    return results
