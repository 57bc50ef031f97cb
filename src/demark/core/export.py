"""Export: HTML output files and sidecar JSON for rendered documents"""

import json
from pathlib import Path

from demark.core.models import RenderedDoc
from demark.core.utils.escape import escape_html


PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def build_page(rendered: RenderedDoc) -> str:
    """Wrap the rendered fragment in a minimal HTML page titled from frontmatter."""
    title = rendered.document.frontmatter.get('title')
    if not isinstance(title, str):
        title = rendered.slug
    return PAGE_TEMPLATE.format(title=escape_html(title), body=rendered.document.content)


def build_sidecar(rendered: RenderedDoc, include_content: bool = False) -> dict:
    """Build the sidecar JSON dict: slug, path, frontmatter (+ content when requested)."""
    sidecar = {
        "slug": rendered.slug,
        "path": str(rendered.path),
        "frontmatter": rendered.document.frontmatter,
    }
    if include_content:
        sidecar["content"] = rendered.document.content
        sidecar["raw_content"] = rendered.document.raw_content
    return sidecar


def write_doc(rendered: RenderedDoc, output_dir: Path, fmt: str = 'html', full_page: bool = False) -> Path:
    """Write <slug>.html (fmt 'html') and <slug>.json to output_dir. Returns the primary output path."""
    json_path = output_dir / f"{rendered.slug}.json"
    sidecar = build_sidecar(rendered, include_content=(fmt == 'json'))
    json_path.write_text(json.dumps(sidecar, indent=2, ensure_ascii=False), encoding='utf-8')
    if fmt == 'json':
        return json_path

    html_path = output_dir / f"{rendered.slug}.html"
    html = build_page(rendered) if full_page else rendered.document.content + "\n"
    html_path.write_text(html, encoding='utf-8')
    return html_path
