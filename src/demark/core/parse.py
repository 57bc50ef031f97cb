"""Public entry points: markdown -> HTML, full documents with frontmatter, and slugs"""

from typing import Any

from demark.core.frontmatter import extract_frontmatter
from demark.core.models import Document
from demark.core.render import render
from demark.core.utils.slug import slugify


def parse(markdown: Any) -> str:
    """Convert markdown text to HTML. Anything that is not a non-empty string gives ''."""
    if not markdown or not isinstance(markdown, str):
        return ""
    return render(markdown)


def parse_document(markdown_content: Any) -> Document:
    """Split off frontmatter, render the rest, and return both with the raw body.

    Input that is not a non-empty string yields an empty Document rather than an error.
    """
    if not markdown_content or not isinstance(markdown_content, str):
        return Document()
    frontmatter, body = extract_frontmatter(markdown_content)
    return Document(frontmatter=frontmatter, content=parse(body), raw_content=body)


def create_slug(text: Any) -> str:
    """Route-friendly slug for text, e.g. a post title."""
    if not isinstance(text, str):
        return ""
    return slugify(text)
