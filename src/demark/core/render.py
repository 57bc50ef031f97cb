"""Markdown-to-HTML rewrite pipeline: ordered regex passes over the whole text"""

import logging
from typing import Callable

from demark.core.patterns import PATTERNS


logger = logging.getLogger(__name__)

Pass = Callable[[str], str]


def render_headings(text: str) -> str:
    """`# Title` lines -> <h1>..<h6>."""
    return PATTERNS["heading"].apply(text)


def render_images(text: str) -> str:
    """`![alt](src)` -> <img />. Runs before links so the `!` form is not taken as a link."""
    return PATTERNS["image"].apply(text)


def render_links(text: str) -> str:
    return PATTERNS["link"].apply(text)


def render_code_blocks(text: str) -> str:
    """Fenced ``` blocks -> <pre><code>, body escaped. Runs before inline code."""
    return PATTERNS["code_block"].apply(text)


def render_inline_code(text: str) -> str:
    """Single-backtick spans -> <code>. Content is emitted as-is, not escaped."""
    return PATTERNS["inline_code"].apply(text)


def render_bold(text: str) -> str:
    return PATTERNS["bold"].apply(text)


def render_italic(text: str) -> str:
    return PATTERNS["italic"].apply(text)


def render_horizontal_rules(text: str) -> str:
    return PATTERNS["horizontal_rule"].apply(text)


def wrap_paragraphs(text: str) -> str:
    """Wrap blank-line separated blocks in <p>, skipping blocks that already look like HTML.

    A block counts as HTML when its trimmed text starts with '<' and ends with '>'.
    Empty blocks are dropped and the survivors are joined with a blank line.
    """
    blocks = []
    for block in PATTERNS["line_break"].regex.split(text):
        trimmed = block.strip()
        if not trimmed:
            continue
        if trimmed.startswith("<") and trimmed.endswith(">"):
            blocks.append(trimmed)
        else:
            blocks.append(f"<p>{trimmed}</p>")
    return "\n\n".join(blocks)


# Application order; independent of the declaration order in PATTERNS.
PASSES: tuple[Pass, ...] = (
    render_headings,
    render_images,
    render_links,
    render_code_blocks,
    render_inline_code,
    render_bold,
    render_italic,
    render_horizontal_rules,
    wrap_paragraphs,
)


def render(text: str) -> str:
    """Run every pass over text in order and return the trimmed HTML."""
    html = text
    for step in PASSES:
        html = step(html)
    logger.debug("rendered %d chars of markdown to %d chars of html", len(text), len(html))
    return html.strip()
