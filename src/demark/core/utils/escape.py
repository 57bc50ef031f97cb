"""HTML entity escaping for rendered code"""


_HTML_ENTITIES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(text: str) -> str:
    """Replace the five reserved HTML characters with entities; everything else is kept."""
    return text.translate(_HTML_ENTITIES)
