"""Leading `---` metadata block extraction and line-based key/value coercion"""

import logging
import math
import re

from demark.core.models import FrontmatterValue
from demark.core.patterns import PATTERNS


logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"')


def _unquote(value: str) -> str:
    return value[1:-1] if _is_quoted(value) else value


def coerce_value(raw: str) -> FrontmatterValue:
    """Coerce a trimmed raw value: list, quoted string, bool, number, then plain string."""
    if raw.startswith("[") and raw.endswith("]"):
        inner = raw[1:-1].strip()
        if not inner:
            return []
        return [_unquote(item.strip()) for item in inner.split(",")]
    if _is_quoted(raw):
        return raw[1:-1]
    if raw == "true":
        return True
    if raw == "false":
        return False
    if NUMBER_RE.fullmatch(raw):
        number = float(raw)
        if math.isfinite(number):
            return number
    return raw


def parse_frontmatter(block: str) -> dict[str, FrontmatterValue]:
    """Parse `key: value` lines into a mapping. Lines without a colon are skipped; last key wins."""
    data: dict[str, FrontmatterValue] = {}
    for line in block.strip().split("\n"):
        key, sep, raw = line.partition(":")
        if not sep:
            continue
        data[key.strip()] = coerce_value(raw.strip())
    return data


def extract_frontmatter(text: str) -> tuple[dict[str, FrontmatterValue], str]:
    """Return (frontmatter, body). Body is trimmed when a block was found, untouched otherwise."""
    m = PATTERNS["frontmatter"].regex.match(text)
    if not m:
        return {}, text
    frontmatter = parse_frontmatter(m.group(1) or "")
    logger.debug("extracted %d frontmatter key(s)", len(frontmatter))
    return frontmatter, text[m.end():].strip()
