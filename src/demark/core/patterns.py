"""Read-only table of markdown recognizers: one compiled regex + replacement per construct"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from demark.core.utils.escape import escape_html


Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class Rule:
    """A named recognizer pairing a match regex with its replacement."""
    name:        str
    regex:       re.Pattern
    replacement: Optional[Replacement] = None     # None for rules used only to match or split

    def apply(self, text: str) -> str:
        """Rewrite every non-overlapping match in text, left to right."""
        if self.replacement is None:
            raise ValueError(f"rule {self.name!r} has no replacement; use its regex directly")
        return self.regex.sub(self.replacement, text)


def _heading(m: re.Match) -> str:
    level = len(m.group(1))
    return f"<h{level}>{m.group(2).strip()}</h{level}>"


def _code_block(m: re.Match) -> str:
    lang = f' class="language-{m.group(1)}"' if m.group(1) else ""
    return f"<pre><code{lang}>{escape_html(m.group(2).strip())}</code></pre>"


_RULES = (
    Rule("frontmatter",     re.compile(r'\A---\r?\n(?:(.*?)\r?\n)??---(?:\r?\n|\Z)', re.DOTALL)),
    Rule("heading",         re.compile(r'^(#{1,6})[ \t]+(.+)', re.MULTILINE), _heading),
    Rule("bold",            re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    Rule("italic",          re.compile(r'_(.*?)_'), r'<em>\1</em>'),
    Rule("link",            re.compile(r'\[([^\[\]\n]+)\]\(([^()\n]+)\)'), r'<a href="\2">\1</a>'),
    Rule("image",           re.compile(r'!\[([^\[\]\n]*)\]\(([^()\n]+)\)'), r'<img src="\2" alt="\1" />'),
    Rule("code_block",      re.compile(r'```(\w+)?\n?(.*?)\n?```', re.DOTALL), _code_block),
    Rule("inline_code",     re.compile(r'`([^`\n]+)`'), r'<code>\1</code>'),
    Rule("line_break",      re.compile(r'\n\s*\n')),
    Rule("horizontal_rule", re.compile(r'^---+(?=\r?$)', re.MULTILINE), '<hr />'),
)

# Built once at import; the mapping proxy and frozen rules make it read-only.
PATTERNS: Mapping[str, Rule] = MappingProxyType({r.name: r for r in _RULES})
