"""Data models for parsed documents and file-level render results"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


# bool must stay ahead of float in the union.
FrontmatterValue = Union[bool, float, str, list[str]]


class Document(BaseModel):
    """Result of parse_document: typed frontmatter, rendered HTML, and the markdown it came from."""
    model_config = ConfigDict(frozen=True)

    frontmatter: dict[str, FrontmatterValue] = Field(default_factory=dict)
    content:     str = ""       # HTML
    raw_content: str = ""       # markdown body without the frontmatter block


@dataclass
class RenderedDoc:
    """A source file after rendering; carries the output slug used by export."""
    path:     Path
    slug:     str
    document: Document
