"""Unit tests for core/frontmatter.py"""

import pytest

from demark.core.frontmatter import coerce_value, extract_frontmatter, parse_frontmatter


# --- coerce_value ---

@pytest.mark.parametrize("raw,expected", [
    ("hello", "hello"),
    ("hello world", "hello world"),
    ('"quoted"', "quoted"),
    ("'single'", "single"),
    ('"true"', "true"),
    ("'42'", "42"),
    ('"mismatched\'', '"mismatched\''),
    ('"', '"'),
    ("true", True),
    ("false", False),
    ("True", "True"),
    ("42", 42.0),
    ("-3.5", -3.5),
    ("+.5", 0.5),
    ("1e3", 1000.0),
    ("12px", "12px"),
    ("1.2.3", "1.2.3"),
    ("1e400", "1e400"),
    ("inf", "inf"),
    ("nan", "nan"),
    ("2024-01-15", "2024-01-15"),
    ("", ""),
])
def test_coerce_value_scalars(raw, expected):
    value = coerce_value(raw)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("raw,expected", [
    ("[]", []),
    ("[   ]", []),
    ("[a, b, c]", ["a", "b", "c"]),
    ("[\"a\", 'b', c]", ["a", "b", "c"]),
    ("[1, true, 2.5]", ["1", "true", "2.5"]),
    ("[solo]", ["solo"]),
    ("[a,,b]", ["a", "", "b"]),
])
def test_coerce_value_lists(raw, expected):
    """Bracketed values become lists of strings; items are never coerced further."""
    assert coerce_value(raw) == expected


# --- parse_frontmatter ---

def test_parse_frontmatter_key_values():
    block = "title: Hello\ncount: 3\ndraft: false"
    assert parse_frontmatter(block) == {"title": "Hello", "count": 3.0, "draft": False}


def test_parse_frontmatter_skips_lines_without_colon():
    assert parse_frontmatter("title: Hi\njust some text\n") == {"title": "Hi"}


def test_parse_frontmatter_splits_on_first_colon():
    assert parse_frontmatter("url: https://example.com:8080/x") == {"url": "https://example.com:8080/x"}


def test_parse_frontmatter_last_duplicate_wins():
    assert parse_frontmatter("tag: one\ntag: two") == {"tag": "two"}


def test_parse_frontmatter_trims_keys_and_values():
    assert parse_frontmatter("  author  :   Jane Doe   ") == {"author": "Jane Doe"}


def test_parse_frontmatter_keeps_key_order():
    assert list(parse_frontmatter("b: 1\na: 2\nc: 3")) == ["b", "a", "c"]


def test_parse_frontmatter_empty_block():
    assert parse_frontmatter("") == {}


# --- extract_frontmatter ---

def test_extract_frontmatter(sample_fm_md):
    fm, body = extract_frontmatter(sample_fm_md)
    assert fm == {"title": "My Post", "tags": ["a", "b"], "featured": True}
    assert body == "# Hi"


def test_extract_frontmatter_absent_returns_text_untouched():
    text = "  # No header  \n\nBody\n"
    fm, body = extract_frontmatter(text)
    assert fm == {}
    assert body == text


def test_extract_frontmatter_must_start_document():
    text = "Intro\n---\ntitle: x\n---\n"
    assert extract_frontmatter(text) == ({}, text)


def test_extract_frontmatter_unclosed_block():
    text = "---\ntitle: x\nbody"
    assert extract_frontmatter(text) == ({}, text)


def test_extract_frontmatter_closing_line_must_be_exact():
    text = "---\ntitle: x\n----\nbody"
    assert extract_frontmatter(text) == ({}, text)


def test_extract_frontmatter_empty_block():
    assert extract_frontmatter("---\n---\nBody") == ({}, "Body")


def test_extract_frontmatter_no_trailing_newline():
    assert extract_frontmatter("---\ncount: 1\n---") == ({"count": 1.0}, "")


def test_extract_frontmatter_crlf():
    fm, body = extract_frontmatter("---\r\ntitle: x\r\n---\r\nBody\r\n")
    assert fm == {"title": "x"}
    assert body == "Body"


def test_extract_frontmatter_trims_body():
    fm, body = extract_frontmatter("---\na: b\n---\n\n\n  Body text  \n\n")
    assert body == "Body text"


def test_extract_frontmatter_stops_at_first_closing_line():
    """A later `---` in the body is a horizontal rule, not part of the block."""
    fm, body = extract_frontmatter("---\na: 1\n---\nText\n\n---\n\nMore")
    assert fm == {"a": 1.0}
    assert body == "Text\n\n---\n\nMore"
