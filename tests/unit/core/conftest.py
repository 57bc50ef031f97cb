"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** and _italic_ text.

## Heading 2

See [the docs](https://example.com) or ![a logo](/logo.png).

```python
print("<hello>")
```

---

Footer with `inline` code.
"""

SAMPLE_FM_MD = """\
---
title: "My Post"
tags: ["a", "b"]
featured: true
---
# Hi
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
