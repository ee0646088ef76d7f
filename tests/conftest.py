"""Shared test fixtures for hymark."""

from pathlib import Path

import pytest

from hymark.config.models import BuildOptions
from hymark.engines import default_registry

HELLO_MD = """\
---
title: Hello World
template: page.html
---

# hello
"""

PAGE_HBS = """\
<html><head><title>{{title}}</title></head>
<body><h1>Basic: {{title}}</h1>
{{{content}}}
</body></html>
"""


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small source tree: one Markdown page, one HTML page, a template dir."""
    src = tmp_path / "src"
    (src / "_templates").mkdir(parents=True)
    (src / "hello.md").write_text(HELLO_MD, encoding="utf-8")
    (src / "index.html").write_text("<p>index</p>\n", encoding="utf-8")
    (src / "_templates" / "page.html").write_text(PAGE_HBS, encoding="utf-8")
    return src


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def options(site: Path, out_dir: Path) -> BuildOptions:
    """Plain options: no engine, so output is the transformed content."""
    return BuildOptions(
        input=str(site),
        output=str(out_dir),
        templates=str(site / "_templates"),
    )


@pytest.fixture
def handlebars_options(site: Path, out_dir: Path) -> BuildOptions:
    return BuildOptions(
        input=str(site),
        output=str(out_dir),
        templates=str(site / "_templates"),
        engine="handlebars",
    )


@pytest.fixture
def registry():
    """Built-in engines only, ignoring anything installed as a plugin."""
    return default_registry(entry_points=False)
