"""Markdown to HTML conversion wrapping Python-Markdown."""

from __future__ import annotations

from pathlib import PurePosixPath

import markdown

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({".md", ".markdown"})

# `toc` gives headings an id attribute (`# bar` -> `<h1 id="bar">`).
_EXTENSIONS = ["extra", "toc", "sane_lists"]


def is_markdown(path: str) -> bool:
    """True when ``path`` has a Markdown extension (case-insensitive)."""
    return PurePosixPath(path).suffix.lower() in MARKDOWN_EXTENSIONS


def to_html(text: str) -> str:
    """Convert Markdown text to an HTML fragment."""
    html = markdown.markdown(text, extensions=_EXTENSIONS, output_format="html")
    return html + "\n" if html else html
