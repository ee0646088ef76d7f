"""YAML front-matter splitting."""

from __future__ import annotations

import re
from typing import Any

import yaml

# Opening `---` on the first line, closing `---` or `...` on its own line.
# The newline that ends the closing line belongs to the delimiter, so the
# body starts exactly on the following line.
_FRONTMATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split ``text`` into (attributes, body).

    Text without a front-matter block yields ``{}`` and the text unchanged.
    Raises ``yaml.YAMLError`` for malformed YAML and ``ValueError`` when the
    block is not a mapping.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text

    loaded = yaml.safe_load(match.group(1))
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(
            f"front-matter must be a mapping, got {type(loaded).__name__}"
        )
    attributes = {str(k): v for k, v in loaded.items()}
    return attributes, text[match.end():]
