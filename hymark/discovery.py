"""Source file discovery: input root + ordered include/exclude globs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pathspec import PathSpec

from hymark.config.models import DEFAULT_PATTERNS
from hymark.errors import BadInputDirectory

logger = logging.getLogger(__name__)


def discover(input_root: str | Path, patterns: Iterable[str] | None = None) -> set[str]:
    """Return source paths under ``input_root`` selected by ``patterns``.

    Patterns are evaluated in order and the last matching pattern decides,
    so a ``!``-prefixed pattern removes files an earlier pattern added.
    Patterns are relative to ``input_root``: ``*.md`` selects top-level
    files only, ``**/*.md`` selects them at any depth.
    Returned paths are relative to ``input_root`` and always use ``/``.
    """
    root = Path(input_root)
    if not root.is_dir():
        raise BadInputDirectory(input_root)

    lines = list(patterns) if patterns else list(DEFAULT_PATTERNS)
    spec = PathSpec.from_lines("gitignore", [_anchor(line) for line in lines])
    found = set(spec.match_files(_walk(root)))
    logger.debug("discovered %d file(s) under %s", len(found), root)
    return found


async def discover_async(
    input_root: str | Path, patterns: Iterable[str] | None = None
) -> set[str]:
    """Run :func:`discover` in a worker thread."""
    return await asyncio.to_thread(discover, input_root, patterns)


def _walk(root: Path) -> Iterator[str]:
    for path in root.rglob("*"):
        if path.is_file():
            yield path.relative_to(root).as_posix()


def _anchor(pattern: str) -> str:
    """Root a slash-free pattern at the input directory."""
    negate = pattern.startswith("!")
    body = pattern[1:] if negate else pattern
    if body and not body.startswith(("/", "#")) and "/" not in body.rstrip("/"):
        body = "/" + body
    return f"!{body}" if negate else body
