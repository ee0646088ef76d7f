"""Template engine interface."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngine(Protocol):
    """A named template-rendering capability.

    ``render`` is synchronous and is called from a worker thread. It must
    raise ``FileNotFoundError`` when ``template_path`` does not exist; any
    other exception is reported as a render failure.
    """

    name: str

    def render(self, template_path: Path, context: Mapping[str, Any]) -> str: ...
