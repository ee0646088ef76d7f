"""Handlebars engine backed by pybars3."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pybars import Compiler

# pybars keeps its code builder on the Compiler class, so compiles must not overlap.
_compile_lock = threading.Lock()


@lru_cache(maxsize=64)
def _compile(source: str) -> Callable[..., Any]:
    with _compile_lock:
        return Compiler().compile(source)


class HandlebarsEngine:
    name = "handlebars"

    def render(self, template_path: Path, context: Mapping[str, Any]) -> str:
        source = template_path.read_text(encoding="utf-8")
        result = _compile(source)(dict(context))
        # pybars returns a list of string chunks
        return result if isinstance(result, str) else "".join(result)
