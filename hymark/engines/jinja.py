"""Jinja2 engine."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader


@lru_cache(maxsize=32)
def _environment(search_path: tuple[str, ...]) -> Environment:
    # Content is already HTML, so autoescaping would mangle it.
    return Environment(
        loader=FileSystemLoader(list(search_path)),
        autoescape=False,
        keep_trailing_newline=True,
    )


class JinjaEngine:
    """Renders with a loader that searches the template's own directory first,
    then the ``templates`` root from the context.

    A template in ``layouts/`` can therefore ``{% extends "base.html" %}``
    where ``base.html`` sits at the root of the templates directory.
    """

    name = "jinja2"

    def render(self, template_path: Path, context: Mapping[str, Any]) -> str:
        if not template_path.is_file():
            raise FileNotFoundError(str(template_path))
        search_path = [str(template_path.parent.resolve())]
        root = context.get("templates")
        if isinstance(root, str) and root:
            resolved = str(Path(root).resolve())
            if resolved not in search_path:
                search_path.append(resolved)
        env = _environment(tuple(search_path))
        return env.get_template(template_path.name).render(dict(context))
