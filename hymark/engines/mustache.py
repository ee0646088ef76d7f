"""Mustache engine backed by chevron."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import chevron


class MustacheEngine:
    name = "mustache"

    def render(self, template_path: Path, context: Mapping[str, Any]) -> str:
        source = template_path.read_text(encoding="utf-8")
        # Partials ({{> name}}) resolve next to the template.
        return chevron.render(
            template=source,
            data=dict(context),
            partials_path=str(template_path.parent),
            partials_ext=template_path.suffix.lstrip(".") or "mustache",
        )
