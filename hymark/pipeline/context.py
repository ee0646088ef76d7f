"""Per-file context threaded through the pipeline."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hymark.config.models import BuildOptions


def defaults(dest: MutableMapping[str, Any], *sources: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Copy keys from ``sources`` into ``dest`` without overwriting.

    Sources are applied left to right, so a key provided by an earlier
    source wins over the same key in a later one. Returns ``dest``.
    """
    for source in sources:
        for key, value in source.items():
            if key not in dest:
                dest[key] = value
    return dest


class Context(BaseModel):
    """Template context for one source file.

    Front-matter attributes and global options are stored as extra fields,
    so ``ctx.title`` works for a front-matter ``title`` key.
    """

    model_config = ConfigDict(extra="allow")

    path: str
    content: str
    attributes: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        path: str,
        content: str,
        attributes: Mapping[str, Any],
        options: BuildOptions,
    ) -> Context:
        """Build a context where attributes win over options."""
        data: dict[str, Any] = {
            "path": path,
            "content": content,
            "attributes": dict(attributes),
        }
        defaults(data, attributes, options.as_defaults())
        return cls.model_validate(data)

    def get(self, key: str, default: Any = None) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """Flat mapping handed to template engines."""
        return self.model_dump()
