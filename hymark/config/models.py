from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Markdown and HTML anywhere in the tree, skipping any `_`-prefixed path
# segment (template and partial directories).
DEFAULT_PATTERNS: tuple[str, ...] = (
    "**/*.md",
    "**/*.markdown",
    "**/*.html",
    "!**/_*",
    "!**/_*/**",
)

DEFAULT_CONCURRENCY = 64


class BuildOptions(BaseModel):
    """Read-only snapshot of the global options for one run."""

    model_config = ConfigDict(frozen=True)

    input: str
    output: str
    templates: str | None = None
    match: tuple[str, ...] = DEFAULT_PATTERNS
    engine: str | None = None
    template: str | None = None
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1, le=1024)

    @field_validator("match", mode="before")
    @classmethod
    def _coerce_match(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_PATTERNS
        if isinstance(value, str):
            return (value,)
        return tuple(value)

    def as_defaults(self) -> dict[str, Any]:
        """Return the option keys merged into every file's context."""
        return {
            "engine": self.engine,
            "template": self.template,
            "templates": self.templates,
            "input": self.input,
            "output": self.output,
            "match": list(self.match),
        }


class BuildConfig(BaseModel):
    """The `build:` section of hymark.yaml; every key is optional."""

    input: str | None = None
    output: str | None = None
    templates: str | None = None
    match: list[str] | None = None
    engine: str | None = None
    template: str | None = None
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1, le=1024)


class HymarkConfig(BaseModel):
    build: BuildConfig = Field(default_factory=BuildConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
