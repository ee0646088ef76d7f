"""The four per-file stages: read, transform, render, write.

Each stage is a coroutine. Blocking work runs in a worker thread so many
files can be in flight on one event loop. Every failure is raised as a
:class:`~hymark.errors.PipelineError` subclass naming the source path.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path, PurePosixPath

import yaml

from hymark.config.models import BuildOptions
from hymark.converter import is_markdown, to_html
from hymark.engines.registry import EngineRegistry, default_registry
from hymark.errors import (
    FileReadError,
    MissingTemplatesPathError,
    RenderError,
    RenderStageError,
    TemplateNotFoundError,
    TransformError,
    UnsupportedEngineError,
    WriteError,
)
from hymark.pipeline.context import Context
from hymark.pipeline.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)

_registry: EngineRegistry | None = None


def _default_registry() -> EngineRegistry:
    global _registry
    if _registry is None:
        _registry = default_registry()
    return _registry


def _is_contained(relative_path: str) -> bool:
    """False for absolute paths and paths that climb out via ``..``."""
    if Path(relative_path).is_absolute():
        return False
    pure = PurePosixPath(relative_path.replace("\\", "/"))
    return not pure.is_absolute() and ".." not in pure.parts


async def read(relative_path: str, options: BuildOptions) -> Context:
    """Read a source file and build its context."""
    if not _is_contained(relative_path):
        raise FileReadError(relative_path, "path must be relative to the input directory")

    source = Path(options.input) / relative_path
    try:
        text = await asyncio.to_thread(source.read_text, encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(relative_path, f"cannot read {source}: {e}", e) from e

    try:
        attributes, body = parse_frontmatter(text)
    except (yaml.YAMLError, ValueError) as e:
        raise FileReadError(relative_path, f"invalid front-matter: {e}", e) from e

    logger.debug("read %s (%d attribute(s))", relative_path, len(attributes))
    return Context.create(relative_path, body, attributes, options)


async def transform(ctx: Context) -> Context:
    """Convert Markdown content to HTML; any other file passes through as-is."""
    if not is_markdown(ctx.path):
        return ctx

    # to_html is synchronous; yield first.
    await asyncio.sleep(0)
    try:
        html = to_html(ctx.content)
    except Exception as e:
        raise TransformError(ctx.path, f"markdown conversion failed: {e}", e) from e

    new_path = str(PurePosixPath(ctx.path).with_suffix(".html"))
    return ctx.model_copy(update={"path": new_path, "content": html})


def _require_str(ctx: Context, key: str, value: object) -> None:
    if not isinstance(value, str):
        raise RenderStageError(
            ctx.path, f"{key!r} must be a string, got {type(value).__name__}: {value!r}"
        )


async def render(
    ctx: Context, registry: EngineRegistry | None = None
) -> tuple[str, Context]:
    """Render ``ctx`` through its template, or return its content unchanged."""
    engine_name = ctx.get("engine")
    template = ctx.get("template")
    if not engine_name or not template:
        return ctx.content, ctx

    registry = registry if registry is not None else _default_registry()
    engine = registry.get(engine_name) if isinstance(engine_name, str) else None
    if engine is None:
        raise UnsupportedEngineError(ctx.path, str(engine_name), registry.names())
    _require_str(ctx, "template", template)

    templates = ctx.get("templates")
    if not templates:
        raise MissingTemplatesPathError(ctx.path, engine_name)
    _require_str(ctx, "templates", templates)

    template_path = Path(templates) / template
    try:
        output = await asyncio.to_thread(engine.render, template_path, ctx.as_dict())
    except FileNotFoundError as e:
        raise TemplateNotFoundError(ctx.path, template_path, e) from e
    except Exception as e:
        raise RenderError(ctx.path, engine_name, e) from e

    logger.debug("rendered %s with %s:%s", ctx.path, engine_name, template)
    return output, ctx


def _write_file(dest: Path, output: str) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(output, encoding="utf-8")


async def write(output: str, ctx: Context) -> Path:
    """Write ``output`` to ``ctx.output / ctx.path``, creating directories."""
    out_root = ctx.get("output")
    if not out_root:
        raise WriteError(ctx.path, "no output directory configured")
    if not _is_contained(ctx.path):
        raise WriteError(ctx.path, "path escapes the output directory")

    dest = Path(out_root) / ctx.path
    if not dest.resolve().is_relative_to(Path(out_root).resolve()):
        raise WriteError(ctx.path, f"path escapes the output directory: {dest}")

    try:
        await asyncio.to_thread(_write_file, dest, output)
    except OSError as e:
        raise WriteError(ctx.path, f"cannot write {dest}: {e}", e) from e

    logger.debug("wrote %s (%d bytes)", dest, len(output))
    return dest
