"""Batch driver: runs the per-file pipeline over many files with bounded concurrency."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel

from hymark.config.models import BuildOptions
from hymark.discovery import discover_async
from hymark.engines.registry import EngineRegistry
from hymark.pipeline.stages import read, render, transform, write

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    written: list[str] = []
    skipped: int = 0
    duration: float = 0.0


async def process_file(
    relative_path: str,
    options: BuildOptions,
    *,
    registry: EngineRegistry | None = None,
) -> Path:
    """read -> transform -> render -> write for a single source file."""
    ctx = await read(relative_path, options)
    ctx = await transform(ctx)
    output, ctx = await render(ctx, registry)
    return await write(output, ctx)


async def render_page(
    relative_path: str,
    options: BuildOptions,
    *,
    registry: EngineRegistry | None = None,
) -> str:
    """Single-file mode: run every stage but write, returning the output."""
    ctx = await read(relative_path, options)
    ctx = await transform(ctx)
    output, _ = await render(ctx, registry)
    return output


async def run(
    paths: Iterable[str],
    options: BuildOptions,
    *,
    registry: EngineRegistry | None = None,
    limit: int | None = None,
) -> BuildReport:
    """Process every path, at most ``limit`` at a time.

    Files are admitted in sorted order. Once any file fails no further files
    are started; pipelines already in flight run to completion and then the
    first recorded error is raised. Output written before the failure stays
    on disk.
    """
    start = time.monotonic()
    ordered = sorted(set(paths))
    semaphore = asyncio.Semaphore(limit or options.concurrency)
    failures: list[Exception] = []
    report = BuildReport()

    async def _guarded(src: str) -> None:
        async with semaphore:
            if failures:
                report.skipped += 1
                return
            try:
                dest = await process_file(src, options, registry=registry)
            except Exception as exc:
                logger.error("failed: %s", exc)
                failures.append(exc)
                return
            report.written.append(str(dest))

    await asyncio.gather(*(_guarded(src) for src in ordered))
    report.duration = time.monotonic() - start

    if failures:
        if report.skipped:
            logger.warning("%d file(s) not processed after first failure", report.skipped)
        raise failures[0]

    logger.info("wrote %d file(s) in %.2fs", len(report.written), report.duration)
    return report


async def build(
    options: BuildOptions, *, registry: EngineRegistry | None = None
) -> BuildReport:
    """Discover sources under ``options.input`` and process them all."""
    paths = await discover_async(options.input, options.match)
    if not paths:
        logger.warning("no source files matched under %s", options.input)
    return await run(paths, options, registry=registry)
