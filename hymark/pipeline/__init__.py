"""Per-file pipeline and batch driver."""

from hymark.pipeline.context import Context, defaults
from hymark.pipeline.frontmatter import parse_frontmatter
from hymark.pipeline.runner import BuildReport, build, process_file, render_page, run
from hymark.pipeline.stages import read, render, transform, write

__all__ = [
    "BuildReport",
    "Context",
    "build",
    "defaults",
    "parse_frontmatter",
    "process_file",
    "read",
    "render",
    "render_page",
    "run",
    "transform",
    "write",
]
