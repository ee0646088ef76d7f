"""hymark - render a tree of Markdown/HTML sources through template engines."""

from hymark.config import BuildOptions, HymarkConfig, load_config
from hymark.discovery import discover
from hymark.engines import EngineRegistry, TemplateEngine, default_registry
from hymark.pipeline import BuildReport, Context, build, defaults, run

__version__ = "0.1.0"

__all__ = [
    "BuildOptions",
    "BuildReport",
    "Context",
    "EngineRegistry",
    "HymarkConfig",
    "TemplateEngine",
    "build",
    "default_registry",
    "defaults",
    "discover",
    "load_config",
    "run",
]
