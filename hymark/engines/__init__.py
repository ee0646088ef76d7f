"""Pluggable template engines selected by name."""

from hymark.engines.base import TemplateEngine
from hymark.engines.handlebars import HandlebarsEngine
from hymark.engines.jinja import JinjaEngine
from hymark.engines.mustache import MustacheEngine
from hymark.engines.registry import ENTRY_POINT_GROUP, EngineRegistry, default_registry

__all__ = [
    "ENTRY_POINT_GROUP",
    "EngineRegistry",
    "HandlebarsEngine",
    "JinjaEngine",
    "MustacheEngine",
    "TemplateEngine",
    "default_registry",
]
