"""Engine lookup by name, with entry-point discovery for third-party engines."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Iterable

from hymark.engines.base import TemplateEngine
from hymark.engines.handlebars import HandlebarsEngine
from hymark.engines.jinja import JinjaEngine
from hymark.engines.mustache import MustacheEngine

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "hymark.engines"

_BUILTIN_ENGINES: tuple[type, ...] = (HandlebarsEngine, JinjaEngine, MustacheEngine)


class EngineRegistry:
    """Maps engine identifiers to :class:`TemplateEngine` instances."""

    def __init__(self, engines: Iterable[TemplateEngine] = ()) -> None:
        self._engines: dict[str, TemplateEngine] = {}
        for engine in engines:
            self.register(engine)

    def register(self, engine: TemplateEngine, name: str | None = None) -> None:
        if not isinstance(engine, TemplateEngine):
            raise TypeError(f"{engine!r} does not implement TemplateEngine")
        self._engines[name or engine.name] = engine

    def get(self, name: str) -> TemplateEngine | None:
        return self._engines.get(name)

    def names(self) -> list[str]:
        return sorted(self._engines)

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    def load_entry_points(self) -> list[str]:
        """Register engines published under the ``hymark.engines`` group.

        Each entry point must load to an engine class or instance. Plugins
        that fail to load are logged and skipped. Returns the names that were
        registered. Built-in names are not overridden.
        """
        loaded: list[str] = []
        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            if ep.name in self._engines:
                logger.debug("engine %s already registered, skipping entry point", ep.name)
                continue
            try:
                obj = ep.load()
                engine = obj() if isinstance(obj, type) else obj
                self.register(engine, name=ep.name)
            except Exception as e:
                logger.warning("skipping engine plugin %s: %s", ep.name, e)
                continue
            loaded.append(ep.name)
        return loaded


def default_registry(*, entry_points: bool = True) -> EngineRegistry:
    """Build a registry holding the built-in engines (and installed plugins)."""
    registry = EngineRegistry(cls() for cls in _BUILTIN_ENGINES)
    if entry_points:
        registry.load_entry_points()
    return registry
