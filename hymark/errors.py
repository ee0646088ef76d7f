"""Exception hierarchy for discovery and the per-file pipeline."""

from __future__ import annotations

from pathlib import Path


class HymarkError(Exception):
    """Base class for all hymark errors."""


class BadInputDirectory(HymarkError):
    """Raised when the input root is missing or is not a directory."""

    def __init__(self, input_root: str | Path) -> None:
        self.input_root = str(input_root)
        super().__init__(f"Bad input directory: {self.input_root}")


class PipelineError(HymarkError):
    """A failure that aborts a single file's pipeline.

    ``path`` is the relative source path being processed when the error
    occurred. The underlying exception, if any, is kept as ``__cause__``.
    """

    stage = "pipeline"

    def __init__(self, path: str, message: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
        if cause is not None:
            self.__cause__ = cause


class FileReadError(PipelineError):
    stage = "read"


class TransformError(PipelineError):
    stage = "transform"


class WriteError(PipelineError):
    stage = "write"


class RenderStageError(PipelineError):
    """Base for every failure raised by the render stage."""

    stage = "render"


class UnsupportedEngineError(RenderStageError):
    def __init__(self, path: str, engine: str, supported: list[str] | None = None) -> None:
        self.engine = engine
        message = f"Unsupported template engine: {engine!r}"
        if supported:
            message += f". Supported: {', '.join(supported)}"
        super().__init__(path, message)


class MissingTemplatesPathError(RenderStageError):
    def __init__(self, path: str, engine: str) -> None:
        self.engine = engine
        super().__init__(
            path, f"Engine {engine!r} requires a templates directory but none is set"
        )


class TemplateNotFoundError(RenderStageError):
    def __init__(
        self, path: str, template_path: str | Path, cause: BaseException | None = None
    ) -> None:
        self.template_path = str(template_path)
        super().__init__(path, f"Template not found: {self.template_path}", cause)


class RenderError(RenderStageError):
    def __init__(self, path: str, engine: str, cause: BaseException) -> None:
        self.engine = engine
        super().__init__(path, f"{engine} render failed: {cause}", cause)
