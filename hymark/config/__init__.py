from .loader import load_config
from .models import (
    DEFAULT_CONCURRENCY,
    DEFAULT_PATTERNS,
    BuildConfig,
    BuildOptions,
    HymarkConfig,
)

__all__ = [
    "DEFAULT_CONCURRENCY",
    "DEFAULT_PATTERNS",
    "BuildConfig",
    "BuildOptions",
    "HymarkConfig",
    "load_config",
]
