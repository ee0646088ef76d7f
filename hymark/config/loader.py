"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import HymarkConfig


def load_config(cli_path: str | None = None) -> HymarkConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./hymark.yaml"),
        Path.home() / ".hymark" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return HymarkConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return HymarkConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `hymark config init`
DEFAULT_CONFIG_TEMPLATE = """\
# hymark.yaml

build:
  # input: "src"
  # output: "build"
  templates: "src/_templates"
  # engine: "handlebars"         # handlebars | jinja2 | mustache
  # template: "page.html"        # default template, front-matter can override
  match:
    - "**/*.md"
    - "**/*.markdown"
    - "**/*.html"
    - "!**/_*"
    - "!**/_*/**"
  concurrency: 64

# Logging
log_level: "info"              # debug | info | warn | error
"""
