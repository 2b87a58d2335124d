"""Configuration management for stencil."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from stencil.errors import ConfigError
from stencil.templates.manager import DEFAULT_TEMPLATES_DIR
from stencil.validators import validate_output_directory

logger = logging.getLogger(__name__)

CONFIG_FILE = "stencil.yaml"
LEGACY_TEMPLATES_DIR = "templates"
USER_CONFIG_DIR = Path("~/.config/stencil")


class OutputDirectory(BaseModel):
    """A directory generated files can be written to.

    name: Label shown when choosing where to generate
    path: Directory relative to the project root
    """
    name: str
    path: str
    description: str | None = None

    @field_validator("name", "path")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @field_validator("description")
    @classmethod
    def _blank_description(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_entry(self) -> OutputDirectory:
        validate_output_directory(self.name, self.path, self.description)
        return self

    @property
    def label(self) -> str:
        if self.description:
            return f"{self.name} ({self.path}) - {self.description}"
        return f"{self.name} ({self.path})"


def _current_directory() -> OutputDirectory:
    return OutputDirectory(
        name="Current directory",
        path=".",
        description="Generate in the current directory",
    )


class StencilConfig(BaseModel):
    """Root configuration model."""
    templates_dir: str = DEFAULT_TEMPLATES_DIR
    output_directories: list[OutputDirectory] = Field(
        default_factory=lambda: [_current_directory()]
    )
    progress: bool = True


# Starter output directories written by `stencil config` / `stencil init`
DEFAULT_OUTPUT_DIRECTORIES: list[dict[str, Any]] = [
    {"name": "Components", "path": "src/components", "description": "React components directory"},
    {"name": "Pages", "path": "src/pages", "description": "Application pages"},
    {"name": "Utils", "path": "src/utils", "description": "Utility functions and helpers"},
    {"name": "Hooks", "path": "src/hooks", "description": "Custom React hooks"},
    {"name": "Current directory", "path": ".", "description": "Generate in the current directory"},
]


def default_config() -> StencilConfig:
    """The full starter configuration."""
    return StencilConfig.model_validate({"output_directories": DEFAULT_OUTPUT_DIRECTORIES})


def config_search_path(start_dir: str | Path | None = None) -> Iterator[Path]:
    """Yield the places stencil.yaml is looked for, nearest first.

    ``start_dir`` (default: the working directory) and each of its parents,
    then the per-user ``~/.config/stencil/``.
    """
    start = Path(start_dir if start_dir is not None else Path.cwd()).resolve()
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILE
    yield USER_CONFIG_DIR.expanduser() / CONFIG_FILE


def find_config_file(start_dir: str | Path | None = None) -> Path | None:
    """Return the first existing config file on :func:`config_search_path`."""
    return next((p for p in config_search_path(start_dir) if p.is_file()), None)


def _ensure_current_directory(config: StencilConfig) -> StencilConfig:
    if not any(d.path == "." for d in config.output_directories):
        config.output_directories.append(_current_directory())
    return config


def load_config(config_path: str | Path | None = None, *, strict: bool = False) -> StencilConfig:
    """Load configuration from stencil.yaml.

    ``config_path`` wins when given; otherwise the first file on
    :func:`config_search_path` is used, and with none found the defaults.

    A file that cannot be parsed or validated falls back to the defaults
    with a logged warning, or raises :class:`ConfigError` when ``strict``.
    The result always offers the current directory as an output directory.
    """
    if config_path:
        path: Path | None = Path(config_path)
    else:
        path = find_config_file()

    if path is None or not path.exists():
        return StencilConfig()

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"expected a mapping, got {type(raw).__name__}")
        config = StencilConfig.model_validate(raw)
    except (OSError, yaml.YAMLError, ValidationError, ConfigError) as e:
        if strict:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e
        logger.warning("Error reading %s: %s. Using default configuration.", path, e)
        return StencilConfig()

    return _ensure_current_directory(config)


def save_config(config: StencilConfig, config_path: str | Path = CONFIG_FILE) -> Path:
    """Write ``config`` as YAML."""
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(exclude_none=True)
    header = (
        "# stencil configuration\n"
        "# output_directories: where `stencil generate` may write files\n"
    )
    path.write_text(header + yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


def write_default_config(config_path: str | Path = CONFIG_FILE) -> Path:
    """Write the starter configuration to ``config_path``."""
    return save_config(default_config(), config_path)


def resolve_templates_dir(config: StencilConfig, base: str | Path = ".") -> Path:
    """Pick the templates directory: configured, else legacy ``templates/``, else configured."""
    base = Path(base)
    configured = base / config.templates_dir
    if configured.exists():
        return configured
    legacy = base / LEGACY_TEMPLATES_DIR
    if legacy.exists():
        return legacy
    return configured
