"""Template discovery, generation and validation."""

from stencil.templates.base import (
    GenerationAction,
    GenerationResult,
    Template,
    TemplateType,
    ValidationResult,
)
from stencil.templates.manager import TemplateManager
from stencil.templates.store import FileStore, LocalFileStore
from stencil.templates.validate import TemplateValidator

__all__ = [
    "FileStore",
    "GenerationAction",
    "GenerationResult",
    "LocalFileStore",
    "Template",
    "TemplateManager",
    "TemplateType",
    "TemplateValidator",
    "ValidationResult",
]
