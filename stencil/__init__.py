"""stencil — generate files and directory trees from placeholder templates."""

from stencil.errors import ConfigError, InvalidInputError, StencilError, TemplateNotFoundError
from stencil.naming import CaseVariant
from stencil.templates import (
    GenerationAction,
    GenerationResult,
    Template,
    TemplateManager,
    TemplateType,
    TemplateValidator,
    ValidationResult,
)
from stencil.variables import PLACEHOLDER_TOKENS, Placeholder, VariableSet, build_variables, substitute

__version__ = "0.1.0"

__all__ = [
    "CaseVariant",
    "ConfigError",
    "GenerationAction",
    "GenerationResult",
    "InvalidInputError",
    "PLACEHOLDER_TOKENS",
    "Placeholder",
    "StencilError",
    "Template",
    "TemplateManager",
    "TemplateNotFoundError",
    "TemplateType",
    "TemplateValidator",
    "ValidationResult",
    "VariableSet",
    "build_variables",
    "substitute",
]
