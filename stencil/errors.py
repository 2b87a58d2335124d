"""Exception types raised by stencil.

Validation findings are never raised; they are collected into a
``ValidationResult``. File-system failures surface as the ``OSError``
subclasses the store raised.
"""

from __future__ import annotations


class StencilError(Exception):
    """Base class for stencil errors."""


class InvalidInputError(StencilError, ValueError):
    """A template name, target name or path was rejected before any I/O."""


class TemplateNotFoundError(StencilError):
    """The requested template does not exist in the templates directory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Template "{name}" not found')


class ConfigError(StencilError):
    """The configuration file exists but cannot be used."""
