"""Records shared by the template manager and validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TemplateType(Enum):
    """Whether a template is a single file or a directory tree."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Template:
    """A template found directly under the templates directory."""
    name: str
    path: str
    type: TemplateType

    @property
    def is_directory(self) -> bool:
        return self.type == TemplateType.DIRECTORY


class GenerationAction(Enum):
    """What generation does (or would do) to one output file."""
    CREATE = "create"
    OVERWRITE = "overwrite"
    SKIP = "skip"


@dataclass(frozen=True)
class GenerationResult:
    """One output file of a generation run."""
    path: str
    action: GenerationAction


@dataclass
class ValidationResult:
    """Errors and warnings collected for one template.

    Warnings never make a template invalid.
    """
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors
