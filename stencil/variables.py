"""Template variables and placeholder substitution.

A template refers to the generated name through eight fixed placeholder
tokens such as ``__templateNameToPascalCase__``. The vocabulary is closed:
any other ``__templateName...__`` token is reported by the validator as an
error instead of being passed through.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from stencil.naming import CaseVariant, convert

__all__ = [
    "PLACEHOLDER_PATTERN",
    "PLACEHOLDER_PREFIX",
    "PLACEHOLDER_TOKENS",
    "Placeholder",
    "VariableSet",
    "build_variables",
    "substitute",
]


class Placeholder(str, Enum):
    """Recognized placeholder identifiers, one per :class:`CaseVariant`."""
    PASCAL_CASE = "templateNameToPascalCase"
    CAMEL_CASE = "templateNameToCamelCase"
    DASH_CASE = "templateNameToDashCase"
    SNAKE_CASE = "templateNameToSnakeCase"
    CONSTANT_CASE = "templateNameToConstantCase"
    TITLE_CASE = "templateNameToTitleCase"
    LOWER_CASE = "templateNameToLowerCase"
    LOWER_CASE_WITH_SPACES = "templateNameToLowerCaseWithSpaces"

    @property
    def token(self) -> str:
        """The literal marker embedded in templates."""
        return f"__{self.value}__"

    @property
    def variant(self) -> CaseVariant:
        return _VARIANTS[self]


_VARIANTS: dict[Placeholder, CaseVariant] = {
    Placeholder.PASCAL_CASE: CaseVariant.PASCAL,
    Placeholder.CAMEL_CASE: CaseVariant.CAMEL,
    Placeholder.DASH_CASE: CaseVariant.KEBAB,
    Placeholder.SNAKE_CASE: CaseVariant.SNAKE,
    Placeholder.CONSTANT_CASE: CaseVariant.CONSTANT,
    Placeholder.TITLE_CASE: CaseVariant.TITLE,
    Placeholder.LOWER_CASE: CaseVariant.LOWER,
    Placeholder.LOWER_CASE_WITH_SPACES: CaseVariant.LOWER_SPACED,
}

PLACEHOLDER_PREFIX = "__templateName"
PLACEHOLDER_TOKENS: frozenset[str] = frozenset(p.token for p in Placeholder)

# A well-formed token: the prefix, a run without underscores or whitespace,
# and the closing "__". Used for both file names and file content.
PLACEHOLDER_PATTERN = re.compile(r"__templateName[^_\s]*__")

_BY_TOKEN: dict[str, Placeholder] = {p.token: p for p in Placeholder}
_TOKEN_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(_BY_TOKEN, key=len, reverse=True))
)


@dataclass(frozen=True)
class VariableSet:
    """The eight case variants derived from one name."""
    pascal: str
    camel: str
    kebab: str
    snake: str
    constant: str
    title: str
    lower: str
    lower_spaced: str

    def get(self, placeholder: Placeholder) -> str:
        return getattr(self, placeholder.variant.value)

    def as_dict(self) -> dict[str, str]:
        """Map placeholder identifiers to their values."""
        return {p.value: self.get(p) for p in Placeholder}


def build_variables(name: str) -> VariableSet:
    """Derive every case variant of ``name``.

    Any string is accepted; an empty name yields empty values for every key.
    """
    return VariableSet(**{variant.value: convert(name, variant) for variant in CaseVariant})


def substitute(text: str, variables: VariableSet) -> str:
    """Replace every recognized placeholder token in ``text``.

    Works the same for file content and for a single file or directory
    name. A value can join with the surrounding text to form a new token
    (``__templateNameToPascal`` + ``Case__``), so passes repeat until the
    text stops changing. Values never contain ``__``, so every pass
    consumes underscores from the original text and the loop ends.
    """
    if PLACEHOLDER_PREFIX not in text:
        return text

    def replace(match: re.Match[str]) -> str:
        return variables.get(_BY_TOKEN[match.group(0)])

    while True:
        result = _TOKEN_PATTERN.sub(replace, text)
        if result == text:
            return result
        text = result
