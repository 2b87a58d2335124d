"""Case conversion helpers for template names.

Every converter splits its input into words the same way: runs of
characters outside ``[A-Za-z0-9]`` become word breaks, and so does a
lowercase letter followed by an uppercase letter. Digits never start a new
word on their own, so ``"test-component-123"`` becomes ``TestComponent123``.
"""

from __future__ import annotations

import re
from enum import Enum

__all__ = [
    "CaseVariant",
    "convert",
    "split_words",
    "to_camel_case",
    "to_constant_case",
    "to_kebab_case",
    "to_lower_case",
    "to_lower_case_with_spaces",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
]


_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


class CaseVariant(Enum):
    """The naming conventions a template name is expanded into."""
    PASCAL = "pascal"
    CAMEL = "camel"
    KEBAB = "kebab"
    SNAKE = "snake"
    CONSTANT = "constant"
    TITLE = "title"
    LOWER = "lower"
    LOWER_SPACED = "lower_spaced"


def split_words(text: str) -> list[str]:
    """Split ``text`` into words.

    >>> split_words("myComponent")
    ['my', 'Component']
    >>> split_words("  my--component ")
    ['my', 'component']
    """
    spaced = _NON_ALNUM.sub(" ", text)
    spaced = _CASE_BOUNDARY.sub(r"\1 \2", spaced)
    return spaced.split()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(text: str) -> str:
    """``"user profile"`` -> ``"UserProfile"``."""
    return "".join(_capitalize(word) for word in split_words(text))


def to_camel_case(text: str) -> str:
    """``"user profile"`` -> ``"userProfile"``."""
    words = split_words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize(word) for word in rest)


def to_kebab_case(text: str) -> str:
    """``"user profile"`` -> ``"user-profile"``."""
    return "-".join(word.lower() for word in split_words(text))


def to_snake_case(text: str) -> str:
    """``"user profile"`` -> ``"user_profile"``."""
    return "_".join(word.lower() for word in split_words(text))


def to_constant_case(text: str) -> str:
    """``"user profile"`` -> ``"USER_PROFILE"``."""
    return "_".join(word.upper() for word in split_words(text))


def to_title_case(text: str) -> str:
    """``"user profile"`` -> ``"User Profile"``."""
    return " ".join(_capitalize(word) for word in split_words(text))


def to_lower_case(text: str) -> str:
    """Drop every non-alphanumeric character and lowercase the rest."""
    return _NON_ALNUM.sub("", text).lower()


def to_lower_case_with_spaces(text: str) -> str:
    """``"UserProfile"`` -> ``"user profile"``."""
    return " ".join(word.lower() for word in split_words(text))


_CONVERTERS = {
    CaseVariant.PASCAL: to_pascal_case,
    CaseVariant.CAMEL: to_camel_case,
    CaseVariant.KEBAB: to_kebab_case,
    CaseVariant.SNAKE: to_snake_case,
    CaseVariant.CONSTANT: to_constant_case,
    CaseVariant.TITLE: to_title_case,
    CaseVariant.LOWER: to_lower_case,
    CaseVariant.LOWER_SPACED: to_lower_case_with_spaces,
}


def convert(text: str, variant: CaseVariant) -> str:
    """Convert ``text`` to the given naming convention."""
    return _CONVERTERS[variant](text)
