"""Template validation.

Checks template file names and contents for malformed or unknown
placeholder tokens, and flags structural oddities (empty directories,
binary files, mixed line endings, very large files). Findings are
collected into a :class:`ValidationResult`; nothing here raises for a bad
template.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stencil.templates.base import ValidationResult
from stencil.templates.store import FileStore, LocalFileStore
from stencil.variables import PLACEHOLDER_PATTERN, PLACEHOLDER_PREFIX, PLACEHOLDER_TOKENS

logger = logging.getLogger(__name__)

LARGE_FILE_CHARS = 1_000_000

BINARY_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".ico", ".svg",
    ".pdf", ".doc", ".docx", ".xls", ".xlsx",
    ".zip", ".tar", ".gz", ".rar",
    ".exe", ".dll", ".so", ".dylib",
    ".mp3", ".mp4", ".avi", ".mov",
    ".ttf", ".otf", ".woff", ".woff2",
})


def is_binary_file(file_name: str) -> bool:
    """Guess from the extension whether a file is binary."""
    return Path(file_name).suffix.lower() in BINARY_EXTENSIONS


def _placeholder_issues(text: str) -> tuple[list[str], bool]:
    """Return the unknown tokens in ``text`` and whether it has an incomplete one.

    A placeholder counts as incomplete when the prefix appears but no
    well-formed token does.
    """
    matches = PLACEHOLDER_PATTERN.findall(text)
    invalid = [m for m in matches if m not in PLACEHOLDER_TOKENS]
    incomplete = PLACEHOLDER_PREFIX in text and not matches
    return invalid, incomplete


def check_file_name(file_name: str, result: ValidationResult) -> None:
    invalid, incomplete = _placeholder_issues(file_name)
    for token in invalid:
        result.errors.append(f'Invalid placeholder in filename "{file_name}": {token}')
    if incomplete:
        result.errors.append(f"Incomplete placeholder in filename: {file_name}")


def check_file_content(content: str, file_name: str, result: ValidationResult) -> None:
    invalid, incomplete = _placeholder_issues(content)
    for token in invalid:
        result.errors.append(f"Invalid placeholder in {file_name}: {token}")
    if incomplete:
        result.errors.append(f"Incomplete placeholder in {file_name}")

    has_crlf = "\r\n" in content
    has_bare_lf = "\n" in content.replace("\r\n", "")
    if has_crlf and has_bare_lf:
        result.warnings.append(f"Mixed line endings in {file_name}")

    if len(content) > LARGE_FILE_CHARS:
        size_mb = len(content) / 1024 / 1024
        result.warnings.append(f"Large file ({size_mb:.2f}MB): {file_name}")


class TemplateValidator:
    """Validates templates through a :class:`FileStore`."""

    def __init__(self, store: FileStore | None = None):
        self.store: FileStore = store or LocalFileStore()

    async def validate(self, template_path: str | Path) -> ValidationResult:
        """Validate one template, file or directory."""
        path = Path(template_path)
        result = ValidationResult()
        try:
            if not await self.store.exists(path):
                raise FileNotFoundError(f"No such file or directory: '{path}'")
            if await self.store.is_directory(path):
                await self._validate_directory(path, result)
            else:
                await self._validate_file(path, result)
        except OSError as e:
            result.errors.append(f"Cannot access template: {e}")
        return result

    async def validate_all(self, templates_dir: str | Path) -> dict[str, ValidationResult]:
        """Validate every template directly under ``templates_dir``.

        If the directory itself cannot be listed, the only entry is keyed by
        ``templates_dir``.
        """
        root = Path(templates_dir)
        try:
            names = await self.store.list_entries(root)
        except OSError as e:
            return {
                str(templates_dir): ValidationResult(
                    errors=[f"Cannot read templates directory: {e}"],
                ),
            }

        results: dict[str, ValidationResult] = {}
        for name in names:
            results[name] = await self.validate(root / name)
            logger.debug(
                "Validated %s: %d errors, %d warnings",
                name, len(results[name].errors), len(results[name].warnings),
            )
        return results

    async def _validate_directory(self, dir_path: Path, result: ValidationResult) -> None:
        entries = await self.store.list_entries(dir_path)
        if not entries:
            result.warnings.append(f"Empty directory: {dir_path}")

        for entry in entries:
            path = dir_path / entry
            if await self.store.is_directory(path):
                await self._validate_directory(path, result)
            else:
                await self._validate_file(path, result)

    async def _validate_file(self, file_path: Path, result: ValidationResult) -> None:
        file_name = file_path.name
        check_file_name(file_name, result)

        if is_binary_file(file_name):
            result.warnings.append(f"Binary file detected: {file_name} - content validation skipped")
            return

        try:
            content = await self.store.read_text(file_path)
        except (OSError, UnicodeDecodeError) as e:
            result.errors.append(f"Cannot read file {file_name}: {e}")
            return

        check_file_content(content, file_name, result)


async def validate(template_path: str | Path, store: FileStore | None = None) -> ValidationResult:
    """Validate one template on the local disk (or ``store``)."""
    return await TemplateValidator(store).validate(template_path)


async def validate_all(
    templates_dir: str | Path, store: FileStore | None = None,
) -> dict[str, ValidationResult]:
    """Validate every template in ``templates_dir``."""
    return await TemplateValidator(store).validate_all(templates_dir)
