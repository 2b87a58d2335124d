"""Template discovery and generation.

A templates directory holds one template per immediate child: either a
single file or a directory tree. Generating from a template substitutes the
placeholder tokens in every file and directory name and in every file's
content, and records whether each output file is created or overwritten.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from stencil.errors import InvalidInputError, TemplateNotFoundError
from stencil.templates.base import GenerationAction, GenerationResult, Template, TemplateType
from stencil.templates.store import FileStore, LocalFileStore
from stencil.validators import is_path_within_directory, validate_path, validate_target_name
from stencil.variables import VariableSet, build_variables, substitute

if TYPE_CHECKING:
    from stencil.tui.progress import ProgressObserver

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = ".template"


class TemplateManager:
    """Lists templates and generates files from them.

    Only one generation should run against a given target directory at a
    time; nothing here locks the target.
    """

    def __init__(
        self,
        templates_dir: str | Path = DEFAULT_TEMPLATES_DIR,
        store: FileStore | None = None,
        progress: ProgressObserver | None = None,
    ):
        self.templates_dir = Path(templates_dir)
        self.store: FileStore = store or LocalFileStore()
        self.progress = progress
        self._generated: list[GenerationResult] = []

    @property
    def generated_files(self) -> list[GenerationResult]:
        """Results of the most recent generation run."""
        return list(self._generated)

    async def list_templates(self) -> list[Template]:
        """Return every template in the templates directory.

        A missing or unreadable directory yields an empty list.
        """
        try:
            if not await self.store.exists(self.templates_dir):
                return []
            names = await self.store.list_entries(self.templates_dir)
            templates = []
            for name in names:
                path = self.templates_dir / name
                kind = TemplateType.DIRECTORY if await self.store.is_directory(path) else TemplateType.FILE
                templates.append(Template(name=name, path=str(path), type=kind))
        except OSError as e:
            logger.debug("Cannot list templates in %s: %s", self.templates_dir, e)
            return []
        return templates

    def resolve_template(self, template_name: str) -> Path:
        """Map a template name to its path, rejecting traversal outside the templates directory."""
        validate_path(template_name)
        template_path = self.templates_dir / template_name
        if not is_path_within_directory(template_path, self.templates_dir):
            raise InvalidInputError(f'Invalid template path: "{template_name}"')
        return template_path

    async def generate_from_template(
        self,
        template_name: str,
        target_name: str,
        target_dir: str | Path = ".",
        *,
        dry_run: bool = False,
    ) -> list[GenerationResult]:
        """Generate files named after ``target_name`` from a template.

        Directory templates are written into ``target_dir/<PascalCaseName>``;
        file templates are written directly into ``target_dir``. Existing
        files are overwritten without asking. With ``dry_run`` nothing is
        written and the returned results describe what would happen.

        An ``OSError`` part way through aborts the run and leaves files
        that were already written in place.
        """
        template_path = self.resolve_template(template_name)
        name = validate_target_name(target_name)
        variables = build_variables(name)

        if not await self.store.exists(template_path):
            raise TemplateNotFoundError(template_name)

        self._generated = []
        target = Path(target_dir)
        progress = None if dry_run else self.progress

        if progress is not None:
            total = await self.count_files(template_path)
            progress.start(total, f'🚀 Generating from template "{template_name}"...')

        logger.debug(
            "Generating %r from %s into %s (dry_run=%s)", name, template_path, target, dry_run,
        )

        try:
            if await self.store.is_directory(template_path):
                container = target / variables.pascal
                if not dry_run:
                    await self.store.ensure_directory(container)
                await self._process_directory(template_path, container, variables, dry_run)
            else:
                file_name = substitute(template_path.name, variables)
                await self._process_file(template_path, target / file_name, variables, dry_run)
        except BaseException:
            if progress is not None:
                progress.stop()
            raise

        if progress is not None:
            progress.complete(f"Generated {len(self._generated)} files successfully")

        return self.generated_files

    async def _process_directory(
        self,
        source_dir: Path,
        target_dir: Path,
        variables: VariableSet,
        dry_run: bool,
    ) -> None:
        # Pre-order: subdirectories are walked as soon as they are listed.
        for entry in await self.store.list_entries(source_dir):
            source = source_dir / entry
            target = target_dir / substitute(entry, variables)
            if await self.store.is_directory(source):
                if not dry_run:
                    await self.store.ensure_directory(target)
                await self._process_directory(source, target, variables, dry_run)
            else:
                await self._process_file(source, target, variables, dry_run)

    async def _process_file(
        self,
        source: Path,
        target: Path,
        variables: VariableSet,
        dry_run: bool,
    ) -> None:
        content = substitute(await self.store.read_text(source), variables)

        exists = await self.store.exists(target)
        action = GenerationAction.OVERWRITE if exists else GenerationAction.CREATE
        self._generated.append(GenerationResult(path=str(target), action=action))

        if dry_run:
            return

        await self.store.ensure_directory(target.parent)
        await self.store.write_text(target, content)
        logger.debug("%s %s", action.value, target)

        if self.progress is not None:
            self.progress.advance(target.name)

    async def count_files(self, path: str | Path) -> int:
        """Count the files a template will produce."""
        path = Path(path)
        if not await self.store.is_directory(path):
            return 1
        count = 0
        for entry in await self.store.list_entries(path):
            count += await self.count_files(path / entry)
        return count
