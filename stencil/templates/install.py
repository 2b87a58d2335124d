"""Installation of the bundled starter templates into a project."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from stencil.templates.manager import DEFAULT_TEMPLATES_DIR

logger = logging.getLogger(__name__)

_IGNORE = shutil.ignore_patterns("__pycache__", "*.pyc", ".DS_Store")


def bundled_templates_dir() -> Path:
    """Directory of the templates shipped with the package."""
    return Path(__file__).resolve().parent.parent / "bundled"


@dataclass
class InstallResult:
    """Outcome of :func:`install_templates`."""
    target: Path
    installed: list[str] = field(default_factory=list)
    skipped: bool = False


def install_templates(
    target_dir: str | Path = DEFAULT_TEMPLATES_DIR,
    *,
    overwrite: bool = False,
    source: str | Path | None = None,
) -> InstallResult:
    """Copy the bundled templates into ``target_dir``.

    An existing ``target_dir`` is left untouched unless ``overwrite`` is
    set, in which case bundled files replace files of the same name and
    any other templates already there are kept.

    Raises ``FileNotFoundError`` when the bundled templates are missing.
    """
    src = Path(source) if source is not None else bundled_templates_dir()
    target = Path(target_dir)

    if not src.is_dir():
        raise FileNotFoundError(f"No bundled templates found at {src}")

    if target.exists() and not overwrite:
        logger.debug("Templates directory %s exists, skipping install", target)
        return InstallResult(target=target, skipped=True)

    shutil.copytree(src, target, ignore=_IGNORE, dirs_exist_ok=True)

    installed = sorted(
        str(p.relative_to(src)) for p in src.rglob("*")
        if p.is_file() and "__pycache__" not in p.parts and p.suffix != ".pyc" and p.name != ".DS_Store"
    )
    return InstallResult(target=target, installed=installed)
