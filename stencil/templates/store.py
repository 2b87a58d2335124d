"""File store used by the template manager and validator.

The manager and validator only talk to the file system through the
:class:`FileStore` protocol, so tests (or other backends) can substitute
their own store.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

PathLike = str | Path


@runtime_checkable
class FileStore(Protocol):
    """Asynchronous file-system operations the core relies on.

    Every method may raise ``FileNotFoundError``, ``PermissionError`` or
    another ``OSError``.
    """

    async def exists(self, path: PathLike) -> bool:
        ...

    async def is_directory(self, path: PathLike) -> bool:
        ...

    async def list_entries(self, path: PathLike) -> list[str]:
        """Entry names in the order the underlying listing returns them."""
        ...

    async def read_text(self, path: PathLike) -> str:
        ...

    async def write_text(self, path: PathLike, content: str) -> None:
        ...

    async def ensure_directory(self, path: PathLike) -> None:
        ...


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF/LF exactly as stored
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class LocalFileStore:
    """:class:`FileStore` backed by the local disk.

    Blocking calls run in the default executor so they never stall the
    event loop.
    """

    async def exists(self, path: PathLike) -> bool:
        return await asyncio.to_thread(os.path.exists, path)

    async def is_directory(self, path: PathLike) -> bool:
        return await asyncio.to_thread(os.path.isdir, path)

    async def list_entries(self, path: PathLike) -> list[str]:
        return await asyncio.to_thread(os.listdir, path)

    async def read_text(self, path: PathLike) -> str:
        return await asyncio.to_thread(_read_text, Path(path))

    async def write_text(self, path: PathLike, content: str) -> None:
        await asyncio.to_thread(_write_text, Path(path), content)

    async def ensure_directory(self, path: PathLike) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
