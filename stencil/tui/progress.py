"""Progress reporting for generation runs.

Progress is purely observational: the template manager works the same
with no observer at all.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


@runtime_checkable
class ProgressObserver(Protocol):
    """Receives one ``advance`` per written file after ``start``."""

    def start(self, total: int, description: str = "") -> None:
        ...

    def advance(self, label: str = "") -> None:
        ...

    def complete(self, message: str = "") -> None:
        ...

    def stop(self) -> None:
        """Tear down without a completion message after a failed run."""
        ...


class RichProgress:
    """Progress bar rendered with rich."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.total = 0
        self.current = 0
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self._started_at = 0.0

    def start(self, total: int, description: str = "") -> None:
        self.total = total
        self.current = 0
        self._started_at = time.monotonic()
        if description:
            self.console.print(f"\n{escape(description)}")
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            console=self.console,
            transient=True,
        )
        self._progress.start()
        self._task = self._progress.add_task("generating", total=total or None)

    def advance(self, label: str = "") -> None:
        if self._progress is None:
            return
        self.current += 1
        if label:
            self._progress.console.print(f"   [green]✓[/] {escape(label)}")
        self._progress.advance(self._task)

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

    def complete(self, message: str = "") -> None:
        self.current = self.total
        self.stop()
        elapsed = time.monotonic() - self._started_at
        self.console.print(f"\n[bold green]✨ {escape(message or 'Complete!')}[/] [dim]({elapsed:.1f}s)[/]\n")
