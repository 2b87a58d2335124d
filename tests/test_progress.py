"""Tests for stencil.tui.progress."""

from __future__ import annotations

import asyncio
import io

from rich.console import Console

from stencil.templates.manager import TemplateManager
from stencil.tui.progress import ProgressObserver, RichProgress


def make_console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=120), buf


class TestRichProgress:
    def test_is_an_observer(self):
        assert isinstance(RichProgress(), ProgressObserver)

    def test_counts_and_messages(self):
        console, buf = make_console()
        progress = RichProgress(console)
        progress.start(2, "Generating...")
        progress.advance("a.ts")
        assert progress.current == 1
        progress.advance("b.ts")
        progress.complete("Generated 2 files successfully")

        out = buf.getvalue()
        assert progress.total == 2
        assert progress.current == 2
        assert "Generating..." in out
        assert "✓ a.ts" in out
        assert "Generated 2 files successfully" in out

    def test_advance_before_start_is_ignored(self):
        console, buf = make_console()
        progress = RichProgress(console)
        progress.advance("x")
        assert progress.current == 0
        assert buf.getvalue() == ""

    def test_stop_ends_live_display(self):
        console, buf = make_console()
        progress = RichProgress(console)
        progress.start(3, "Generating...")
        live = progress._progress.live
        assert live.is_started

        progress.stop()

        assert not live.is_started
        assert "Generated" not in buf.getvalue()
        progress.stop()

    def test_driven_by_manager(self, tmp_path):
        root = tmp_path / ".template"
        (root / "t" / "sub").mkdir(parents=True)
        (root / "t" / "one.txt").write_text("1")
        (root / "t" / "sub" / "two.txt").write_text("2")
        console, buf = make_console()
        progress = RichProgress(console)

        manager = TemplateManager(root, progress=progress)
        asyncio.run(manager.generate_from_template("t", "x", tmp_path / "out"))

        out = buf.getvalue()
        assert progress.total == 2
        assert "one.txt" in out and "two.txt" in out
        assert "Generated 2 files successfully" in out
