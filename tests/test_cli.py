"""Tests for the stencil CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from stencil import __version__
from stencil.cli import main
from stencil.config import CONFIG_FILE, load_config


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return CliRunner()


def make_template(relpath: str, content: str) -> Path:
    fp = Path(".template") / relpath
    fp.parent.mkdir(parents=True, exist_ok=True)
    fp.write_text(content)
    return fp


class TestMain:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert f"stencil v{__version__}" in result.output

    def test_no_command_shows_help(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "validate" in result.output


class TestSetupCommands:
    def test_init_force(self, runner):
        result = runner.invoke(main, ["init", "--force"])
        assert result.exit_code == 0, result.output
        assert Path(".template/react-component/index.ts").is_file()
        assert Path(CONFIG_FILE).is_file()
        assert len(load_config(CONFIG_FILE).output_directories) == 5

    def test_install_skips_existing(self, runner):
        first = runner.invoke(main, ["install"])
        assert first.exit_code == 0, first.output
        assert Path(".template/react-hook").is_dir()

        second = runner.invoke(main, ["install"])
        assert second.exit_code == 0
        assert "already exists" in second.output

    def test_config_preserved_when_declined(self, runner):
        Path(CONFIG_FILE).write_text("progress: false\n")
        result = runner.invoke(main, ["config"], input="n\n")
        assert result.exit_code == 0
        assert Path(CONFIG_FILE).read_text() == "progress: false\n"

    def test_config_created(self, runner):
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert load_config(CONFIG_FILE).output_directories[0].name == "Components"

    def test_update_adds_directory(self, runner):
        runner.invoke(main, ["config"])
        result = runner.invoke(main, ["update"], input="add\nDocs\ndocs\n\n")
        assert result.exit_code == 0, result.output
        cfg = load_config(CONFIG_FILE)
        assert ("Docs", "docs") in [(d.name, d.path) for d in cfg.output_directories]

    def test_update_removes_directory(self, runner):
        runner.invoke(main, ["config"])
        result = runner.invoke(main, ["update"], input="remove\n1\n")
        assert result.exit_code == 0, result.output
        names = [d.name for d in load_config(CONFIG_FILE).output_directories]
        assert "Components" not in names

    def test_update_without_config(self, runner):
        result = runner.invoke(main, ["update"])
        assert result.exit_code == 0
        assert not Path(CONFIG_FILE).exists()


class TestList:
    def test_no_templates(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "No templates found" in result.output

    def test_lists_templates(self, runner):
        make_template("widget.txt", "x")
        make_template("component/index.ts", "y")
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "widget.txt" in result.output
        assert "component" in result.output


class TestGenerate:
    def test_generate_with_arguments(self, runner):
        make_template("comp/__templateNameToPascalCase__.tsx", "export const __templateNameToPascalCase__ = 1;\n")
        result = runner.invoke(main, ["generate", "comp", "user profile", "-d", "out"])
        assert result.exit_code == 0, result.output
        assert Path("out/UserProfile/UserProfile.tsx").read_text() == "export const UserProfile = 1;\n"
        assert "Successfully generated" in result.output

    def test_generate_without_progress_lists_files(self, runner):
        Path(CONFIG_FILE).write_text("progress: false\n")
        make_template("w.txt", "__templateNameToSnakeCase__")
        result = runner.invoke(main, ["generate", "w.txt", "Big Thing", "-d", "out"])
        assert result.exit_code == 0, result.output
        assert "Total: 1 files" in result.output
        assert Path("out/w.txt").read_text() == "big_thing"

    def test_dry_run_cancelled(self, runner):
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "w.txt", "thing", "-d", "out", "--dry-run"], input="n\n")
        assert result.exit_code == 0, result.output
        assert "Dry-run mode" in result.output
        assert "cancelled" in result.output
        assert not Path("out").exists()

    def test_dry_run_confirmed(self, runner):
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "w.txt", "thing", "-d", "out", "--dry-run", "-y"])
        assert result.exit_code == 0, result.output
        assert Path("out/w.txt").is_file()

    def test_interactive_prompts(self, runner):
        make_template("w.txt", "__templateNameToDashCase__")
        result = runner.invoke(main, ["generate"], input="w.txt\nbad/name\nmy thing\n")
        assert result.exit_code == 0, result.output
        assert Path("w.txt").read_text() == "my-thing"

    def test_choose_output_directory(self, runner):
        Path(CONFIG_FILE).write_text(
            "output_directories:\n"
            "  - name: Src\n"
            "    path: src\n"
            "  - name: Lib\n"
            "    path: lib\n"
        )
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "w.txt", "thing"], input="2\n")
        assert result.exit_code == 0, result.output
        assert Path("lib/w.txt").is_file()

    def test_invalid_name(self, runner):
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "w.txt", "bad/name", "-d", "out"])
        assert result.exit_code == 1
        assert not Path("out").exists()

    def test_unknown_template(self, runner):
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "missing", "thing", "-d", "out"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_traversal_rejected(self, runner):
        make_template("w.txt", "x")
        result = runner.invoke(main, ["generate", "../secret", "thing", "-d", "out"])
        assert result.exit_code == 1
        assert not Path("out").exists()

    def test_no_templates(self, runner):
        result = runner.invoke(main, ["generate", "w.txt", "thing"])
        assert result.exit_code == 1
        assert "No templates found" in result.output


class TestValidate:
    def test_no_templates_directory(self, runner):
        result = runner.invoke(main, ["validate"])
        assert result.exit_code == 0
        assert "No templates found" in result.output

    def test_valid_templates(self, runner):
        runner.invoke(main, ["install"])
        result = runner.invoke(main, ["validate"])
        assert result.exit_code == 0, result.output
        assert "All templates are valid" in result.output

    def test_invalid_template_fails(self, runner):
        make_template("bad/x.ts", "__templateNameNope__")
        result = runner.invoke(main, ["validate"])
        assert result.exit_code == 1
        assert "Errors: 1" in result.output

    def test_warnings_do_not_fail(self, runner):
        Path(".template/empty").mkdir(parents=True)
        result = runner.invoke(main, ["validate"])
        assert result.exit_code == 0
        assert "Warnings: 1" in result.output

    def test_single_path(self, runner):
        fp = make_template("x.ts", "__templateName")
        result = runner.invoke(main, ["validate", str(fp)])
        assert result.exit_code == 1
