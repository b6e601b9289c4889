"""Unit tests for wildcard CLI commands.

Tests for the pathkit glob match, root and find commands.
"""

import json
from pathlib import Path

import pytest
from pathkit.cli.main import app
from pathkit.core.components import normalize_slashes
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Small project tree on disk."""
    (tmp_path / "src" / "pkg").mkdir(parents=True)
    (tmp_path / "src" / "pkg" / "core.py").write_text("")
    (tmp_path / "src" / "pkg" / "core.pyi").write_text("")
    (tmp_path / "setup.py").write_text("")
    (tmp_path / "node_modules" / "lib").mkdir(parents=True)
    (tmp_path / "node_modules" / "lib" / "shim.py").write_text("")
    (tmp_path / ".venv").mkdir()
    (tmp_path / ".venv" / "site.py").write_text("")
    return tmp_path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config file with fixed case sensitivity and default patterns."""
    path = tmp_path / "pathkit.toml"
    path.write_text("case_sensitive = true\n")
    return path


class TestMatchCommand:
    """Tests for the glob match command."""

    def test_match(self) -> None:
        """Matching candidates are reported and the command succeeds."""
        result = runner.invoke(
            app,
            ["glob", "match", "./**/*.py?", "/u/.b/f.pyd", "/u/.b/f.py", "--base", "/u"],
        )

        assert result.exit_code == 0
        assert "1 of 2 candidates matched" in result.output

    def test_no_match(self) -> None:
        """Exit code 1 when nothing matches."""
        result = runner.invoke(app, ["glob", "match", "*.py", "/u/a.txt", "--base", "/u"])

        assert result.exit_code == 1
        assert "0 of 1 candidates matched" in result.output

    def test_ignore_case(self) -> None:
        """--ignore-case matches differently cased candidates."""
        result = runner.invoke(
            app, ["glob", "match", "*.PY", "/U/a.py", "--base", "/u", "--ignore-case"]
        )

        assert result.exit_code == 0

    def test_relative_candidate_resolved_against_base(self) -> None:
        """Relative candidates are resolved against --base before matching."""
        result = runner.invoke(
            app, ["glob", "match", "*.py", "foo.py", "src/../bar.py", "--base", "/u"]
        )

        assert result.exit_code == 0
        assert "2 of 2 candidates matched" in result.output


class TestRootCommand:
    """Tests for the glob root command."""

    def test_root(self) -> None:
        """The wildcard root is printed."""
        result = runner.invoke(app, ["glob", "root", "src/*.py", "--base", "/users/me"])

        assert result.exit_code == 0
        assert result.output.strip() == "/users/me/src"

    def test_root_directory_wildcard_note(self) -> None:
        """Patterns that recurse are flagged."""
        result = runner.invoke(app, ["glob", "root", "src/**/*.py", "--base", "/users/me"])

        assert result.exit_code == 0
        assert "/users/me/src" in result.output
        assert "subdirectories" in result.output


class TestFindCommand:
    """Tests for the glob find command."""

    def test_find_json(self, project: Path, config_file: Path) -> None:
        """Default excludes prune node_modules and dot directories."""
        base = normalize_slashes(str(project))

        result = runner.invoke(
            app,
            ["glob", "find", "**/*.py", "--base", base, "-c", str(config_file), "-f", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [f"{base}/setup.py", f"{base}/src/pkg/core.py"]

    def test_find_extra_exclude(self, project: Path, config_file: Path) -> None:
        """--exclude adds to the configured excludes."""
        base = normalize_slashes(str(project))

        result = runner.invoke(
            app,
            [
                "glob",
                "find",
                "**/*.py",
                "--base",
                base,
                "-c",
                str(config_file),
                "-x",
                "src",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [f"{base}/setup.py"]

    def test_find_uses_config_includes(self, project: Path, tmp_path: Path) -> None:
        """Without patterns, includes come from the config file."""
        config_path = tmp_path / "custom.toml"
        config_path.write_text('include = ["src/**/*.pyi"]\ncase_sensitive = true\n')
        base = normalize_slashes(str(project))

        result = runner.invoke(
            app, ["glob", "find", "--base", base, "-c", str(config_path), "-f", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == [f"{base}/src/pkg/core.pyi"]

    def test_find_table(self, project: Path, config_file: Path) -> None:
        """Table output reports the number of files."""
        result = runner.invoke(
            app, ["glob", "find", "*.py", "--base", str(project), "-c", str(config_file)]
        )

        assert result.exit_code == 0
        assert "Found 1 files" in result.output

    def test_find_nothing(self, project: Path, config_file: Path) -> None:
        """An empty result is reported."""
        result = runner.invoke(
            app, ["glob", "find", "*.rs", "--base", str(project), "-c", str(config_file)]
        )

        assert result.exit_code == 0
        assert "No matching files found." in result.output

    def test_find_invalid_config(self, project: Path, tmp_path: Path) -> None:
        """A broken config file fails the command."""
        config_path = tmp_path / "broken.toml"
        config_path.write_text("include = [")

        result = runner.invoke(
            app, ["glob", "find", "--base", str(project), "-c", str(config_path)]
        )

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output
