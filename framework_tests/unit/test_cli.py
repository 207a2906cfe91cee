"""
Fast unit tests for CLI functionality.

Commands run through typer's CliRunner against small catalog files.
"""

import json
import pytest
from pathlib import Path
from typer.testing import CliRunner

from jobfilter.cli.main import app


CATALOG_YAML = """\
displayName: All
items:
  - type: folder
    name: release
    displayName: Release Builds
    items:
      - name: build-42
        displayName: Build 42
        builds:
          - number: 5
      - name: deploy
        displayName: Deploy
        builds:
          - number: 1
            displayName: "1.2.3"
  - name: docs
    displayName: Docs
"""


@pytest.fixture
def catalog_file(temp_dir: Path) -> Path:
    """Catalog with one folder holding two jobs, plus a top level job."""
    path = temp_dir / "catalog.yaml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command(self):
        """Test CLI help command works."""
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "filter" in result.output

    def test_filter_group_help(self):
        """Test the filter sub-commands are registered."""
        result = self.runner.invoke(app, ["filter", "--help"])

        assert result.exit_code == 0
        for command in ("check", "match", "export", "run"):
            assert command in result.output

    def test_invalid_command(self):
        """Test behavior with invalid command."""
        result = self.runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0

    def test_version(self):
        """Test version command."""
        result = self.runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "jobfilter" in result.output
        assert "pydantic" in result.output

    def test_verbose_and_log_level_conflict(self):
        """Test --verbose and --log-level cannot be combined."""
        result = self.runner.invoke(app, ["-v", "--log-level", "DEBUG", "version"])

        assert result.exit_code == 1
        assert "Cannot specify both" in result.output

    def test_missing_config_file(self, temp_dir: Path):
        """Test configuration errors stop the command."""
        result = self.runner.invoke(
            app, ["--config", str(temp_dir / "missing.yaml"), "version"]
        )

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_config_command(self, temp_dir: Path):
        """Test config command shows loaded settings."""
        config_file = temp_dir / "jobfilter.yaml"
        config_file.write_text(
            "default_value_type: FOLDER_NAME\n"
            "filters:\n"
            "  - regex: 'rel.*'\n",
            encoding="utf-8",
        )

        result = self.runner.invoke(app, ["--config", str(config_file), "config"])

        assert result.exit_code == 0
        assert "FOLDER_NAME" in result.output
        assert "rel.*" in result.output


class TestCheckCommand:
    """Test filter check."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_valid_pattern(self):
        """Test a valid pattern prints OK."""
        result = self.runner.invoke(app, ["filter", "check", r"Build \d+"])

        assert result.exit_code == 0
        assert "OK" in result.output

    def test_invalid_pattern(self):
        """Test invalid patterns exit with status 1."""
        result = self.runner.invoke(app, ["filter", "check", "[abc"])

        assert result.exit_code == 1
        assert "Invalid pattern" in result.output
        assert "unterminated character set" in result.output


class TestMatchCommand:
    """Test filter match."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_top_level_items(self, catalog_file: Path):
        """Test only top level items are evaluated by default."""
        result = self.runner.invoke(
            app, ["filter", "match", str(catalog_file), "--regex", "rel.*"]
        )

        assert result.exit_code == 0
        assert "1/2 matched (50.0%)" in result.output

    def test_recurse_with_display_name(self, catalog_file: Path):
        """Test nested items and display name matching."""
        result = self.runner.invoke(
            app,
            [
                "filter", "match", str(catalog_file),
                "-r", r"Build \d+", "--match-display-name", "--recurse",
            ],
        )

        assert result.exit_code == 0
        assert "release/build-42" in result.output
        assert "1/4 matched (25.0%)" in result.output

    def test_only_matched(self, catalog_file: Path):
        """Test unmatched rows are hidden."""
        result = self.runner.invoke(
            app,
            [
                "filter", "match", str(catalog_file),
                "-r", "deploy", "--recurse", "--only-matched",
            ],
        )

        assert result.exit_code == 0
        assert "release/deploy" in result.output
        assert "Docs" not in result.output

    def test_build_version(self, catalog_file: Path):
        """Test matching on build labels."""
        result = self.runner.invoke(
            app,
            [
                "filter", "match", str(catalog_file),
                "-r", r"1\.2\.3", "-t", "BUILD_VERSION", "--recurse",
            ],
        )

        assert result.exit_code == 0
        # The folder and the deploy job both see the 1.2.3 build
        assert "2/4 matched (50.0%)" in result.output

    def test_mode_is_shown(self, catalog_file: Path):
        """Test the mode tag appears in the table title."""
        result = self.runner.invoke(
            app,
            [
                "filter", "match", str(catalog_file),
                "-r", "docs", "--mode", "includeMatched", "--recurse",
            ],
        )

        assert result.exit_code == 0
        assert "mode=includeMatched" in result.output

    def test_default_value_type_from_config(self, catalog_file: Path, temp_dir: Path):
        """Test the configured value type is used when none is given."""
        config_file = temp_dir / "jobfilter.yaml"
        config_file.write_text("default_value_type: FOLDER_NAME\n", encoding="utf-8")

        result = self.runner.invoke(
            app,
            [
                "--config", str(config_file),
                "filter", "match", str(catalog_file), "-r", "release", "--recurse",
            ],
        )

        assert result.exit_code == 0
        assert "FOLDER_NAME" in result.output
        assert "2/4 matched (50.0%)" in result.output

    def test_invalid_regex(self, catalog_file: Path):
        """Test compile errors exit with status 1."""
        result = self.runner.invoke(
            app, ["filter", "match", str(catalog_file), "-r", "(unclosed"]
        )

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_value_type(self, catalog_file: Path):
        """Test unknown value types exit with status 1."""
        result = self.runner.invoke(
            app, ["filter", "match", str(catalog_file), "-r", "x", "-t", "LABEL"]
        )

        assert result.exit_code == 1
        assert "Unknown value type" in result.output

    def test_missing_catalog(self, temp_dir: Path):
        """Test unreadable catalogs exit with status 1."""
        result = self.runner.invoke(
            app, ["filter", "match", str(temp_dir / "nope.yaml"), "-r", "x"]
        )

        assert result.exit_code == 1
        assert "Failed to load catalog" in result.output


class TestExportCommand:
    """Test filter export."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_export_persisted_form(self):
        """Test the exported JSON uses persisted key names."""
        result = self.runner.invoke(
            app,
            [
                "filter", "export", "-r", "rel.*", "-t", "FOLDER_NAME",
                "--mode", "excludeMatched",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "regex": "rel.*",
            "includeExcludeTypeString": "excludeMatched",
            "valueTypeString": "FOLDER_NAME",
            "matchName": True,
            "matchFullName": False,
            "matchDisplayName": False,
            "matchFullDisplayName": False,
        }

    def test_export_invalid_filter(self):
        """Test invalid filters are not exported."""
        result = self.runner.invoke(app, ["filter", "export", "-r", "[abc"])
        assert result.exit_code == 1


class TestRunCommand:
    """Test filter run."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_no_filters(self, catalog_file: Path):
        """Test running without configured filters."""
        result = self.runner.invoke(app, ["filter", "run", str(catalog_file)])

        assert result.exit_code == 0
        assert "No filters configured" in result.output

    def test_configured_filters(self, catalog_file: Path, temp_dir: Path):
        """Test every configured filter produces a summary."""
        config_file = temp_dir / "jobfilter.yaml"
        config_file.write_text(
            "filters:\n"
            "  - regex: 'rel.*'\n"
            "  - regex: 'Deploy'\n"
            "    valueTypeString: NAME\n"
            "    matchDisplayName: true\n",
            encoding="utf-8",
        )

        result = self.runner.invoke(
            app,
            ["--config", str(config_file), "filter", "run", str(catalog_file), "--recurse"],
        )

        assert result.exit_code == 0
        assert "1/4 matched (25.0%)" in result.output
        assert result.output.count("matched (") == 2

    def test_invalid_configured_filter(self, catalog_file: Path, temp_dir: Path):
        """Test a broken filter in the configuration stops the run."""
        config_file = temp_dir / "jobfilter.yaml"
        config_file.write_text("filters:\n  - regex: '[abc'\n", encoding="utf-8")

        result = self.runner.invoke(
            app, ["--config", str(config_file), "filter", "run", str(catalog_file)]
        )

        assert result.exit_code == 1
        assert "Error" in result.output
