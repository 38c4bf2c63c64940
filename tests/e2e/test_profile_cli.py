# ABOUTME: End-to-end tests for the bookmatch profile CLI command.
# ABOUTME: Reads the sample library export and checks the rendered profile.

import json
from pathlib import Path

from click.testing import CliRunner

from bookmatch.cli import cli


class TestProfileCli:
    """E2e tests for `bookmatch profile`."""

    def test_table_output(self, library_file: Path) -> None:
        result = CliRunner().invoke(cli, ["profile", str(library_file)])
        assert result.exit_code == 0
        assert "Reading Profile" in result.output
        assert "Terry Pratchett" in result.output
        assert "Discworld" in result.output
        assert "4 book(s), 1 audiobook(s) analyzed" in result.output

    def test_json_output(self, library_file: Path) -> None:
        result = CliRunner().invoke(cli, ["profile", str(library_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["favorite_authors"] == ["Terry Pratchett", "Neil Gaiman"]
        assert data["top_genres"][0] == "Fantasy"
        assert data["preferred_series"] == ["Discworld", "Dune"]

    def test_empty_library(self, tmp_path: Path) -> None:
        path = tmp_path / "library.json"
        path.write_text("{}")
        result = CliRunner().invoke(cli, ["profile", str(path)])
        assert result.exit_code == 0
        assert "none" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["profile", str(tmp_path / "nope.json")])
        assert result.exit_code == 2

    def test_malformed_library(self, tmp_path: Path) -> None:
        path = tmp_path / "library.json"
        path.write_text('{"books": [{"author": "No Title"}]}')
        result = CliRunner().invoke(cli, ["profile", str(path)])
        assert result.exit_code == 1
        assert "needs a title" in result.output
