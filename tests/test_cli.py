"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from keyscope.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestKeyCommand:
    """Tests for `keyscope key`."""

    def test_json_output(self, runner):
        result = runner.invoke(app, ["key", "Eb major", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["tonic"] == "Eb"
        assert data["alt"] == -3
        assert data["altered_notes"] == ["Bb", "Eb", "Ab"]
        assert data["relative_major"] == "Eb major"
        assert data["relative_minor"] == "C minor"

    def test_table_output(self, runner):
        result = runner.invoke(app, ["key", "D dorian"])
        assert result.exit_code == 0
        assert "Dm7" in result.output
        assert "Relative major: C major" in result.output
        assert "Relative minor: A minor" in result.output

    def test_surrounding_whitespace_ignored(self, runner):
        result = runner.invoke(app, ["key", "  A minor  ", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "A minor"

    def test_invalid_key(self, runner):
        result = runner.invoke(app, ["key", "H major"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestTokenizeCommand:
    """Tests for `keyscope tokenize`."""

    def test_json_output(self, runner):
        result = runner.invoke(app, ["tokenize", "dorian", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"tonic": "", "mode": "dorian"}

    def test_plain_output(self, runner):
        result = runner.invoke(app, ["tokenize", "C major"])
        assert result.exit_code == 0
        assert "Tonic: C" in result.output
        assert "Mode: major" in result.output


class TestModesCommand:
    """Tests for `keyscope modes`."""

    def test_lists_all_modes(self, runner):
        result = runner.invoke(app, ["modes"])
        assert result.exit_code == 0
        for name in ("ionian", "dorian", "locrian"):
            assert name in result.output
