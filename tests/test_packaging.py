"""Tests for the project metadata."""

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


class TestProjectMetadata:
    """Tests for pyproject.toml."""

    def test_readme_is_the_project_readme(self):
        pyproject = (ROOT / "pyproject.toml").read_text()
        assert 'readme = "README.md"' in pyproject
        assert (ROOT / "README.md").is_file()

    def test_music21_is_declared(self):
        """The note, interval and key-signature layers run on music21."""
        pyproject = (ROOT / "pyproject.toml").read_text()
        assert '"music21"' in pyproject
