"""Tests for the CLI interface."""

import pytest
from typer.testing import CliRunner

from inkline import __version__
from inkline.cli import app, decode_escapes, describe_character
from inkline.exceptions import InklineError


runner = CliRunner()


class TestHelpers:
    """Tests for CLI helper functions."""

    def test_decode_escapes(self):
        """Test that typed escapes become characters."""
        assert decode_escapes(r"a\u200bb") == "a\u200bb"
        assert decode_escapes(r"\xa0") == "\xa0"
        assert decode_escapes("plain") == "plain"

    def test_decode_escapes_invalid(self):
        """Test that a broken escape raises an Inkline error."""
        with pytest.raises(InklineError):
            decode_escapes(r"bad\x")

    def test_describe_character(self):
        """Test code point descriptions."""
        assert describe_character("\u200b") == "U+200B ZERO WIDTH SPACE"
        assert describe_character(" ") == "U+0020 SPACE"


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_classify(self):
        """Test classifying tag names."""
        result = runner.invoke(app, ["classify", "p", "br", "span"])

        assert result.exit_code == 0
        assert "BR" in result.stdout
        assert "SPAN" in result.stdout
        assert "yes" in result.stdout

    def test_classify_requires_tags(self):
        """Test that classify needs at least one tag."""
        result = runner.invoke(app, ["classify"])

        assert result.exit_code != 0

    def test_chars(self):
        """Test classifying characters."""
        result = runner.invoke(app, ["-v", "chars", r"a\u200b"])

        assert result.exit_code == 0
        assert "U+0061" in result.stdout
        assert "U+200B" in result.stdout

    def test_chars_whitespace_only(self):
        """Test the note printed for whitespace-only input."""
        result = runner.invoke(app, ["chars", r"\u00a0 "])

        assert result.exit_code == 0
        assert "Whitespace only" in result.stdout

    def test_chars_invalid_escape(self):
        """Test that a broken escape exits with an error."""
        result = runner.invoke(app, ["chars", r"bad\x"])

        assert result.exit_code == 1
        assert "Error" in result.stdout
