"""
Tests for the operator console and score parsing.
"""
import io

import pytest

from gradeassist.console import Console, parse_score


class TestParseScore:
    """Tests for parse_score."""

    @pytest.mark.parametrize("text,expected", [
        ("85", 85),
        ("  100 \n", 100),
        ("0", 0),
        ("abc", 0),
        ("", 0),
        ("85.5", 0),
        ("101", 0),
        ("-5", 0),
    ])
    def test_parse(self, text, expected):
        """Test parsing with the default-zero fallback."""
        assert parse_score(text) == expected

    def test_custom_default(self):
        """Test a caller supplied default."""
        assert parse_score("oops", default=50) == 50


class TestConsole:
    """Tests for Console prompts."""

    def test_ask_prints_prompt_and_strips(self):
        """Test that the prompt is shown and the answer stripped."""
        out = io.StringIO()
        console = Console(stdin=io.StringIO("  hello  \n"), stdout=out)

        assert console.ask("Question?") == "hello"
        assert "Question?" in out.getvalue()

    def test_end_of_input_is_empty(self):
        """Test that EOF reads as an empty answer."""
        console = Console(stdin=io.StringIO(""), stdout=io.StringIO())

        assert console.ask("Question?") == ""

    def test_ask_score_warns_on_bad_input(self):
        """Test that an unparsable score is recorded as zero with a warning."""
        out = io.StringIO()
        console = Console(stdin=io.StringIO("ninety\n"), stdout=out)

        assert console.ask_score() == 0
        assert "Type the score(0-100):" in out.getvalue()
        assert "Warning" in out.getvalue()

    def test_ask_score_reads_consecutive_lines(self, make_console):
        """Test that each prompt consumes one line."""
        console = make_console("70", "a comment", "90")

        assert console.ask_score() == 70
        assert console.ask_comment() == "a comment"
        assert console.ask_score() == 90

    @pytest.mark.parametrize("answer,expected", [("085", 85), ("+90", 90), (" 70 ", 70)])
    def test_ask_score_no_warning_for_valid_spellings(self, answer, expected):
        """Test that leading zeros and signs are accepted silently."""
        out = io.StringIO()
        console = Console(stdin=io.StringIO(f"{answer}\n"), stdout=out)

        assert console.ask_score() == expected
        assert "Warning" not in out.getvalue()

    def test_ask_score_empty_is_zero_without_warning(self):
        """Test that a blank line records zero quietly."""
        out = io.StringIO()
        console = Console(stdin=io.StringIO("\n"), stdout=out)

        assert console.ask_score() == 0
        assert "Warning" not in out.getvalue()
