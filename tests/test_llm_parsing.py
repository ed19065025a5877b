"""Tests for commitgen.llm.parsing module."""

import pytest

from commitgen.llm.parsing import (
    FALLBACK_MESSAGE,
    HARD_TRUNCATE_LENGTH,
    MAX_SUBJECT_LENGTH,
    sanitize_message,
    truncate_subject,
)


class TestTruncateSubject:
    """Tests for truncate_subject function."""

    def test_short_line_unchanged(self):
        """Test a line within the limit is returned as is."""
        assert truncate_subject("feat: add parser") == "feat: add parser"

    def test_exact_limit_unchanged(self):
        """Test a line of exactly the limit is kept."""
        line = "x" * MAX_SUBJECT_LENGTH
        assert truncate_subject(line) == line

    def test_cuts_at_word_boundary(self):
        """Test a long line is cut at the last word that fits."""
        line = "feat: " + " ".join(["word"] * 20)
        result = truncate_subject(line)
        assert len(result) <= MAX_SUBJECT_LENGTH
        assert line.startswith(result)
        assert not result.endswith(" ")
        assert result.endswith("word")

    def test_drops_trailing_connector(self):
        """Test a connector left at the end of the cut is dropped."""
        line = "feat: add support for streaming responses in the client library and " \
            "everything else"
        result = truncate_subject(line)
        assert result == "feat: add support for streaming responses in the client library"

    @pytest.mark.parametrize("connector", ["and", "or", "but", "with", "for", "to"])
    def test_each_connector_dropped(self, connector):
        """Test every dangling connector is removed."""
        head = "fix: " + "a" * 60
        line = f"{head} {connector} trailing words here"
        assert truncate_subject(line) == head

    def test_hard_truncate_without_boundary(self):
        """Test a line with no word boundary is hard-cut with an ellipsis."""
        line = "x" * 100
        result = truncate_subject(line)
        assert result == "x" * HARD_TRUNCATE_LENGTH + "..."
        assert len(result) == MAX_SUBJECT_LENGTH


class TestSanitizeMessage:
    """Tests for sanitize_message function."""

    def test_plain_message(self):
        """Test a clean reply is unchanged."""
        assert sanitize_message("feat: add login") == "feat: add login"

    def test_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert sanitize_message("  fix: typo \n") == "fix: typo"

    @pytest.mark.parametrize("raw", [
        '"feat: add login"',
        "'feat: add login'",
        "\"feat: add login\"\n",
    ])
    def test_strips_quotes(self, raw):
        """Test one layer of surrounding quotes is removed."""
        assert sanitize_message(raw) == "feat: add login"

    def test_keeps_unbalanced_quotes(self):
        """Test mismatched quotes are left alone."""
        assert sanitize_message('"feat: add login\'') == '"feat: add login\''

    def test_strips_code_fence(self):
        """Test a fenced reply is unwrapped."""
        assert sanitize_message("```\nfeat: x\n```") == "feat: x"

    def test_strips_code_fence_with_language(self):
        """Test a fence with a language tag is unwrapped."""
        assert sanitize_message("```text\nfix: y\n```") == "fix: y"

    def test_takes_first_line(self):
        """Test only the first non-empty line survives."""
        raw = "\n\nfeat: add cache\n\nThis adds a cache layer.\n"
        assert sanitize_message(raw) == "feat: add cache"

    def test_windows_line_endings(self):
        """Test CRLF replies are split into lines."""
        assert sanitize_message("feat: a\r\nbody") == "feat: a"

    def test_long_reply_truncated(self):
        """Test a 90-character reply is cut at a word boundary."""
        raw = (
            "feat: implement incremental cache invalidation for the dependency graph "
            "and related things"
        )
        assert len(raw) == 90
        result = sanitize_message(raw)
        assert len(result) <= MAX_SUBJECT_LENGTH
        assert result == "feat: implement incremental cache invalidation for the dependency graph"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n", '""', "```\n```", None])
    def test_empty_reply_uses_fallback(self, raw):
        """Test an empty reply becomes the generic message."""
        assert sanitize_message(raw) == FALLBACK_MESSAGE

    def test_result_is_single_line(self):
        """Test the result never contains a newline."""
        result = sanitize_message("```\nfeat: a\nfeat: b\n```")
        assert "\n" not in result
        assert result == "feat: a"

    @pytest.mark.parametrize("separator", ["\r", "\r\n", "\v", "\f", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_any_line_break_ends_the_subject(self, separator):
        """Test every Unicode line boundary is treated as a line break."""
        result = sanitize_message(f"feat: add{separator}thing")
        assert result == "feat: add"
        assert len(result.splitlines()) == 1

    def test_fence_with_carriage_returns(self):
        """Test a fenced reply with CRLF endings is unwrapped."""
        assert sanitize_message("```\r\nfeat: x\r\n```") == "feat: x"
