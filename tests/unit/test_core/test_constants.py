"""
Unit tests for core.constants module.
"""
from core.constants import (
    DEFAULT_VERTICAL_SCORE,
    ELEMENT_TERMINATOR,
    LINE_SEPARATOR,
    PRESENTER_MESSAGES,
    RANKING_STABLE,
    RANKING_STRATEGIES,
    RANKING_UNIQUE_SCORE,
)


class TestTranscriptLayout:
    """Tests for transcript layout constants."""

    def test_line_separator_is_newline(self):
        """Test lines are separated by a single newline."""
        assert LINE_SEPARATOR == '\n'

    def test_element_terminator_is_space(self):
        """Test every element ends with a single space."""
        assert ELEMENT_TERMINATOR == ' '

    def test_default_score_is_zero(self):
        """Test blocks without geometry default to score 0."""
        assert DEFAULT_VERTICAL_SCORE == 0


class TestRankingStrategies:
    """Tests for ranking strategy names."""

    def test_both_strategies_listed(self):
        """Test strategy tuple contains both strategies."""
        assert RANKING_UNIQUE_SCORE in RANKING_STRATEGIES
        assert RANKING_STABLE in RANKING_STRATEGIES

    def test_unique_score_is_first(self):
        """Test the key-unique strategy is listed first."""
        assert RANKING_STRATEGIES[0] == RANKING_UNIQUE_SCORE


class TestPresenterMessages:
    """Tests for PRESENTER_MESSAGES constant."""

    def test_no_text_message(self):
        """Test empty-result notification text."""
        assert PRESENTER_MESSAGES['no_text'] == 'No text found'

    def test_capture_failed_message(self):
        """Test capture-failure notification text."""
        assert PRESENTER_MESSAGES['capture_failed'] == 'Picture not taken!'

    def test_messages_not_empty(self):
        """Test no message is blank."""
        for key, message in PRESENTER_MESSAGES.items():
            assert message.strip(), f"{key} has an empty message"
