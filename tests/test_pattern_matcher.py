"""Tests for rule-based pattern scoring and fallback selection."""

import random
from unittest.mock import MagicMock

import pytest

from uniqbot.bot.config import prompts
from uniqbot.bot.schemas import (
    CandidateResponse,
    ConversationContext,
    FallbackRecord,
    PatternRecord,
)
from uniqbot.bot.services.context_analyzer import ContextAnalyzer
from uniqbot.bot.services.pattern_matcher import PatternMatcher, score_pattern, score_to_confidence

from conftest import user


def _product_search(confidence=0.0, content="", tag=None):
    product_search = MagicMock()
    product_search.search.return_value = CandidateResponse(content, confidence, tag)
    return product_search


def _context(*topics):
    return ConversationContext(topics=list(topics) or ["general"], session_id="s-1")


FALLBACKS = [
    FallbackRecord("1", "Could you tell me a bit more?"),
    FallbackRecord("2", "I'm not sure I follow, can you rephrase?"),
    FallbackRecord("3", "Let me connect you with our support team."),
]


class TestScorePattern:
    def test_direct_match_plus_keyword(self):
        pattern = PatternRecord("1", 1, "We will look it up.", ["order"])
        assert score_pattern("where is my order?", ["where", "order"], ["general"], pattern) == 12

    def test_topic_bonus_from_response(self):
        pattern = PatternRecord("1", 1, "Our returns policy is 30 days.", ["refund"])
        assert score_pattern("hello", ["hello"], ["returns"], pattern) == 3

    def test_no_match(self):
        pattern = PatternRecord("1", 1, "Password help.", ["password"])
        assert score_pattern("hello", ["hello"], ["general"], pattern) == 0

    def test_confidence_is_capped(self):
        assert score_to_confidence(12) == pytest.approx(0.8)
        assert score_to_confidence(30) == 1.0


class TestPatternMatcher:
    def test_order_question_matches_order_pattern(self, settings):
        context = ContextAnalyzer().analyze([user("Where is my order?")], session_id="s-1")
        patterns = [PatternRecord("7", 1, "You can track it from your account page.", ["order"])]

        result = PatternMatcher(_product_search()).match(
            "Where is my order?", context, settings, patterns, FALLBACKS
        )

        assert result.pattern_matched == "7"
        assert result.confidence == pytest.approx(0.8)
        assert result.content == "You can track it from your account page."
        assert result.suggestions == ["Check order status", "Modify my order", "Payment issues"]

    def test_tie_goes_to_lower_priority_number(self, settings):
        patterns = [
            PatternRecord("low", 5, "Second answer.", ["refund"]),
            PatternRecord("high", 1, "First answer.", ["refund"]),
        ]

        result = PatternMatcher(_product_search()).match(
            "I want a refund", _context(), settings, patterns, FALLBACKS
        )

        assert result.pattern_matched == "high"

    def test_higher_score_beats_priority(self, settings):
        patterns = [
            PatternRecord("a", 1, "Generic.", ["status"]),
            PatternRecord("b", 9, "Check the orders page.", ["order status", "order"]),
        ]

        result = PatternMatcher(_product_search()).match(
            "order status for my order", _context("orders"), settings, patterns, FALLBACKS
        )

        assert result.pattern_matched == "b"
        assert result.confidence == 1.0

    def test_inactive_patterns_are_ignored(self, settings):
        patterns = [PatternRecord("1", 1, "Hidden.", ["refund"], is_active=False)]

        result = PatternMatcher(_product_search(), random.Random(7)).match(
            "I want a refund", _context(), settings, patterns, FALLBACKS
        )

        assert result.pattern_matched is None
        assert result.confidence == pytest.approx(0.2)

    def test_random_fallback_when_nothing_scores(self, settings):
        expected = random.Random(7).choice(FALLBACKS)

        result = PatternMatcher(_product_search(), random.Random(7)).match(
            "xyzzy", _context(), settings, [], FALLBACKS
        )

        assert result.content == expected.response
        assert result.confidence == pytest.approx(0.2)
        assert result.pattern_matched is None

    def test_apology_when_no_fallbacks_exist(self, settings):
        result = PatternMatcher(_product_search()).match("xyzzy", _context(), settings, [], [])

        assert result.content == prompts.NO_FALLBACK_RESPONSE
        assert result.confidence == pytest.approx(0.1)

    def test_confident_product_answer_skips_patterns(self, settings):
        product_search = _product_search(0.93, "<div>cards</div>", "product_search")
        patterns = [PatternRecord("1", 1, "Gift cards are available.", ["gift"])]

        result = PatternMatcher(product_search).match(
            "gift for my wife", _context("product_search"), settings, patterns, FALLBACKS, "EUR"
        )

        assert result.pattern_matched == "product_search"
        assert result.confidence == pytest.approx(0.93)
        product_search.search.assert_called_once_with("gift for my wife", settings, "EUR")

    def test_product_answer_at_half_confidence_is_not_used(self, settings):
        product_search = _product_search(0.5, "<div>cards</div>", "product_search")
        patterns = [PatternRecord("1", 1, "Gift cards are available.", ["gift"])]

        result = PatternMatcher(product_search).match(
            "gift for my wife", _context(), settings, patterns, FALLBACKS
        )

        assert result.pattern_matched == "1"
