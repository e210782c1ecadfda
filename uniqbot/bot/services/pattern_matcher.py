"""
Service: PatternMatcher

Rule-based answer for a chat turn.

Product search runs first; a confident shopping answer (> 0.5) is returned
as-is. Otherwise every active pattern is scored:

    score = 10 × [any trigger phrase is a substring of the message]
          +  2 × (message keywords also found in the trigger phrases)
          +  3 × [any conversation topic appears in the response or a trigger]

The best score wins, the lower priority number on ties, and
confidence = min(score / 15, 1). When no pattern scores, a random fallback
(0.2) or the generic apology (0.1) is returned.
"""

# Python Packages
import logging
import random
from typing import List, Optional, Sequence

# Config
from ..config import prompts, thresholds

# Schemas
from ..schemas import (
    CandidateResponse,
    ChatbotSettings,
    ConversationContext,
    FallbackRecord,
    PatternRecord,
)

# Utils
from ...util import text
from ...util import currency as currency_util


logger = logging.getLogger(__name__)


def score_pattern(
    lower_message: str,
    message_keywords: Sequence[str],
    topics: Sequence[str],
    pattern: PatternRecord
) -> int:
    """Score one pattern against an already lowercased message. Pure."""

    phrases = [phrase.lower() for phrase in pattern.triggers]
    score = 0

    if any(phrase in lower_message for phrase in phrases):
        score += thresholds.PATTERN_DIRECT_MATCH_SCORE

    pattern_keywords = set()
    for phrase in phrases:
        pattern_keywords.update(text.extract_keywords(phrase))
    score += thresholds.PATTERN_KEYWORD_MATCH_SCORE * sum(
        1 for keyword in message_keywords if keyword in pattern_keywords
    )

    response = pattern.response.lower()
    if any(topic in response or any(topic in phrase for phrase in phrases) for topic in topics):
        score += thresholds.PATTERN_TOPIC_BONUS_SCORE

    return score


def score_to_confidence(score: int) -> float:
    return min(score / thresholds.PATTERN_SCORE_NORMALIZER, 1.0)


class PatternMatcher:

    def __init__(self, product_search, rng: Optional[random.Random] = None):
        """
        Args:
            product_search: ProductSearchAdapter (or anything with the same search()).
            rng:            Random source for fallback selection.
        """
        self.product_search = product_search
        self.rng = rng or random.Random()


    def match(
        self,
        message: str,
        context: ConversationContext,
        settings: ChatbotSettings,
        patterns: List[PatternRecord],
        fallbacks: List[FallbackRecord],
        currency: str = currency_util.DEFAULT_CURRENCY
    ) -> CandidateResponse:

        product_answer = self.product_search.search(message, settings, currency)
        if product_answer.confidence > thresholds.PRODUCT_SEARCH_BYPASS_CONFIDENCE:
            return product_answer

        lower_message = message.lower()
        message_keywords = text.extract_keywords(lower_message)

        best, best_score = None, 0
        for pattern in sorted(patterns, key=lambda p: p.priority):
            if not pattern.is_active:
                continue
            score = score_pattern(lower_message, message_keywords, context.topics, pattern)
            if score > best_score:
                best, best_score = pattern, score

        if best is not None:
            logger.debug("🎯 Pattern %s scored %d", best.pattern_id, best_score)
            return CandidateResponse(
                content         = best.response,
                confidence      = score_to_confidence(best_score),
                pattern_matched = best.pattern_id,
                suggestions     = text.generate_suggestions(context.topics),
            )

        return self.fallback(context, fallbacks)


    def fallback(self, context: ConversationContext, fallbacks: List[FallbackRecord]) -> CandidateResponse:
        if fallbacks:
            chosen = self.rng.choice(fallbacks)
            return CandidateResponse(
                content     = chosen.response,
                confidence  = thresholds.FALLBACK_CONFIDENCE,
                suggestions = text.generate_suggestions(context.topics),
            )

        return CandidateResponse(
            content     = prompts.NO_FALLBACK_RESPONSE,
            confidence  = thresholds.NO_FALLBACK_CONFIDENCE,
            suggestions = text.generate_suggestions(context.topics),
        )
