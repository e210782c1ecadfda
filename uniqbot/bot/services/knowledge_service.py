"""
Service: KnowledgeService

Reads the curated knowledge the pattern matcher scores against.

Data tables:
  chatbot_patterns  → one row per canned answer (priority asc = higher precedence)
  chatbot_triggers  → ordered trigger phrases of a pattern
  chatbot_fallbacks → generic answers used when nothing matches

When the tables cannot be read the frozen table in
bot/config/knowledge_base.py is served instead, so the chat engine keeps
answering while the database is down.
"""

# Python Packages
import logging
from typing import List, Sequence, Tuple

# Database
from ...config.database import db

# Models
from ...models.chatbot_pattern import ChatbotPattern, ChatbotTrigger
from ...models.chatbot_fallback import ChatbotFallback

# Config
from ..config import knowledge_base

# Schemas
from ..schemas import PatternRecord, FallbackRecord


logger = logging.getLogger(__name__)


class KnowledgeService:
    """
    Loads active patterns and fallbacks as in-process records.
    ORM rows never leave this service.
    """

    # ── Loading ────────────────────────────────────────────────────────────────

    def load(self) -> Tuple[List[PatternRecord], List[FallbackRecord]]:
        """
        Return (active patterns sorted by priority, fallbacks).
        Falls back to the frozen table if either query fails.
        """
        try:
            patterns = (
                ChatbotPattern.query
                .filter_by(is_active=True)
                .order_by(ChatbotPattern.priority.asc(), ChatbotPattern.pattern_id.asc())
                .all()
            )
            fallbacks = ChatbotFallback.query.order_by(ChatbotFallback.fallback_id.asc()).all()

        except Exception as exc:
            db.session.rollback()
            logger.warning("⚠️  Knowledge tables unavailable, serving frozen table: %s", exc)
            return self.frozen_patterns(), self.frozen_fallbacks()

        return (
            [self._to_pattern_record(pattern) for pattern in patterns],
            [FallbackRecord(fallback_id=str(f.fallback_id), response=f.response) for f in fallbacks],
        )

    @staticmethod
    def frozen_patterns() -> List[PatternRecord]:
        return [
            PatternRecord(
                pattern_id = f"static-{index}",
                priority   = index,
                response   = response,
                triggers   = list(triggers),
            )
            for index, (triggers, response) in enumerate(knowledge_base.CHAT_PATTERNS)
        ]

    @staticmethod
    def frozen_fallbacks() -> List[FallbackRecord]:
        return [
            FallbackRecord(fallback_id=f"static-fallback-{index}", response=response)
            for index, response in enumerate(knowledge_base.FALLBACK_RESPONSES)
        ]

    # ── Writing ────────────────────────────────────────────────────────────────

    def create_pattern(self, response: str, triggers: Sequence[str], priority: int) -> ChatbotPattern:
        """
        Persist a new active pattern with its trigger phrases (order kept,
        blanks and duplicates dropped). Rolls back and re-raises on failure.
        """
        phrases = []
        for phrase in triggers:
            cleaned = (phrase or "").strip().lower()
            if cleaned and cleaned not in phrases:
                phrases.append(cleaned)

        try:
            pattern = ChatbotPattern(response=response, priority=priority, is_active=True)
            pattern.triggers = [ChatbotTrigger(phrase=phrase) for phrase in phrases]
            db.session.add(pattern)
            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        logger.info("✅ Pattern %s created with %d triggers", pattern.pattern_id, len(phrases))
        return pattern

    def seed_defaults(self) -> int:
        """
        Copy the frozen table into empty pattern/fallback tables.

        Returns:
            Number of rows inserted (0 when the tables already hold data).
        """
        if ChatbotPattern.query.first() or ChatbotFallback.query.first():
            return 0

        inserted = 0
        for priority, (triggers, response) in enumerate(knowledge_base.CHAT_PATTERNS):
            pattern = ChatbotPattern(response=response, priority=priority, is_active=True)
            pattern.triggers = [ChatbotTrigger(phrase=phrase) for phrase in triggers]
            db.session.add(pattern)
            inserted += 1

        for response in knowledge_base.FALLBACK_RESPONSES:
            db.session.add(ChatbotFallback(response=response))
            inserted += 1

        db.session.commit()
        logger.info("✅ Seeded %d knowledge rows", inserted)
        return inserted

    # ── Private ────────────────────────────────────────────────────────────────

    @staticmethod
    def _to_pattern_record(pattern: ChatbotPattern) -> PatternRecord:
        return PatternRecord(
            pattern_id = str(pattern.pattern_id),
            priority   = pattern.priority,
            response   = pattern.response,
            triggers   = [trigger.phrase for trigger in pattern.triggers],
            is_active  = pattern.is_active,
        )
