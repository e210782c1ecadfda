"""
Service: LearningService

The continuous-learning queue (table chatbot_learning).

  log_unmatched_query()          → queue / re-count a question the bot could not answer
  list_entries()                 → review list, most frequent first
  review_entry()                 → set status; "implemented" + answer becomes a pattern
  auto_learn_from_conversations() → queue low-confidence answers from well-rated chats
  bulk_implement()                → turn every answered entry of a list into a pattern
  analytics()                     → 30-day usage report built from the turn telemetry

Pending entries are de-duplicated on the first 30 characters of the user
message, so rephrasings that share an opening are counted together.
"""

# Python Packages
import logging
from collections import Counter
from datetime import timedelta
from typing import Dict, List, Optional

from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.chatbot_learning import ChatbotLearning
from ...models.chatbot_conversation import ChatbotConversation
from ...models.chatbot_message import ChatbotMessage
from ...models.chatbot_pattern import ChatbotPattern

# Config
from ..config import bot_config, thresholds

# Schemas
from ..schemas import ROLE_USER, ROLE_ASSISTANT

# Services
from .knowledge_service import KnowledgeService

# Exceptions
from ...util.exceptions import NotFoundException, ValidationException
from ...util import messages

# Utils
from ...util import text
from ...util.clock import days_ago, utcnow


logger = logging.getLogger(__name__)


class LearningService:

    def __init__(self, knowledge_service: Optional[KnowledgeService] = None):
        self.knowledge_service = knowledge_service or KnowledgeService()


    # ── Queueing ───────────────────────────────────────────────────────────────

    def log_unmatched_query(self, user_message: str) -> Optional[ChatbotLearning]:
        """
        Increment the pending entry that contains the message's 30-character
        prefix, or insert a new one with frequency 1. Best-effort: errors are
        logged and None is returned.
        """
        if not user_message or not user_message.strip():
            return None

        prefix = user_message[:bot_config.LEARNING_DEDUP_PREFIX_LENGTH]

        try:
            entry = (
                ChatbotLearning.query
                .filter(ChatbotLearning.status == "pending")
                .filter(ChatbotLearning.user_message.contains(prefix, autoescape=True))
                .order_by(ChatbotLearning.learning_id.asc())
                .first()
            )

            if entry:
                entry.frequency = (entry.frequency or 0) + 1
                entry.last_occurred = utcnow()
            else:
                entry = ChatbotLearning(
                    user_message  = user_message,
                    frequency     = 1,
                    status        = "pending",
                    last_occurred = utcnow(),
                )
                db.session.add(entry)

            db.session.commit()

        except Exception as exc:
            db.session.rollback()
            logger.error("❌ Could not log unmatched query: %s", exc)
            return None

        logger.info("📚 Learning entry %s now seen %d time(s)", entry.learning_id, entry.frequency)
        return entry

    # ── Review ─────────────────────────────────────────────────────────────────

    def list_entries(self, status: Optional[str] = None) -> List[Dict]:
        query = ChatbotLearning.query
        if status and status != "all":
            query = query.filter(ChatbotLearning.status == status)

        entries = query.order_by(
            ChatbotLearning.frequency.desc(),
            ChatbotLearning.last_occurred.desc()
        ).all()
        return [entry.to_dict() for entry in entries]


    def review_entry(
        self,
        learning_id: int,
        status: str,
        expected_response: Optional[str] = None,
        reviewed_by: Optional[str] = None
    ) -> Dict:
        """
        Update a queue entry. Marking it "implemented" with an answer also
        creates a learned pattern (priority 10) whose triggers are the main
        phrases of the question plus its first three keywords.

        Raises:
            ValidationException: unknown status.
            NotFoundException:   unknown entry.
        """
        if status not in bot_config.LEARNING_STATUSES:
            raise ValidationException(
                messages.ERROR["INVALID_LEARNING_STATUS"].format(", ".join(bot_config.LEARNING_STATUSES))
            )

        entry = db.session.get(ChatbotLearning, learning_id)
        if entry is None:
            raise NotFoundException(messages.ERROR["LEARNING_NOT_FOUND"])

        try:
            if expected_response is not None:
                entry.expected_response = expected_response
            entry.status = status
            entry.reviewed_by = reviewed_by
            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        if status == "implemented" and entry.expected_response:
            self.knowledge_service.create_pattern(
                response = entry.expected_response,
                triggers = self.learned_triggers(entry.user_message),
                priority = bot_config.LEARNED_PATTERN_PRIORITY,
            )

        return entry.to_dict()

    def bulk_implement(self, learning_ids: List[int], reviewed_by: Optional[str] = None) -> int:
        """
        Mark every listed entry that carries an expected response as
        "implemented", creating its learned pattern. Unknown ids, entries
        without an answer and entries already implemented are skipped.

        Returns:
            Number of entries implemented.
        """
        implemented = 0
        for learning_id in learning_ids:
            entry = db.session.get(ChatbotLearning, learning_id)
            if entry is None or not entry.expected_response or entry.status == "implemented":
                continue

            self.review_entry(learning_id, "implemented", reviewed_by = reviewed_by)
            implemented += 1

        logger.info("📚 Bulk-implemented %d of %d learning entries", implemented, len(learning_ids))
        return implemented

    @staticmethod
    def learned_triggers(question: str) -> List[str]:
        triggers = text.extract_main_phrases(question)
        keywords = text.extract_keywords(question)
        if keywords:
            triggers.append(" ".join(keywords[:3]))
        return triggers

    # ── Auto-learning ──────────────────────────────────────────────────────────

    def auto_learn_from_conversations(self, days: int = bot_config.AUTO_LEARN_DAYS) -> int:
        """
        Queue every user → assistant pair answered below 0.7 confidence in
        conversations rated 4+ during the last *days* days. The assistant
        reply is kept as the expected response for the reviewer.

        Returns:
            Number of learning entries created or incremented.
        """
        conversations = (
            ChatbotConversation.query
            .filter(ChatbotConversation.satisfaction_rating >= thresholds.HIGH_SATISFACTION_RATING)
            .filter(ChatbotConversation.started_at >= days_ago(days))
            .all()
        )

        queued = 0
        try:
            for conversation in conversations:
                history = conversation.messages
                for question, answer in zip(history, history[1:]):
                    if question.role != ROLE_USER or answer.role != ROLE_ASSISTANT:
                        continue
                    if answer.confidence is None or answer.confidence >= thresholds.AUTO_LEARN_MAX_CONFIDENCE:
                        continue

                    entry = ChatbotLearning.query.filter_by(user_message=question.content).first()
                    if entry:
                        entry.frequency = (entry.frequency or 0) + 1
                        entry.last_occurred = utcnow()
                    else:
                        db.session.add(ChatbotLearning(
                            user_message      = question.content,
                            expected_response = answer.content,
                            frequency         = 1,
                            status            = "pending",
                            last_occurred     = utcnow(),
                        ))
                        db.session.flush()
                    queued += 1

            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        logger.info("📚 Auto-learning queued %d entries from %d conversations", queued, len(conversations))
        return queued

    # ── Analytics ──────────────────────────────────────────────────────────────

    def analytics(self) -> Dict:
        """
        Usage report over the last 30 days, read from what the turn recorder
        writes: conversation tags, assistant confidence, processing time and
        the matched pattern tag.
        """
        since = days_ago(bot_config.ANALYTICS_WINDOW_DAYS)

        avg_satisfaction, satisfaction_count = (
            db.session.query(
                func.avg(ChatbotConversation.satisfaction_rating),
                func.count(ChatbotConversation.satisfaction_rating)
            )
            .filter(ChatbotConversation.started_at >= since)
            .one()
        )

        avg_response_time = (
            db.session.query(func.avg(ChatbotMessage.processing_time_ms))
            .filter(ChatbotMessage.timestamp >= since)
            .filter(ChatbotMessage.role == ROLE_ASSISTANT)
            .scalar()
        )

        unmatched_queries = (
            ChatbotLearning.query
            .filter(ChatbotLearning.status == "pending")
            .filter(ChatbotLearning.last_occurred >= since)
            .count()
        )

        return {
            "total_conversations":   self._conversation_count(since),
            "total_messages":        self._user_message_count(since),
            "avg_satisfaction":      float(avg_satisfaction or 0),
            "satisfaction_count":    satisfaction_count,
            "avg_response_time_ms":  float(avg_response_time or 0),
            "top_topics":            self._top_topics(since),
            "unmatched_queries":     unmatched_queries,
            "weekly_trends":         self._weekly_trends(),
            "pattern_stats":         self._pattern_stats(since),
        }


    @staticmethod
    def _conversation_count(since, until=None) -> int:
        query = ChatbotConversation.query.filter(ChatbotConversation.started_at >= since)
        if until is not None:
            query = query.filter(ChatbotConversation.started_at < until)
        return query.count()


    @staticmethod
    def _user_message_count(since, until=None) -> int:
        query = (
            ChatbotMessage.query
            .filter(ChatbotMessage.role == ROLE_USER)
            .filter(ChatbotMessage.timestamp >= since)
        )
        if until is not None:
            query = query.filter(ChatbotMessage.timestamp < until)
        return query.count()


    @staticmethod
    def _top_topics(since) -> List[Dict]:
        counts = Counter()
        conversations = ChatbotConversation.query.filter(ChatbotConversation.started_at >= since).all()
        for conversation in conversations:
            counts.update(conversation.tags or [])

        return [
            {"topic": topic, "count": count}
            for topic, count in counts.most_common(bot_config.ANALYTICS_TOP_TOPICS)
        ]


    def _weekly_trends(self) -> List[Dict]:
        """ One bucket per week, oldest first; "Week 1" is the most recent... """

        now = utcnow()
        trends = []

        for week in range(bot_config.ANALYTICS_TREND_WEEKS):
            week_start = now - timedelta(days = 7 * (week + 1))
            week_end   = now - timedelta(days = 7 * week)

            avg_satisfaction = (
                db.session.query(func.avg(ChatbotConversation.satisfaction_rating))
                .filter(ChatbotConversation.started_at >= week_start)
                .filter(ChatbotConversation.started_at < week_end)
                .scalar()
            )

            trends.insert(0, {
                "week":             f"Week {week + 1}",
                "conversations":    self._conversation_count(week_start, week_end),
                "messages":         self._user_message_count(week_start, week_end),
                "avg_satisfaction": float(avg_satisfaction or 0),
            })

        return trends


    @staticmethod
    def _pattern_stats(since) -> List[Dict]:
        usage = (
            db.session.query(
                ChatbotMessage.pattern_matched,
                func.count(ChatbotMessage.message_id),
                func.avg(ChatbotMessage.confidence)
            )
            .filter(ChatbotMessage.timestamp >= since)
            .filter(ChatbotMessage.role == ROLE_ASSISTANT)
            .filter(ChatbotMessage.pattern_matched.isnot(None))
            .group_by(ChatbotMessage.pattern_matched)
            .all()
        )

        pattern_ids = [int(tag) for tag, _, _ in usage if tag.isdigit()]
        patterns = {
            str(pattern.pattern_id): pattern
            for pattern in ChatbotPattern.query.filter(ChatbotPattern.pattern_id.in_(pattern_ids)).all()
        } if pattern_ids else {}

        stats = []
        for tag, usage_count, avg_confidence in usage:
            pattern = patterns.get(tag)
            stats.append({
                "pattern_id":     tag,
                "response":       pattern.response[:bot_config.ANALYTICS_RESPONSE_PREVIEW] + "..." if pattern else "Unknown",
                "usage_count":    usage_count,
                "avg_confidence": float(avg_confidence or 0),
                "priority":       pattern.priority if pattern else 0,
            })

        return sorted(stats, key = lambda stat: stat["usage_count"], reverse = True)
