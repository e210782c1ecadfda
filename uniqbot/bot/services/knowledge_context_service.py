"""
Service: KnowledgeContextService

Builds the three knowledge sections of the AI system prompt:

  website_context()   → up to 4 storefront snippets matched by topic, then keyword
  recent_learnings()  → up to 3 reviewed (implemented) learning entries as Q/A
  similar_questions() → up to 2 well-rated recent conversations sharing a tag

Every section degrades to its empty text when the database cannot be read;
the AI responder never fails because of missing context.
"""

# Python Packages
import logging
from typing import List, Sequence

from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.website_context import WebsiteContext
from ...models.chatbot_learning import ChatbotLearning
from ...models.chatbot_conversation import ChatbotConversation

# Config
from ..config import bot_config, prompts, thresholds

# Schemas
from ..schemas import ROLE_USER, ROLE_ASSISTANT

# Utils
from ...util import text
from ...util.clock import days_ago


logger = logging.getLogger(__name__)


class KnowledgeContextService:

    # ── Website Context ────────────────────────────────────────────────────────

    def website_context(self, topics: Sequence[str], message: str) -> str:
        try:
            contexts = self._find_website_contexts(topics, message)
        except Exception as exc:
            db.session.rollback()
            logger.warning("⚠️  Website context unavailable: %s", exc)
            return prompts.WEBSITE_CONTEXT_UNAVAILABLE

        if not contexts:
            return prompts.WEBSITE_CONTEXT_UNAVAILABLE

        return "\n\n".join(
            prompts.WEBSITE_CONTEXT_SNIPPET.format(
                category = context.category.upper(),
                title    = context.title,
                content  = text.truncate_at_sentence(
                    context.content,
                    bot_config.WEBSITE_CONTEXT_TRUNCATE_AT,
                    bot_config.WEBSITE_CONTEXT_MIN_CUT
                ),
            )
            for context in contexts
        )

    def _find_website_contexts(self, topics: Sequence[str], message: str) -> List[WebsiteContext]:
        active = (
            WebsiteContext.query
            .filter_by(is_active=True)
            .order_by(WebsiteContext.last_updated.desc())
            .all()
        )
        topic_set = set(topics)

        contexts = [
            context for context in active
            if context.category in topic_set or topic_set.intersection(context.keywords or [])
        ][:bot_config.WEBSITE_CONTEXT_PRIMARY_LIMIT]

        if message and len(contexts) < bot_config.WEBSITE_CONTEXT_MIN_BEFORE_EXTRA:
            message_keywords = text.extract_keywords(message)
            if message_keywords:
                first = message_keywords[0]
                extra = [
                    context for context in active
                    if set(message_keywords).intersection(context.keywords or [])
                    or first in context.content.lower()
                    or first in context.title.lower()
                ][:bot_config.WEBSITE_CONTEXT_SECONDARY_LIMIT]

                seen = {context.context_id for context in contexts}
                for context in extra:
                    if context.context_id not in seen:
                        contexts.append(context)
                        seen.add(context.context_id)

        return contexts[:bot_config.WEBSITE_CONTEXT_MAX_SNIPPETS]

    # ── Learnings ──────────────────────────────────────────────────────────────

    def recent_learnings(self, message: str) -> str:
        message_keywords = text.extract_keywords(message)

        conditions = [
            ChatbotLearning.user_message.ilike(
                f"%{message[:bot_config.RECENT_LEARNINGS_PREFIX_LENGTH]}%"
            )
        ]
        if message_keywords:
            conditions.append(ChatbotLearning.expected_response.ilike(f"%{message_keywords[0]}%"))

        try:
            learnings = (
                ChatbotLearning.query
                .filter(ChatbotLearning.status == "implemented")
                .filter(ChatbotLearning.expected_response.isnot(None))
                .filter(or_(*conditions))
                .order_by(ChatbotLearning.last_occurred.desc())
                .limit(bot_config.RECENT_LEARNINGS_LIMIT)
                .all()
            )
        except Exception as exc:
            db.session.rollback()
            logger.warning("⚠️  Recent learnings unavailable: %s", exc)
            return ""

        return "\n\n".join(
            prompts.QA_PAIR.format(question=learning.user_message, answer=learning.expected_response)
            for learning in learnings
        )

    # ── Similar Conversations ──────────────────────────────────────────────────

    def similar_questions(self, message: str) -> str:
        wanted = set(text.extract_keywords(message)[:bot_config.SIMILAR_CONVERSATIONS_KEYWORDS])
        if not wanted:
            return ""

        try:
            candidates = (
                ChatbotConversation.query
                .filter(ChatbotConversation.satisfaction_rating >= thresholds.HIGH_SATISFACTION_RATING)
                .filter(ChatbotConversation.started_at >= days_ago(bot_config.SIMILAR_CONVERSATIONS_DAYS))
                .order_by(ChatbotConversation.started_at.desc())
                .limit(bot_config.SIMILAR_CONVERSATIONS_SCAN_LIMIT)
                .all()
            )

            pairs = []
            for conversation in candidates:
                if not wanted.intersection(conversation.tags or []):
                    continue
                pair = self._first_exchange(conversation)
                if pair:
                    pairs.append(pair)
                if len(pairs) >= bot_config.SIMILAR_CONVERSATIONS_LIMIT:
                    break

        except Exception as exc:
            db.session.rollback()
            logger.warning("⚠️  Similar conversations unavailable: %s", exc)
            return ""

        return "\n\n".join(pairs)

    @staticmethod
    def _first_exchange(conversation: ChatbotConversation) -> str:
        opening = conversation.messages[:bot_config.SIMILAR_CONVERSATIONS_MESSAGES]
        question = next((m for m in opening if m.role == ROLE_USER), None)
        answer = next((m for m in opening if m.role == ROLE_ASSISTANT), None)
        if question and answer:
            return prompts.QA_PAIR.format(question=question.content, answer=answer.content)
        return ""
