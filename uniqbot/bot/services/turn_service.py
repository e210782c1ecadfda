"""
Service: ChatTurnService

Main entry point of the chat engine. One call answers one chat turn:

    settings → context → rule answer (product search, patterns, fallback)
             → AI answer (only when the rule answer is not confident)
             → arbitration → persistence → learning queue

Failure handling:
  - conversation cannot be opened        → CollaboratorUnavailableException (fatal)
  - settings / knowledge / search errors → degraded inside each service
  - AI provider error or timeout         → treated as "AI unavailable"
  - message persistence error            → logged, answer still returned
  - anything else                        → queued for review, ProcessingException
"""

# Python Packages
import logging
import random
import time
from typing import List, Optional

# Schemas
from ..schemas import CandidateResponse, ChatbotSettings, ChatMessage, ConversationContext, TurnResult

# Services
from .context_analyzer import ContextAnalyzer
from .settings_service import SettingsService
from .knowledge_service import KnowledgeService
from .product_catalog_service import ProductCatalogService
from .product_search_service import ProductSearchAdapter
from .pattern_matcher import PatternMatcher
from .ai_responder import AIResponder
from .response_arbiter import AI_UNAVAILABLE, arbitrate, should_call_ai
from .conversation_service import ConversationService
from .learning_service import LearningService

# Config
from ..config import thresholds

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import CollaboratorUnavailableException, ProcessingException

# Utils
from ...util import currency as currency_util


logger = logging.getLogger(__name__)


class ChatTurnService:
    """
    Orchestrates a chat turn. Every collaborator can be injected; the
    defaults talk to the database and the configured AI provider.
    """

    def __init__(
        self,
        settings_service: Optional[SettingsService] = None,
        knowledge_service: Optional[KnowledgeService] = None,
        conversation_service: Optional[ConversationService] = None,
        learning_service: Optional[LearningService] = None,
        catalog=None,
        chat_service=None,
        rng: Optional[random.Random] = None
    ):
        rng = rng or random.Random()

        self.settings_service     = settings_service or SettingsService()
        self.knowledge_service    = knowledge_service or KnowledgeService()
        self.conversation_service = conversation_service or ConversationService()
        self.learning_service     = learning_service or LearningService(self.knowledge_service)
        self.context_analyzer     = ContextAnalyzer()
        self.pattern_matcher      = PatternMatcher(
            ProductSearchAdapter(catalog or ProductCatalogService(), rng),
            rng
        )
        self.chat_service = chat_service


    def submit_turn(
        self,
        session_id: str,
        messages: List[ChatMessage],
        user_id: Optional[str] = None,
        currency: str = currency_util.DEFAULT_CURRENCY
    ) -> TurnResult:
        """
        Answer the last (user) message of *messages* and record the turn.

        Args:
            session_id: Client session identifier.
            messages:   Validated conversation, oldest first, last one from the user.
            user_id:    Signed-in user, if any.
            currency:   Display currency for product prices.

        Raises:
            CollaboratorUnavailableException: conversation could not be opened.
            ProcessingException:              no answer could be produced.
        """
        started = time.perf_counter()
        conversation = self.conversation_service.get_or_create_conversation(session_id, user_id)
        conversation_id = conversation.conversation_id
        user_message = messages[-1].content

        try:
            settings = self.settings_service.load()
            context = self.context_analyzer.analyze(messages, session_id=session_id, user_id=user_id)
            patterns, fallbacks = self.knowledge_service.load()

            rule = self.pattern_matcher.match(
                user_message, context, settings, patterns, fallbacks, currency
            )

            ai = None
            if should_call_ai(rule):
                ai = self._ai_answer(user_message, messages, context, settings)

            decision = arbitrate(rule, ai, settings.confidence_threshold)

        except Exception as exc:
            logger.exception("❌ Chat turn failed for session %s", session_id)
            self.learning_service.log_unmatched_query(user_message)
            raise ProcessingException(details=str(exc)) from exc

        response = decision.response
        processing_time_ms = int((time.perf_counter() - started) * 1000)

        user_message_id, bot_message_id = self.conversation_service.record_turn(
            conversation_id,
            user_message,
            response,
            context.topics,
            processing_time_ms
        )

        if self._is_unmatched(decision.branch, response, settings):
            self.learning_service.log_unmatched_query(user_message)

        logger.info(
            "💬 Turn answered: session=%s branch=%s pattern=%s confidence=%.2f in %dms",
            session_id, decision.branch, response.pattern_matched, response.confidence, processing_time_ms
        )

        return TurnResult(
            response_text      = response.content,
            confidence         = response.confidence,
            pattern_matched    = response.pattern_matched,
            suggestions        = list(response.suggestions),
            conversation_id    = conversation_id,
            user_message_id    = user_message_id,
            bot_message_id     = bot_message_id,
            processing_time_ms = processing_time_ms,
        )

    # ── Private ────────────────────────────────────────────────────────────────

    def _ai_answer(
        self,
        user_message: str,
        messages: List[ChatMessage],
        context: ConversationContext,
        settings: ChatbotSettings
    ) -> Optional[CandidateResponse]:
        """AI candidate, or None when no provider is configured or the call failed."""

        chat_service = self.chat_service
        if chat_service is None:
            if not factory.is_ai_configured():
                return None
            try:
                chat_service = factory.get_chat_service()
            except Exception as exc:
                logger.warning("⚠️  AI provider could not be initialised: %s", exc)
                return None

        try:
            return AIResponder(chat_service).respond(user_message, messages, context, settings)
        except CollaboratorUnavailableException as exc:
            logger.warning("⚠️  AI response failed, falling back to rule-based: %s", exc.details)
            return None

    @staticmethod
    def _is_unmatched(branch: str, response: CandidateResponse, settings: ChatbotSettings) -> bool:
        return (
            settings.enable_learning
            and settings.track_unmatched
            and branch == AI_UNAVAILABLE
            and response.pattern_matched is None
            and response.confidence <= thresholds.UNMATCHED_CONFIDENCE_CEILING
        )
