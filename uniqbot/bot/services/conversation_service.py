"""
Service: ConversationService

Creates conversations, records chat turns and stores feedback.

Data tables:
  chatbot_conversations → one row per chat session (newest wins on reuse)
  chatbot_messages      → one user + one assistant row per turn
  chatbot_feedback      → append-only ratings

Design:
  - get_or_create_conversation() is the only fatal write: without a
    conversation id the turn cannot be recorded at all.
  - record_turn() writes both messages and the conversation counters in one
    commit; a failure is logged and the turn is still answered.
  - All DB writes roll back on failure so a failed write never poisons the
    SQLAlchemy session for the caller's subsequent queries.
"""

# Python Packages
import logging
from typing import List, Optional, Tuple

# Database
from ...config.database import db

# Models
from ...models.chatbot_conversation import ChatbotConversation
from ...models.chatbot_message import ChatbotMessage
from ...models.chatbot_feedback import ChatbotFeedback

# Schemas
from ..schemas import ROLE_USER, ROLE_ASSISTANT, CandidateResponse

# Exceptions
from ...util.exceptions import CollaboratorUnavailableException, NotFoundException
from ...util import messages

# Utils
from ...util.clock import utcnow


logger = logging.getLogger(__name__)


class ConversationService:
    """
    Manages conversation sessions, message persistence and feedback.
    All methods are transaction-safe (rollback on failure).
    """

    # ── Session Management ─────────────────────────────────────────────────────

    def get_or_create_conversation(
        self,
        session_id: str,
        user_id: Optional[str] = None
    ) -> ChatbotConversation:
        """
        Return the newest conversation of *session_id* or create one.

        Raises:
            CollaboratorUnavailableException: the conversation could not be
                read or created.
        """
        try:
            conversation = (
                ChatbotConversation.query
                .filter_by(session_id=session_id)
                .order_by(ChatbotConversation.started_at.desc(), ChatbotConversation.conversation_id.desc())
                .first()
            )
            if conversation:
                return conversation

            conversation = ChatbotConversation(session_id=session_id, user_id=user_id, started_at=utcnow())
            db.session.add(conversation)
            db.session.commit()

            # Generated id is loaded here, not lazily by the caller
            db.session.refresh(conversation)

        except Exception as exc:
            db.session.rollback()
            logger.error("❌ Could not open conversation for session %s: %s", session_id, exc)
            raise CollaboratorUnavailableException("persistence", details=str(exc)) from exc

        logger.info("✅ New conversation created: %s", session_id)
        return conversation

    # ── Turn Persistence ───────────────────────────────────────────────────────

    def record_turn(
        self,
        conversation_id: int,
        user_message: str,
        response: CandidateResponse,
        topics: List[str],
        processing_time_ms: int
    ) -> Tuple[Optional[int], Optional[int]]:
        """
        Persist the user message, then the assistant message, and update the
        conversation: total_messages += 2, ended_at = now, tags = topics.

        Returns:
            (user_message_id, bot_message_id), or (None, None) on DB error.
        """
        try:
            now = utcnow()

            user_row = ChatbotMessage(
                conversation_id = conversation_id,
                role            = ROLE_USER,
                content         = user_message,
                timestamp       = now,
            )
            db.session.add(user_row)
            db.session.flush()

            bot_row = ChatbotMessage(
                conversation_id    = conversation_id,
                role               = ROLE_ASSISTANT,
                content            = response.content,
                timestamp          = utcnow(),
                pattern_matched    = response.pattern_matched,
                confidence         = response.confidence,
                processing_time_ms = processing_time_ms,
            )
            db.session.add(bot_row)

            conversation = db.session.get(ChatbotConversation, conversation_id)
            conversation.total_messages = (conversation.total_messages or 0) + 2
            conversation.ended_at = utcnow()
            conversation.tags = list(topics)

            db.session.commit()
            return user_row.message_id, bot_row.message_id

        except Exception as exc:
            db.session.rollback()
            logger.error("❌ record_turn failed (conversation_id=%s): %s", conversation_id, exc)
            return None, None

    # ── Feedback ───────────────────────────────────────────────────────────────

    def submit_feedback(
        self,
        conversation_id: int,
        rating: int,
        message_id: Optional[int] = None,
        comment: Optional[str] = None,
        feedback_type: Optional[str] = None
    ) -> ChatbotFeedback:
        """
        Append a feedback row. Without *message_id* the rating is also
        written to the conversation's satisfaction_rating.

        Raises:
            NotFoundException: unknown conversation, or a message that is not
                part of it.
        """
        conversation = db.session.get(ChatbotConversation, conversation_id)
        if conversation is None:
            raise NotFoundException(messages.ERROR["CONVERSATION_NOT_FOUND"])

        if message_id is not None:
            message = db.session.get(ChatbotMessage, message_id)
            if message is None or message.conversation_id != conversation_id:
                raise NotFoundException(messages.ERROR["MESSAGE_NOT_FOUND"])

        try:
            feedback = ChatbotFeedback(
                conversation_id = conversation_id,
                message_id      = message_id,
                rating          = rating,
                comment         = comment,
                feedback_type   = feedback_type,
            )
            db.session.add(feedback)

            if message_id is None:
                conversation.satisfaction_rating = rating

            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        logger.info("⭐ Feedback %s recorded for conversation %s", rating, conversation_id)
        return feedback
