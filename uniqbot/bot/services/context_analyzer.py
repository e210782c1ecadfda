"""
Service: ContextAnalyzer

Derives the conversation topics and the user intent from the trailing
turns of a chat. Pure: no database or network access.
"""

# Python Packages
from typing import List, Optional

# Config
from ..config import bot_config

# Schemas
from ..schemas import ChatMessage, ConversationContext

# Utils
from ...util import text


class ContextAnalyzer:

    def __init__(self, recent_turns: int = bot_config.CONTEXT_RECENT_TURNS):
        self.recent_turns = recent_turns


    def analyze(
        self,
        messages: List[ChatMessage],
        session_id: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> ConversationContext:
        """
        Build the ConversationContext for a turn.

        Topics and intent are read from the joined, lowercased content of the
        last *recent_turns* messages. Topics are never empty ("general").

        Args:
            messages:   Full message list of the request, oldest first.
            session_id: Caller hint; "unknown" when missing.
            user_id:    Caller hint.
        """
        recent = messages[-self.recent_turns:] if self.recent_turns else []
        conversation_text = " ".join(message.content for message in recent).lower()

        return ConversationContext(
            topics     = text.classify_topics(conversation_text),
            intent     = text.detect_intent(conversation_text),
            session_id = session_id or bot_config.UNKNOWN_SESSION_ID,
            user_id    = user_id,
            messages   = list(messages),
        )
