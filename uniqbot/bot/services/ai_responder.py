"""
Service: AIResponder

Asks the configured chat-completion provider for an answer when the rule
based answer is not confident enough.

Prompt layout:
  system    → company facts, website context, recent learnings, similar
              well-rated answers, conversation topics, guidelines
  history   → last min(max_conversation_length, 8) user/assistant turns

Confidence = 0.6
           + 0.2 if the website context is longer than 100 characters
           + 0.1 if similar well-rated answers were found
           + 0.1 if the answer is longer than 100 characters
           capped at 0.95.

Any provider error or timeout is raised as CollaboratorUnavailableException;
the turn service treats it as "AI unavailable" and keeps the rule answer.
"""

# Python Packages
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

# Config
from ..config import bot_config, prompts, thresholds

# Schemas
from ..schemas import (
    CHAT_ROLES,
    CandidateResponse,
    ChatbotSettings,
    ChatMessage,
    ConversationContext,
)

# Services
from .knowledge_context_service import KnowledgeContextService

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import CollaboratorUnavailableException

# Utils
from ...util import text


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AIPrompt:
    messages: List[Dict[str, str]]
    website_context: str
    similar_questions: str


def ai_confidence(website_context: str, similar_questions: str, content: str) -> float:
    confidence = thresholds.AI_BASE_CONFIDENCE
    if website_context and len(website_context) > thresholds.AI_CONTEXT_MIN_LENGTH:
        confidence += thresholds.AI_CONTEXT_BONUS
    if similar_questions:
        confidence += thresholds.AI_SIMILAR_BONUS
    if len(content) > thresholds.AI_RESPONSE_MIN_LENGTH:
        confidence += thresholds.AI_LENGTH_BONUS
    return min(confidence, thresholds.AI_MAX_CONFIDENCE)


class AIResponder:

    def __init__(
        self,
        chat_service,
        knowledge: Optional[KnowledgeContextService] = None,
        timeout: Optional[float] = constants.AI_REQUEST_TIMEOUT
    ):
        """
        Args:
            chat_service: Provider service with generate_response(messages, model,
                          temperature, max_tokens, timeout).
            knowledge:    Source of the prompt's knowledge sections.
            timeout:      Per-request budget in seconds for the provider call.
        """
        self.chat_service = chat_service
        self.knowledge = knowledge or KnowledgeContextService()
        self.timeout = timeout


    def build_prompt(
        self,
        message: str,
        history: List[ChatMessage],
        context: ConversationContext,
        settings: ChatbotSettings
    ) -> AIPrompt:
        website_context = self.knowledge.website_context(context.topics, message)
        recent_learnings = self.knowledge.recent_learnings(message)
        similar_questions = self.knowledge.similar_questions(message)

        system_prompt = prompts.SUPPORT_SYSTEM_PROMPT.format(
            chatbot_name      = settings.chatbot_name,
            company_info      = prompts.COMPANY_INFO,
            website_context   = website_context,
            recent_learnings  = recent_learnings,
            similar_questions = similar_questions,
            topics            = ", ".join(context.topics),
        )

        window = min(settings.max_conversation_length, bot_config.AI_HISTORY_HARD_CAP)
        turns = [m for m in history if m.role in CHAT_ROLES][-window:] if window > 0 else []

        return AIPrompt(
            messages          = [{"role": "system", "content": system_prompt}]
                                + [turn.to_llm_message() for turn in turns],
            website_context   = website_context,
            similar_questions = similar_questions,
        )


    def respond(
        self,
        message: str,
        history: List[ChatMessage],
        context: ConversationContext,
        settings: ChatbotSettings
    ) -> CandidateResponse:
        """
        Generate the AI answer for a turn.

        Raises:
            CollaboratorUnavailableException: provider failed, timed out or
                returned no text.
        """
        prompt = self.build_prompt(message, history, context, settings)

        try:
            content = self.chat_service.generate_response(
                prompt.messages,
                model       = settings.openai_model,
                temperature = settings.response_temperature,
                max_tokens  = settings.max_response_tokens,
                timeout     = self.timeout,
            )
        except Exception as exc:
            raise CollaboratorUnavailableException("ai", details=str(exc)) from exc

        content = (content or "").strip()
        if not content:
            raise CollaboratorUnavailableException("ai", details="empty completion")

        return CandidateResponse(
            content     = content,
            confidence  = ai_confidence(prompt.website_context, prompt.similar_questions, content),
            suggestions = text.generate_suggestions(context.topics),
        )
