"""Tests for the AI responder and the knowledge sections of its prompt."""

from unittest.mock import MagicMock

import pytest

from uniqbot.bot.config import prompts
from uniqbot.bot.schemas import ChatbotSettings, ConversationContext
from uniqbot.bot.services.ai_responder import AIResponder, ai_confidence
from uniqbot.bot.services.knowledge_context_service import KnowledgeContextService
from uniqbot.models import ChatbotConversation, ChatbotLearning, ChatbotMessage, WebsiteContext
from uniqbot.util.exceptions import CollaboratorUnavailableException

from conftest import assistant, user


LONG_REPLY = "You can return any unused item within 30 days of delivery. " * 3


def _knowledge(website_context="Website context unavailable.", learnings="", similar=""):
    knowledge = MagicMock()
    knowledge.website_context.return_value = website_context
    knowledge.recent_learnings.return_value = learnings
    knowledge.similar_questions.return_value = similar
    return knowledge


def _chat(reply=None, error=None):
    chat = MagicMock()
    if error is not None:
        chat.generate_response.side_effect = error
    else:
        chat.generate_response.return_value = reply
    return chat


def _context():
    return ConversationContext(topics=["returns"], session_id="s-1")


class TestConfidence:
    def test_base_only(self):
        assert ai_confidence("Website context unavailable.", "", "ok") == pytest.approx(0.6)

    def test_context_bonus(self):
        assert ai_confidence("x" * 150, "", "short") == pytest.approx(0.8)

    def test_all_bonuses_are_capped(self):
        assert ai_confidence("x" * 150, 'Q: "a"\nA: "b"', "y" * 150) == pytest.approx(0.95)


class TestAIResponder:
    def test_answer_and_confidence(self, settings):
        responder = AIResponder(_chat(LONG_REPLY), _knowledge(similar='Q: "a"\nA: "b"'))

        result = responder.respond("Can I return this?", [user("Can I return this?")], _context(), settings)

        assert result.content == LONG_REPLY.strip()
        assert result.confidence == pytest.approx(0.8)
        assert result.pattern_matched is None
        assert result.suggestions == ["How to return an item", "Refund policy", "Exchange process"]

    def test_provider_called_with_settings(self):
        chat = _chat("Sure.")
        settings = ChatbotSettings(openai_model="gpt-4o-mini", response_temperature=0.2, max_response_tokens=120)

        AIResponder(chat, _knowledge(), timeout=5).respond("hi", [user("hi")], _context(), settings)

        kwargs = chat.generate_response.call_args.kwargs
        assert kwargs == {"model": "gpt-4o-mini", "temperature": 0.2, "max_tokens": 120, "timeout": 5}

    def test_history_window_uses_setting(self):
        history = [user(f"question {i}") if i % 2 == 0 else assistant(f"answer {i}") for i in range(9)]
        settings = ChatbotSettings(max_conversation_length=3)

        prompt = AIResponder(_chat(), _knowledge()).build_prompt("question 8", history, _context(), settings)

        assert prompt.messages[0]["role"] == "system"
        assert [m["content"] for m in prompt.messages[1:]] == ["question 6", "answer 7", "question 8"]

    def test_history_window_is_capped_at_eight(self, settings):
        history = [user(f"question {i}") for i in range(20)]

        prompt = AIResponder(_chat(), _knowledge()).build_prompt("question 19", history, _context(), settings)

        assert len(prompt.messages) == 9
        assert prompt.messages[-1]["content"] == "question 19"

    def test_system_prompt_carries_knowledge(self, settings):
        knowledge = _knowledge(website_context="[SHIPPING] Shipping:\nFree over $50.", learnings='Q: "x"\nA: "y"')

        prompt = AIResponder(_chat(), knowledge).build_prompt("hi", [user("hi")], _context(), settings)

        system = prompt.messages[0]["content"]
        assert "Free over $50." in system
        assert 'Q: "x"' in system
        assert settings.chatbot_name in system

    def test_provider_error_is_unavailable(self, settings):
        responder = AIResponder(_chat(error=TimeoutError("timed out")), _knowledge())

        with pytest.raises(CollaboratorUnavailableException) as exc_info:
            responder.respond("hi", [user("hi")], _context(), settings)

        assert exc_info.value.collaborator == "ai"
        assert exc_info.value.status_code == 503

    def test_empty_completion_is_unavailable(self, settings):
        responder = AIResponder(_chat("   "), _knowledge())

        with pytest.raises(CollaboratorUnavailableException):
            responder.respond("hi", [user("hi")], _context(), settings)


class TestKnowledgeContextService:
    def test_unavailable_when_nothing_matches(self, db):
        assert KnowledgeContextService().website_context(["general"], "hello") == prompts.WEBSITE_CONTEXT_UNAVAILABLE

    def test_snippets_matched_by_topic_and_truncated(self, db):
        db.session.add_all([
            WebsiteContext(page="/shipping", title="Shipping", category="shipping",
                           content="A" * 250 + ". " + "B" * 100, keywords=["ship"]),
            WebsiteContext(page="/about", title="About", category="company",
                           content="We are a small team.", keywords=["about"]),
        ])
        db.session.commit()

        context = KnowledgeContextService().website_context(["shipping"], "hello")

        assert context == "[SHIPPING] Shipping:\n" + "A" * 250 + "."

    def test_keyword_match_adds_snippets(self, db):
        db.session.add_all([
            WebsiteContext(page="/shipping", title="Shipping", category="shipping",
                           content="Free shipping over $50.", keywords=["ship"]),
            WebsiteContext(page="/warranty", title="Warranty", category="policies",
                           content="Every item has a one year warranty.", keywords=["warranty"]),
            WebsiteContext(page="/hidden", title="Warranty draft", category="policies",
                           content="Old warranty text.", keywords=["warranty"], is_active=False),
        ])
        db.session.commit()

        context = KnowledgeContextService().website_context(["shipping"], "warranty on shipping?")

        assert "[SHIPPING] Shipping:" in context
        assert "[POLICIES] Warranty:" in context
        assert "Old warranty text." not in context

    def test_recent_learnings_only_use_implemented_answers(self, db):
        db.session.add_all([
            ChatbotLearning(user_message="Do you offer gift wrapping?", status="implemented",
                            expected_response="Yes, gift wrapping is available at checkout."),
            ChatbotLearning(user_message="Do you offer gift cards?", status="pending",
                            expected_response="Not yet."),
        ])
        db.session.commit()

        learnings = KnowledgeContextService().recent_learnings("Do you offer gift wrapping?")

        assert learnings == 'Q: "Do you offer gift wrapping?"\nA: "Yes, gift wrapping is available at checkout."'

    def test_similar_questions_from_well_rated_conversations(self, db):
        rated = ChatbotConversation(session_id="old", tags=["shipping"], satisfaction_rating=5)
        unrated = ChatbotConversation(session_id="other", tags=["shipping"])
        db.session.add_all([rated, unrated])
        db.session.flush()
        db.session.add_all([
            ChatbotMessage(conversation_id=rated.conversation_id, role="user", content="Do you ship to Canada?"),
            ChatbotMessage(conversation_id=rated.conversation_id, role="assistant", content="Yes, we ship to Canada."),
            ChatbotMessage(conversation_id=unrated.conversation_id, role="user", content="Shipping to Peru?"),
            ChatbotMessage(conversation_id=unrated.conversation_id, role="assistant", content="Yes."),
        ])
        db.session.commit()

        similar = KnowledgeContextService().similar_questions("shipping to canada?")

        assert similar == 'Q: "Do you ship to Canada?"\nA: "Yes, we ship to Canada."'

    def test_similar_questions_without_keywords(self, db):
        assert KnowledgeContextService().similar_questions("hi") == ""
