"""End-to-end tests for a chat turn against an in-memory database."""

import random
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from uniqbot.bot.schemas import ProductCard, ProductSearchResult
from uniqbot.bot.services.turn_service import ChatTurnService
from uniqbot.models import ChatbotConversation, ChatbotLearning, ChatbotMessage, SiteSetting
from uniqbot.util.exceptions import CollaboratorUnavailableException, ProcessingException

from conftest import assistant, user


AI_REPLY = (
    "Thanks for asking! We can look into that for you. Our team usually replies within "
    "one business day, and you can always reach us at support@uniqverse.com."
)


def _catalog(result=None):
    catalog = MagicMock()
    catalog.search.return_value = result or ProductSearchResult()
    return catalog


def _chat(reply=AI_REPLY, error=None):
    chat = MagicMock()
    if error is not None:
        chat.generate_response.side_effect = error
    else:
        chat.generate_response.return_value = reply
    return chat


def _service(**kwargs):
    kwargs.setdefault("catalog", _catalog())
    kwargs.setdefault("rng", random.Random(1))
    return ChatTurnService(**kwargs)


class TestSubmitTurn:
    def test_fallback_when_ai_unavailable(self, db, add_fallback, ai_disabled):
        add_fallback("Could you rephrase that?")

        result = _service().submit_turn("s-1", [user("xyzzy plugh")])

        assert result.response_text == "Could you rephrase that?"
        assert result.confidence == pytest.approx(0.2)
        assert result.pattern_matched is None
        assert result.suggestions == []
        assert result.user_message_id is not None
        assert result.bot_message_id is not None

        conversation = db.session.get(ChatbotConversation, result.conversation_id)
        assert conversation.total_messages == 2
        assert conversation.tags == ["general"]

        entry = ChatbotLearning.query.one()
        assert entry.user_message == "xyzzy plugh"
        assert entry.frequency == 1

    def test_unmatched_tracking_can_be_disabled(self, db, add_fallback, ai_disabled):
        add_fallback("Could you rephrase that?")
        db.session.add(SiteSetting(key="chatbot_track_unmatched", value="false"))
        db.session.commit()

        _service().submit_turn("s-1", [user("xyzzy plugh")])

        assert ChatbotLearning.query.count() == 0

    def test_confident_rule_skips_ai(self, db, add_pattern):
        pattern = add_pattern("You can track it from your account page.", ["order"])
        chat = _chat()

        result = _service(chat_service=chat).submit_turn("s-1", [user("Where is my order?")])

        assert result.response_text == "You can track it from your account page."
        assert result.confidence == pytest.approx(0.8)
        assert result.pattern_matched == str(pattern.pattern_id)
        chat.generate_response.assert_not_called()
        assert ChatbotLearning.query.count() == 0

    def test_confident_ai_answer(self, db, add_fallback):
        add_fallback("Could you rephrase that?")
        db.session.add(SiteSetting(key="chatbot_confidence_threshold", value="0.65"))
        db.session.commit()
        chat = _chat()

        result = _service(chat_service=chat).submit_turn(
            "s-1",
            [user("hi"), assistant("Hello! How can I help?"), user("xyzzy plugh")],
        )

        assert result.response_text == AI_REPLY
        assert result.confidence == pytest.approx(0.7)
        assert result.pattern_matched is None
        history = chat.generate_response.call_args.args[0]
        assert [m["role"] for m in history] == ["system", "user", "assistant", "user"]
        assert ChatbotLearning.query.count() == 0

        bot_row = db.session.get(ChatbotMessage, result.bot_message_id)
        assert bot_row.content == AI_REPLY
        assert bot_row.confidence == pytest.approx(0.7)

    def test_ai_failure_keeps_rule_answer(self, db, add_fallback):
        add_fallback("Could you rephrase that?")
        chat = _chat(error=TimeoutError("timed out"))

        result = _service(chat_service=chat).submit_turn("s-1", [user("xyzzy plugh")])

        assert result.response_text == "Could you rephrase that?"
        assert result.confidence == pytest.approx(0.2)
        assert ChatbotLearning.query.count() == 1

    def test_product_answer(self, db):
        card = ProductCard(name="Silk Scarf", slug="silk-scarf", category="Accessories", price=29.99)
        chat = _chat()

        result = _service(
            catalog      = _catalog(ProductSearchResult(products=[card])),
            chat_service = chat,
        ).submit_turn("s-1", [user("gift for my wife")], currency="EUR")

        assert result.pattern_matched == "product_search"
        assert result.confidence == pytest.approx(0.93)
        assert "€27.59" in result.response_text
        chat.generate_response.assert_not_called()

    def test_turns_of_a_session_share_a_conversation(self, db, add_fallback, ai_disabled):
        add_fallback("Could you rephrase that?")
        service = _service()

        first = service.submit_turn("s-1", [user("xyzzy")])
        second = service.submit_turn("s-1", [user("xyzzy"), assistant("Could you rephrase that?"), user("plugh")])

        assert first.conversation_id == second.conversation_id
        assert db.session.get(ChatbotConversation, first.conversation_id).total_messages == 4

    def test_processing_error_is_queued_and_raised(self, db):
        knowledge = MagicMock()
        knowledge.load.side_effect = RuntimeError("unexpected")

        with pytest.raises(ProcessingException) as exc_info:
            _service(knowledge_service=knowledge).submit_turn("s-1", [user("xyzzy plugh")])

        assert exc_info.value.status_code == 500
        assert ChatbotLearning.query.one().user_message == "xyzzy plugh"

    def test_conversation_failure_is_raised(self, db):
        conversations = MagicMock()
        conversations.get_or_create_conversation.side_effect = CollaboratorUnavailableException("persistence")

        with pytest.raises(CollaboratorUnavailableException):
            _service(conversation_service=conversations).submit_turn("s-1", [user("hello")])

    def test_answer_survives_database_outage_while_recording(self, db, add_fallback, ai_disabled, monkeypatch):
        add_fallback("Could you rephrase that?")
        service = _service()
        conversation_id = service.conversation_service.get_or_create_conversation("s-1").conversation_id

        real_rollback = Session.rollback

        def database_down(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("db down"))

        def rollback_then_stay_down(session):
            real_rollback(session)
            monkeypatch.setattr(Session, "execute", database_down)

        monkeypatch.setattr(Session, "commit", database_down)
        monkeypatch.setattr(Session, "rollback", rollback_then_stay_down)

        result = service.submit_turn("s-1", [user("xyzzy plugh")])

        assert result.response_text == "Could you rephrase that?"
        assert result.confidence == pytest.approx(0.2)
        assert result.conversation_id == conversation_id
        assert result.user_message_id is None
        assert result.bot_message_id is None
