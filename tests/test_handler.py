"""API tests for the chat namespace."""

from unittest.mock import MagicMock

import pytest

from uniqbot.models import ChatbotConversation, ChatbotFeedback, ChatbotLearning, ChatbotPattern
from uniqbot.util import messages


def _turn(client, body):
    return client.post("/chat/turn", json=body)


@pytest.fixture
def order_pattern(add_pattern):
    return add_pattern("You can track it from your account page.", ["order"])


class TestSubmitTurnEndpoint:
    def test_answers_turn(self, client, order_pattern, ai_disabled):
        response = _turn(client, {
            "session_id": "s-1",
            "user_id":    "u-1",
            "messages":   [{"role": "user", "content": "Where is my order?"}],
        })

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "success"
        assert body["data"]["response_text"] == "You can track it from your account page."
        assert body["data"]["confidence"] == pytest.approx(0.8)
        assert body["data"]["pattern_matched"] == str(order_pattern.pattern_id)
        assert body["data"]["conversation_id"] is not None
        assert ChatbotConversation.query.one().user_id == "u-1"

    def test_missing_messages(self, client):
        response = _turn(client, {"session_id": "s-1"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MISSING_MESSAGES"

    def test_last_message_must_be_from_user(self, client):
        response = _turn(client, {
            "session_id": "s-1",
            "messages":   [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "Hello!"}],
        })

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "LAST_MESSAGE_NOT_USER"

    def test_invalid_role(self, client):
        response = _turn(client, {"session_id": "s-1", "messages": [{"role": "system", "content": "hi"}]})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_MESSAGE"

    def test_missing_session(self, client):
        response = _turn(client, {"messages": [{"role": "user", "content": "hi"}]})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MISSING_SESSION_ID"

    def test_unsupported_currency(self, client):
        response = _turn(client, {
            "session_id": "s-1",
            "currency":   "XYZ",
            "messages":   [{"role": "user", "content": "hi"}],
        })

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "UNSUPPORTED_CURRENCY"

    def test_empty_body(self, client):
        response = client.post("/chat/turn", data="not json", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_REQUEST"

    def test_processing_failure_hides_details(self, client, monkeypatch, ai_disabled):
        def broken(self):
            raise RuntimeError("secret stack detail")

        monkeypatch.setattr("uniqbot.bot.services.knowledge_service.KnowledgeService.load", broken)

        response = _turn(client, {"session_id": "s-1", "messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 500
        body = response.get_json()
        assert body == {
            "status":     "error",
            "error_code": "PROCESSING_ERROR",
            "message":    messages.ERROR["TECHNICAL_DIFFICULTIES"],
        }
        assert ChatbotLearning.query.count() == 1

    def test_unexpected_error_returns_apology(self, client, monkeypatch):
        def broken(self, **kwargs):
            raise RuntimeError("secret stack detail")

        monkeypatch.setattr("uniqbot.bot.controller.BotController.submit_turn", broken)

        response = _turn(client, {"session_id": "s-1", "messages": [{"role": "user", "content": "hello"}]})

        assert response.status_code == 500
        assert response.get_json() == {
            "status":     "error",
            "error_code": "PROCESSING_ERROR",
            "message":    messages.ERROR["TECHNICAL_DIFFICULTIES"],
        }


class TestFeedbackEndpoint:
    def test_rates_conversation(self, client, order_pattern, ai_disabled):
        turn = _turn(client, {"session_id": "s-1", "messages": [{"role": "user", "content": "Where is my order?"}]})
        conversation_id = turn.get_json()["data"]["conversation_id"]

        response = client.put("/chat/feedback", json={"conversation_id": conversation_id, "rating": 5})

        assert response.status_code == 200
        assert response.get_json()["data"] == {"success": True}
        assert ChatbotConversation.query.one().satisfaction_rating == 5

    def test_rating_out_of_range(self, client):
        response = client.put("/chat/feedback", json={"conversation_id": 1, "rating": 6})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_RATING"

    def test_missing_fields(self, client):
        response = client.put("/chat/feedback", json={"rating": 4})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "MISSING_CONVERSATION_ID"

    def test_unknown_conversation(self, client):
        response = client.put("/chat/feedback", json={"conversation_id": 999, "rating": 4})

        assert response.status_code == 404

    def test_unknown_message(self, client, order_pattern, ai_disabled):
        turn = _turn(client, {"session_id": "s-1", "messages": [{"role": "user", "content": "Where is my order?"}]})
        conversation_id = turn.get_json()["data"]["conversation_id"]

        response = client.put(
            "/chat/feedback", json={"conversation_id": conversation_id, "message_id": 999, "rating": 2}
        )

        assert response.status_code == 404
        assert response.get_json()["message"] == messages.ERROR["MESSAGE_NOT_FOUND"]
        assert ChatbotFeedback.query.count() == 0


class TestKnowledgeEndpoints:
    def test_lists_patterns(self, client, order_pattern, add_fallback):
        add_fallback("Could you rephrase that?")

        response = client.get("/chat/patterns")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["patterns"][0]["triggers"] == ["order"]
        assert data["fallbacks"][0]["response"] == "Could you rephrase that?"

    def test_lists_learning_entries(self, client, db):
        db.session.add(ChatbotLearning(user_message="Do you sell gift cards?"))
        db.session.commit()

        response = client.get("/chat/learning?status=pending")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["total"] == 1
        assert data["entries"][0]["user_message"] == "Do you sell gift cards?"

    def test_invalid_learning_status_filter(self, client):
        response = client.get("/chat/learning?status=bogus")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_LEARNING_STATUS"

    def test_review_creates_pattern(self, client, db):
        entry = ChatbotLearning(user_message="Do you sell gift cards?")
        db.session.add(entry)
        db.session.commit()

        response = client.put(f"/chat/learning/{entry.learning_id}", json={
            "status":            "implemented",
            "expected_response": "Yes, gift cards are available from $10.",
            "reviewed_by":       "admin@uniqverse.com",
        })

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "implemented"
        assert ChatbotPattern.query.one().priority == 10

    def test_review_unknown_entry(self, client):
        response = client.put("/chat/learning/404", json={"status": "dismissed"})

        assert response.status_code == 404

    def test_auto_learn(self, client):
        response = client.post("/chat/learning/auto-learn", json={"days": 3})

        assert response.status_code == 200
        assert response.get_json()["data"] == {"processing_mode": "sync", "queued": 0}

    def test_auto_learn_in_background(self, client, monkeypatch):
        task = MagicMock()
        task.delay.return_value = MagicMock(id="task-1")
        monkeypatch.setattr("uniqbot.bot.controller.auto_learn_task", task)

        response = client.post("/chat/learning/auto-learn", json={"async": True})

        assert response.status_code == 200
        assert response.get_json()["data"] == {"processing_mode": "async", "task_id": "task-1"}
        task.delay.assert_called_once_with(7)

    def test_auto_learn_rejects_bad_days(self, client):
        response = client.post("/chat/learning/auto-learn", json={"days": 0})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_DAYS"

    def test_bulk_implement(self, client, db):
        answered = ChatbotLearning(user_message="Do you sell gift cards?", expected_response="Yes, from $10.")
        unanswered = ChatbotLearning(user_message="Can I pay with PayPal?")
        db.session.add_all([answered, unanswered])
        db.session.commit()

        response = client.post("/chat/learning/bulk-implement", json={
            "ids": [answered.learning_id, unanswered.learning_id],
        })

        assert response.status_code == 200
        assert response.get_json()["data"] == {"implemented": 1, "requested": 2}
        assert ChatbotPattern.query.count() == 1

    @pytest.mark.parametrize("ids", [[], ["1"], [True], "1", None])
    def test_bulk_implement_rejects_bad_ids(self, client, ids):
        response = client.post("/chat/learning/bulk-implement", json={"ids": ids})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_LEARNING_IDS"

    def test_analytics(self, client, order_pattern, ai_disabled):
        _turn(client, {"session_id": "s-1", "messages": [{"role": "user", "content": "Where is my order?"}]})

        response = client.get("/chat/learning/analytics")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["total_conversations"] == 1
        assert data["total_messages"] == 1
        assert data["pattern_stats"][0]["pattern_id"] == str(order_pattern.pattern_id)
        assert data["pattern_stats"][0]["avg_confidence"] == pytest.approx(0.8)
