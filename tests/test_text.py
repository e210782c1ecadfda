"""Tests for the shared text helpers and the context analyzer."""

from uniqbot.bot.services.context_analyzer import ContextAnalyzer
from uniqbot.util import text

from conftest import assistant, user


class TestExtractKeywords:
    def test_drops_stop_words_short_words_and_punctuation(self):
        assert text.extract_keywords("Where is my order?") == ["where", "order"]

    def test_keeps_order_and_duplicates(self):
        assert text.extract_keywords("order, order status") == ["order", "order", "status"]

    def test_empty_text(self):
        assert text.extract_keywords("") == []
        assert text.extract_keywords(None) == []


class TestClassifyTopics:
    def test_general_when_nothing_matches(self):
        assert text.classify_topics("hello there") == ["general"]

    def test_reports_topics_in_table_order(self):
        assert text.classify_topics("my refund and shipping") == ["shipping", "returns"]

    def test_substring_matching(self):
        assert "orders" in text.classify_topics("I ordered yesterday")


class TestDetectIntent:
    def test_question_mark_is_seeking_help(self):
        assert text.detect_intent("Can you help?") == "seeking_help"

    def test_complaint(self):
        assert text.detect_intent("I have a problem") == "complaint"

    def test_gratitude(self):
        assert text.detect_intent("thanks a lot") == "gratitude"

    def test_no_intent(self):
        assert text.detect_intent("hello") is None


class TestTruncateAtSentence:
    def test_short_text_unchanged(self):
        assert text.truncate_at_sentence("Short.", 300, 200) == "Short."

    def test_cuts_after_late_sentence_end(self):
        content = "A" * 250 + ". " + "B" * 100
        assert text.truncate_at_sentence(content, 300, 200) == "A" * 250 + "."

    def test_hard_cut_when_sentence_end_is_early(self):
        content = "A" * 150 + ". " + "B" * 200
        assert text.truncate_at_sentence(content, 300, 200) == content[:300] + "..."


class TestSuggestions:
    def test_capped_at_three(self):
        suggestions = text.generate_suggestions(["shipping", "returns"])
        assert suggestions == ["Track my order", "Shipping costs and times", "International shipping"]

    def test_unknown_topics_give_nothing(self):
        assert text.generate_suggestions(["general"]) == []


class TestMainPhrases:
    def test_skips_question_openers_and_short_runs(self):
        assert text.extract_main_phrases("How do I change my address?") == [
            "do i change",
            "do i change my",
            "do i change my address",
            "i change",
            "i change my",
        ]

    def test_empty(self):
        assert text.extract_main_phrases("") == []


class TestContextAnalyzer:
    def test_only_recent_turns_are_read(self):
        messages = [
            user("I want a refund"),
            assistant("Sure, what was the refund for?"),
            user("hello"),
            assistant("hi"),
            user("hello again"),
            assistant("hi again"),
            user("thanks"),
        ]
        context = ContextAnalyzer().analyze(messages, session_id="s-1")

        assert context.topics == ["general"]
        assert context.intent == "gratitude"
        assert context.session_id == "s-1"
        assert context.messages == messages

    def test_unknown_session_and_user_hint(self):
        context = ContextAnalyzer().analyze([user("Where is my order?")], user_id="u-9")

        assert context.session_id == "unknown"
        assert context.user_id == "u-9"
        assert context.topics == ["orders"]
        assert context.intent == "seeking_help"
