import pytest

from uniqbot.bot.schemas import CandidateResponse
from uniqbot.bot.services import response_arbiter
from uniqbot.bot.services.response_arbiter import arbitrate, should_call_ai


def rule(confidence, pattern="12"):
    return CandidateResponse("rule answer", confidence, pattern, ["Check order status"])


def ai(confidence):
    return CandidateResponse("ai answer", confidence, None, ["Track my order"])


class TestArbitrate:
    def test_confident_rule_wins(self):
        decision = arbitrate(rule(0.8), ai(0.95))

        assert decision.branch == response_arbiter.RULE_CONFIDENT
        assert decision.response.content == "rule answer"

    def test_rule_kept_when_ai_unavailable(self):
        decision = arbitrate(rule(0.2, None), None)

        assert decision.branch == response_arbiter.AI_UNAVAILABLE
        assert decision.response.confidence == pytest.approx(0.2)

    def test_rule_at_threshold_is_not_confident(self):
        assert arbitrate(rule(0.7), None).branch == response_arbiter.AI_UNAVAILABLE

    def test_confident_ai_wins(self):
        decision = arbitrate(rule(0.5), ai(0.8), threshold=0.75)

        assert decision.branch == response_arbiter.AI_CONFIDENT
        assert decision.response.content == "ai answer"

    def test_ai_at_threshold_is_confident(self):
        assert arbitrate(rule(0.5), ai(0.75), threshold=0.75).branch == response_arbiter.AI_CONFIDENT

    def test_custom_threshold(self):
        assert arbitrate(rule(0.5), ai(0.6), threshold=0.6).branch == response_arbiter.AI_CONFIDENT

    def test_hybrid_uses_ai_text_and_rule_tag(self):
        decision = arbitrate(rule(0.5), ai(0.6), threshold=0.75)

        assert decision.branch == response_arbiter.HYBRID
        assert decision.response.content == "ai answer"
        assert decision.response.confidence == pytest.approx(0.6)
        assert decision.response.pattern_matched == "12"
        assert decision.response.suggestions == ["Track my order"]

    def test_decent_rule(self):
        decision = arbitrate(rule(0.45), ai(0.4))

        assert decision.branch == response_arbiter.RULE_DECENT
        assert decision.response.content == "rule answer"

    def test_ai_fallback(self):
        decision = arbitrate(rule(0.2, None), ai(0.6))

        assert decision.branch == response_arbiter.AI_FALLBACK
        assert decision.response.content == "ai answer"


class TestShouldCallAI:
    def test_only_below_confident_rule(self):
        assert should_call_ai(rule(0.7))
        assert not should_call_ai(rule(0.71))
