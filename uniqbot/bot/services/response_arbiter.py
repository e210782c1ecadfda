"""
Response arbitration between the rule answer and the AI answer.

A strict priority chain; the first matching branch wins:

  1. RULE_CONFIDENT  rule > 0.7                         → rule (AI never called)
  2. AI_UNAVAILABLE  no AI answer                       → rule
  3. AI_CONFIDENT    ai >= threshold                    → ai
  4. HYBRID          rule > 0.3 and ai > 0.5            → ai text, max confidence, rule tag
  5. RULE_DECENT     rule > 0.4                         → rule
  6. AI_FALLBACK     otherwise                          → ai

The bands overlap, so the order of the checks is part of the behaviour.
"""

# Python Packages
from dataclasses import dataclass
from typing import Optional

# Config
from ..config import thresholds

# Schemas
from ..schemas import CandidateResponse


RULE_CONFIDENT = "RULE_CONFIDENT"
AI_UNAVAILABLE = "AI_UNAVAILABLE"
AI_CONFIDENT   = "AI_CONFIDENT"
HYBRID         = "HYBRID"
RULE_DECENT    = "RULE_DECENT"
AI_FALLBACK    = "AI_FALLBACK"


@dataclass(frozen=True)
class ArbiterDecision:
    branch: str
    response: CandidateResponse


def should_call_ai(rule: CandidateResponse) -> bool:
    return rule.confidence <= thresholds.RULE_CONFIDENT_THRESHOLD


def arbitrate(
    rule: CandidateResponse,
    ai: Optional[CandidateResponse],
    threshold: float = thresholds.DEFAULT_CONFIDENCE_THRESHOLD
) -> ArbiterDecision:
    """
    Pick the final answer. *ai* is None when no provider is configured or
    the provider call failed.
    """
    if rule.confidence > thresholds.RULE_CONFIDENT_THRESHOLD:
        return ArbiterDecision(RULE_CONFIDENT, rule)

    if ai is None:
        return ArbiterDecision(AI_UNAVAILABLE, rule)

    if ai.confidence >= threshold:
        return ArbiterDecision(AI_CONFIDENT, ai)

    if rule.confidence > thresholds.HYBRID_RULE_MIN and ai.confidence > thresholds.HYBRID_AI_MIN:
        return ArbiterDecision(
            HYBRID,
            CandidateResponse(
                content         = ai.content,
                confidence      = max(rule.confidence, ai.confidence),
                pattern_matched = rule.pattern_matched,
                suggestions     = list(ai.suggestions),
            )
        )

    if rule.confidence > thresholds.RULE_DECENT_THRESHOLD:
        return ArbiterDecision(RULE_DECENT, rule)

    return ArbiterDecision(AI_FALLBACK, ai)
