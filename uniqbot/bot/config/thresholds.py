"""
thresholds.py: Confidence Scores & Arbitration Thresholds
===========================================================
Numerical limits that control pattern scoring, product-search triggering,
AI confidence and the rule/AI arbitration chain. Kept separate from
prompts and keyword lists so a developer can tune these values in isolation.

Arbitration (evaluated strictly in this order, first match wins):
  rule >  RULE_CONFIDENT_THRESHOLD                          → rule
  AI unavailable or failed                                  → rule
  ai   >= settings.confidence_threshold                     → ai
  rule >  HYBRID_RULE_MIN  and  ai > HYBRID_AI_MIN          → hybrid
  rule >  RULE_DECENT_THRESHOLD                             → rule
  otherwise                                                 → ai

The bands overlap on purpose; reordering the checks changes answers.
"""

# ── Pattern Scoring ────────────────────────────────────────────────────────────
PATTERN_DIRECT_MATCH_SCORE  = 10    # any trigger phrase is a substring of the message
PATTERN_KEYWORD_MATCH_SCORE = 2     # per keyword shared with the trigger phrases
PATTERN_TOPIC_BONUS_SCORE   = 3     # a conversation topic appears in the pattern
PATTERN_SCORE_NORMALIZER    = 15    # confidence = min(score / 15, 1)

FALLBACK_CONFIDENCE         = 0.2   # random fallback response
NO_FALLBACK_CONFIDENCE      = 0.1   # nothing configured at all

# ── Product Search ─────────────────────────────────────────────────────────────
PRODUCT_SEARCH_MIN_SCORE            = 6     # below this the adapter is not triggered
PRODUCT_SEARCH_BYPASS_CONFIDENCE    = 0.5   # above this, pattern scoring is skipped
PRODUCT_SEARCH_BASE_CONFIDENCE      = 0.75  # + score / 100
PRODUCT_SEARCH_MAX_CONFIDENCE       = 0.95
PRODUCT_SEARCH_FALLBACK_CONFIDENCE  = 0.65
PRODUCT_SEARCH_NO_RESULTS_CONFIDENCE = 0.6

# ── AI Responder ───────────────────────────────────────────────────────────────
AI_BASE_CONFIDENCE          = 0.6
AI_CONTEXT_BONUS            = 0.2   # website context longer than AI_CONTEXT_MIN_LENGTH
AI_SIMILAR_BONUS            = 0.1   # similar high-satisfaction answers were found
AI_LENGTH_BONUS             = 0.1   # response longer than AI_RESPONSE_MIN_LENGTH
AI_MAX_CONFIDENCE           = 0.95
AI_CONTEXT_MIN_LENGTH       = 100
AI_RESPONSE_MIN_LENGTH      = 100

# ── Arbitration ────────────────────────────────────────────────────────────────
RULE_CONFIDENT_THRESHOLD    = 0.7   # above this the AI is never called
HYBRID_RULE_MIN             = 0.3
HYBRID_AI_MIN               = 0.5
RULE_DECENT_THRESHOLD       = 0.4
DEFAULT_CONFIDENCE_THRESHOLD = 0.75 # settings.confidence_threshold default

# ── Learning ───────────────────────────────────────────────────────────────────
# A turn whose final confidence is at or below this was answered by a plain
# fallback and is queued for review when tracking is enabled.
UNMATCHED_CONFIDENCE_CEILING = FALLBACK_CONFIDENCE

# Satisfaction rating that marks a conversation as a good example.
HIGH_SATISFACTION_RATING    = 4

# Auto-learning only queues answers that were given below this confidence.
AUTO_LEARN_MAX_CONFIDENCE   = 0.7
