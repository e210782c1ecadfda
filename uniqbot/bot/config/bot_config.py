"""
bot_config.py: API-Level Bot Settings
=======================================
Windows, limits and defaults for the chat engine.

Runtime-editable settings (model, temperature, feature flags, …) are stored
as `chatbot_*` rows in site_settings and loaded per request by
SettingsService; DEFAULT_CHATBOT_SETTINGS below are used for any key that is
missing, and for everything when the settings table cannot be read.
"""

# ── Context Analysis ───────────────────────────────────────────────────────────
# Number of trailing turns the topic/intent analysis looks at.
CONTEXT_RECENT_TURNS = 5

# Session id reported when the caller gives no hint.
UNKNOWN_SESSION_ID = "unknown"

# ── AI Prompt Windows ──────────────────────────────────────────────────────────
# Hard cap on history turns sent to the model, whatever max_conversation_length says.
AI_HISTORY_HARD_CAP = 8

WEBSITE_CONTEXT_PRIMARY_LIMIT    = 5    # snippets matched by topic
WEBSITE_CONTEXT_SECONDARY_LIMIT  = 3    # extra snippets matched by message keyword
WEBSITE_CONTEXT_MAX_SNIPPETS     = 4
WEBSITE_CONTEXT_MIN_BEFORE_EXTRA = 3    # look for keyword matches below this count
WEBSITE_CONTEXT_TRUNCATE_AT      = 300
WEBSITE_CONTEXT_MIN_CUT          = 200  # sentence cut must land after this index

RECENT_LEARNINGS_LIMIT           = 3
RECENT_LEARNINGS_PREFIX_LENGTH   = 20

SIMILAR_CONVERSATIONS_LIMIT      = 2
SIMILAR_CONVERSATIONS_DAYS       = 30
SIMILAR_CONVERSATIONS_KEYWORDS   = 3    # first N message keywords compared against tags
SIMILAR_CONVERSATIONS_SCAN_LIMIT = 50   # candidate rows inspected for a tag overlap
SIMILAR_CONVERSATIONS_MESSAGES   = 4

# ── Learning Queue ─────────────────────────────────────────────────────────────
# Pending entries are de-duplicated on this many leading characters.
LEARNING_DEDUP_PREFIX_LENGTH = 30

LEARNING_STATUSES = ("pending", "implemented", "needs_improvement", "dismissed")

# Priority given to patterns created from reviewed learning entries.
LEARNED_PATTERN_PRIORITY = 10

AUTO_LEARN_DAYS = 7

# ── Learning Analytics ─────────────────────────────────────────────────────────
ANALYTICS_WINDOW_DAYS      = 30
ANALYTICS_TREND_WEEKS      = 4
ANALYTICS_TOP_TOPICS       = 10
ANALYTICS_RESPONSE_PREVIEW = 100   # characters of a pattern response shown in stats

# ── Feedback ───────────────────────────────────────────────────────────────────
MIN_RATING = 1
MAX_RATING = 5

# ── Request Limits ─────────────────────────────────────────────────────────────
MAX_MESSAGE_LENGTH = 4000

# ── Runtime Settings Defaults ──────────────────────────────────────────────────
SETTINGS_KEY_PREFIX = "chatbot_"

DEFAULT_CHATBOT_SETTINGS = {
    "openai_model":            "gpt-3.5-turbo",
    "response_temperature":    0.7,
    "max_response_tokens":     500,
    "confidence_threshold":    0.75,
    "product_search_limit":    6,
    "fuzzy_search_tolerance":  0.6,
    "enable_product_search":   True,
    "show_product_images":     True,
    "fallback_products":       True,
    "enable_learning":         True,
    "track_unmatched":         True,
    "chatbot_name":            "UniQVerse AI Support",
    "max_conversation_length": 50,
}
