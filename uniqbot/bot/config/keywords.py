"""
keywords.py: All Keyword Lists, Patterns & Detection Signals
=============================================================
Every word list, phrase set, and signal pattern used across the bot
services lives here. Services import from this file, never inline lists.

How to extend:
  - Add a new conversation topic to TOPIC_KEYWORDS
  - Tune shopping-intent detection in PRODUCT_SEARCH_INTENT_GROUPS
  - Add catalog vocabulary to CATALOG_* dictionaries
"""

# ── Stop Words ─────────────────────────────────────────────────────────────────
# Dropped by extract_keywords() before any keyword comparison.
STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
    "be", "been", "being", "in", "on", "at", "to", "for", "with", "about", "by",
    "of", "from", "up", "down", "that", "this", "these", "those", "them", "they",
    "their", "i", "me", "my", "mine", "you", "your", "yours", "he", "him", "his",
    "she", "her", "hers", "it", "its", "do", "does", "did", "have", "has", "had",
    "would", "could", "should",
})

# Keywords shorter than or equal to this are ignored.
KEYWORD_MIN_LENGTH = 2

# ── Conversation Topics ────────────────────────────────────────────────────────
# A topic applies when ANY of its keywords appears anywhere in the recent text.
# Order matters only for the order topics are reported in.
TOPIC_KEYWORDS = {
    "product_search": ["gift", "present", "buy", "shopping", "find", "looking", "recommend",
                       "wife", "husband", "mother", "father"],
    "shipping":       ["ship", "delivery", "shipping", "deliver", "tracking", "arrived"],
    "returns":        ["return", "refund", "exchange", "send back", "defective"],
    "orders":         ["order", "purchase", "buy", "cart", "checkout", "payment"],
    "account":        ["account", "login", "password", "register", "profile"],
    "products":       ["product", "item", "size", "color", "availability", "stock"],
    "technical":      ["error", "bug", "not working", "broken", "issue", "problem"],
    "pricing":        ["price", "cost", "discount", "coupon", "sale", "promotion"],
}

DEFAULT_TOPIC = "general"

# ── User Intent ────────────────────────────────────────────────────────────────
# First matching intent wins; the list is in priority order.
INTENT_SIGNALS = [
    ("seeking_help", ["help", "?"]),
    ("complaint",    ["complaint", "problem"]),
    ("gratitude",    ["thank"]),
]

# ── Follow-up Suggestions ──────────────────────────────────────────────────────
SUGGESTIONS_BY_TOPIC = {
    "shipping": ["Track my order", "Shipping costs and times", "International shipping"],
    "returns":  ["How to return an item", "Refund policy", "Exchange process"],
    "orders":   ["Check order status", "Modify my order", "Payment issues"],
    "account":  ["Reset my password", "Update account info", "Delete account"],
}

MAX_SUGGESTIONS = 3

# ── Product Search Intent ──────────────────────────────────────────────────────
# Score = Σ weight × (number of phrases in the group found in the message).
# Phrases are plain substrings, so "women" also counts "men".
PRODUCT_SEARCH_INTENT_GROUPS = [
    (["gift", "gifts", "present"], 10),
    (["wife", "husband", "girlfriend", "boyfriend"], 8),
    (["anniversary", "birthday", "christmas", "valentine"], 8),
    (["find", "looking for", "can you find", "help me find"], 7),
    (["product", "products", "best product", "best products"], 7),
    (["recommend", "recommendation", "suggest", "suggestion"], 6),
    (["buy", "shopping", "shop", "purchase"], 5),
    (["best", "top", "popular"], 4),
    (["men", "women", "male", "female", "him", "her"], 3),
]

PRODUCT_SEARCH_SUGGESTIONS = [
    "Tell me more about these products",
    "Show me different price ranges",
    "Find products in specific categories",
    "Help me narrow down choices",
]

PRODUCT_SEARCH_FALLBACK_SUGGESTIONS = [
    "Try different search terms",
    "Browse by category",
    "Show me popular products",
    "Help with gift ideas",
]

PRODUCT_SEARCH_NO_RESULTS_SUGGESTIONS = [
    "Browse all products",
    "Show me popular categories",
    "Help me with gift ideas",
    "Contact support for help",
]

# Pool the no-results answer samples its tips from.
SEARCH_TIP_POOL = [
    "Try broader terms (e.g., 'clothing' instead of 'vintage denim jacket')",
    "Use different keywords (e.g., 'sneakers' instead of 'athletic footwear')",
    "Search by occasion (e.g., 'wedding', 'party', 'casual', 'work')",
    "Try category names (e.g., 'electronics', 'home decor', 'beauty')",
    "Look for gift ideas (e.g., 'gifts for mom', 'anniversary presents')",
]

SEARCH_TIPS_SAMPLE_SIZE = 3

# ── Catalog Search Vocabulary ──────────────────────────────────────────────────
# Used by ProductCatalogService to turn a free-text query into criteria.
CATALOG_CATEGORY_TERMS = {
    "clothing":    ["clothes", "clothing", "apparel", "wear", "outfit", "dress", "shirt", "pants",
                    "top", "garment", "blazer", "jacket", "sweater", "blouse", "skirt", "jeans",
                    "hoodie", "coat"],
    "accessories": ["accessories", "accessory", "jewelry", "jewellery", "bag", "handbag", "purse",
                    "wallet", "belt", "watch", "necklace", "earrings", "bracelet", "scarf", "hat",
                    "sunglasses"],
    "shoes":       ["shoes", "shoe", "footwear", "sneakers", "boots", "sandals", "heels", "flats",
                    "loafers", "slippers"],
    "electronics": ["electronics", "electronic", "gadget", "tech", "device", "phone", "laptop",
                    "computer", "tablet", "headphones"],
    "home":        ["home", "household", "decor", "decoration", "furniture", "kitchen", "bedroom",
                    "living room", "bathroom"],
    "beauty":      ["beauty", "makeup", "cosmetics", "skincare", "fragrance", "perfume", "lipstick"],
    "sports":      ["sports", "sport", "fitness", "gym", "exercise", "workout", "running", "yoga"],
}

# Recipient words imply a gender before the generic gender scan runs.
CATALOG_RECIPIENT_GENDER = [
    (["wife", "girlfriend", "spouse"], "female"),
    (["husband", "boyfriend"], "male"),
    (["mother", "mom", "mama"], "female"),
    (["father", "dad", "papa"], "male"),
]

# "female" is checked before "male" so "women" is not read as "men".
CATALOG_GENDER_TERMS = {
    "female": ["women", "female", "woman", "womens", "lady", "ladies", "her", "hers",
               "girlfriend", "mother", "mom", "sister", "daughter", "girl"],
    "male":   ["men", "male", "man", "mens", "guy", "guys", "him", "his", "boyfriend",
               "father", "dad", "brother", "son", "boy"],
    "unisex": ["unisex", "everyone", "anyone", "family", "couple"],
}

CATALOG_PRICE_TERMS = {
    "budget":    ["cheap", "affordable", "budget", "inexpensive", "low cost", "bargain", "under",
                  "economical"],
    "mid-range": ["reasonable", "moderate", "fair price", "decent", "good value", "medium price"],
    "luxury":    ["expensive", "luxury", "premium", "high end", "designer", "exclusive", "upscale"],
}

# Words dropped from catalog keyword searches on top of the regular stop words.
CATALOG_STOP_WORDS = frozenset({
    "want", "need", "looking", "find", "search", "help", "please", "can", "some", "any",
    "gift", "gifts", "present", "recommend", "suggest", "buy", "shop", "shopping",
    "best", "top", "popular", "product", "products", "under",
})
