"""
In-process records passed between the chat engine services.

ORM rows never leave the service that loaded them; everything handed to
another component is one of these dataclasses, so every optional field is
explicit and nothing is an open-ended dict.
"""

# Python Packages
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

# Config
from .config import bot_config


ROLE_USER      = "user"
ROLE_ASSISTANT = "assistant"
CHAT_ROLES     = (ROLE_USER, ROLE_ASSISTANT)


def clamp_confidence(value: float) -> float:
    """Clamp a confidence score into [0, 1]."""
    return max(0.0, min(float(value), 1.0))


@dataclass(frozen = True)
class ChatMessage:
    role: str
    content: str

    def to_llm_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen = True)
class ConversationContext:
    """Topics and intent derived from the recent turns of a conversation."""

    topics: List[str]
    session_id: str
    intent: Optional[str] = None
    user_id: Optional[str] = None
    messages: List[ChatMessage] = field(default_factory = list)


@dataclass(frozen = True)
class PatternRecord:
    """An active curated pattern. Lower priority number = higher precedence."""

    pattern_id: str
    priority: int
    response: str
    triggers: List[str]
    is_active: bool = True


@dataclass(frozen = True)
class FallbackRecord:
    fallback_id: str
    response: str


@dataclass
class CandidateResponse:
    """
    A possible answer for the turn, produced by the pattern matcher, the
    product search adapter or the AI responder.
    """

    content: str
    confidence: float
    pattern_matched: Optional[str] = None
    suggestions: List[str] = field(default_factory = list)

    def __post_init__(self):
        self.confidence = clamp_confidence(self.confidence)


@dataclass(frozen = True)
class ProductCard:
    """A product as returned by the product-search collaborator (prices in USD)."""

    name: str
    slug: str
    category: str
    price: float
    image: Optional[str] = None
    compare_at_price: Optional[float] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None


@dataclass(frozen = True)
class ProductSearchResult:
    products: List[ProductCard] = field(default_factory = list)
    fallback_products: List[ProductCard] = field(default_factory = list)
    fallback_message: Optional[str] = None
    recommendation_message: str = ""


@dataclass(frozen = True)
class ChatbotSettings:
    """
    Per-request snapshot of the runtime settings. Built once per turn by
    SettingsService and passed explicitly to every component.
    """

    openai_model: str = bot_config.DEFAULT_CHATBOT_SETTINGS["openai_model"]
    response_temperature: float = bot_config.DEFAULT_CHATBOT_SETTINGS["response_temperature"]
    max_response_tokens: int = bot_config.DEFAULT_CHATBOT_SETTINGS["max_response_tokens"]
    confidence_threshold: float = bot_config.DEFAULT_CHATBOT_SETTINGS["confidence_threshold"]
    product_search_limit: int = bot_config.DEFAULT_CHATBOT_SETTINGS["product_search_limit"]
    fuzzy_search_tolerance: float = bot_config.DEFAULT_CHATBOT_SETTINGS["fuzzy_search_tolerance"]
    enable_product_search: bool = bot_config.DEFAULT_CHATBOT_SETTINGS["enable_product_search"]
    show_product_images: bool = bot_config.DEFAULT_CHATBOT_SETTINGS["show_product_images"]
    fallback_products: bool = bot_config.DEFAULT_CHATBOT_SETTINGS["fallback_products"]
    enable_learning: bool = bot_config.DEFAULT_CHATBOT_SETTINGS["enable_learning"]
    track_unmatched: bool = bot_config.DEFAULT_CHATBOT_SETTINGS["track_unmatched"]
    chatbot_name: str = bot_config.DEFAULT_CHATBOT_SETTINGS["chatbot_name"]
    max_conversation_length: int = bot_config.DEFAULT_CHATBOT_SETTINGS["max_conversation_length"]

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


@dataclass(frozen = True)
class TurnResult:
    """What submit_turn hands back to the caller."""

    response_text: str
    confidence: float
    suggestions: List[str]
    conversation_id: int
    user_message_id: Optional[int]
    bot_message_id: Optional[int]
    processing_time_ms: int
    pattern_matched: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "response_text":      self.response_text,
            "confidence":         self.confidence,
            "pattern_matched":    self.pattern_matched,
            "suggestions":        list(self.suggestions),
            "conversation_id":    self.conversation_id,
            "user_message_id":    self.user_message_id,
            "bot_message_id":     self.bot_message_id,
            "processing_time_ms": self.processing_time_ms,
        }
