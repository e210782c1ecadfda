"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .chatbot_conversation import ChatbotConversation
from .chatbot_message import ChatbotMessage
from .chatbot_feedback import ChatbotFeedback

from .chatbot_pattern import ChatbotPattern, ChatbotTrigger
from .chatbot_fallback import ChatbotFallback
from .chatbot_learning import ChatbotLearning

from .website_context import WebsiteContext
from .site_setting import SiteSetting
from .product import Product

__all__ = [
    "ChatbotConversation",
    "ChatbotMessage",
    "ChatbotFeedback",
    "ChatbotPattern",
    "ChatbotTrigger",
    "ChatbotFallback",
    "ChatbotLearning",
    "WebsiteContext",
    "SiteSetting",
    "Product",
]
