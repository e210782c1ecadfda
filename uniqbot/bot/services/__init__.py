"""
Bot Services Package

Exports all service classes used by BotController.

Service responsibilities:
  ChatTurnService: chat turn orchestrator (main entry point)
  ContextAnalyzer: topics and intent of the recent turns
  SettingsService: per-request chatbot settings snapshot
  KnowledgeService: active patterns and fallbacks (frozen table on DB failure)
  ProductCatalogService: product-search collaborator over the catalog
  ProductSearchAdapter: shopping-intent detection and product answers
  PatternMatcher: rule-based answer (product search, patterns, fallback)
  KnowledgeContextService: website context, learnings and similar answers for AI prompts
  AIResponder: AI answer from the configured provider
  ConversationService: conversation, message and feedback persistence
  LearningService: continuous-learning review queue
"""

from .turn_service import ChatTurnService
from .context_analyzer import ContextAnalyzer
from .settings_service import SettingsService
from .knowledge_service import KnowledgeService
from .product_catalog_service import ProductCatalogService
from .product_search_service import ProductSearchAdapter
from .pattern_matcher import PatternMatcher
from .knowledge_context_service import KnowledgeContextService
from .ai_responder import AIResponder
from .conversation_service import ConversationService
from .learning_service import LearningService

__all__ = [
    "ChatTurnService",
    "ContextAnalyzer",
    "SettingsService",
    "KnowledgeService",
    "ProductCatalogService",
    "ProductSearchAdapter",
    "PatternMatcher",
    "KnowledgeContextService",
    "AIResponder",
    "ConversationService",
    "LearningService",
]
