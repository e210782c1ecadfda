"""
vendors/__init__.py
====================
Public surface of the vendors package.

Provider-specific services:

    from ...vendors.openai import ChatService
    from ...vendors.anthropic import ChatService

Provider-agnostic (switches via AI_PROVIDER in .env):

    from ...vendors import ChatService, is_ai_configured

The chat engine only calls the provider when is_ai_configured() is true.
"""

from .factory import get_chat_service, is_ai_configured

# Factory function under a class-like name: ChatService() returns the
# configured provider's service instance.
ChatService = get_chat_service
