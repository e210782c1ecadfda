""" Anthropic Vendor Package... """

# Services
from .anthropic_client import AnthropicClient
from .chat_service import ChatService

__all__ = ['AnthropicClient', 'ChatService']
