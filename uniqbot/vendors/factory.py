"""
vendors/factory.py: AI Provider Factory
==========================================
Single place that decides which AI provider answers chat turns.

How to switch providers
------------------------
In your .env file, set:

    AI_PROVIDER=openai       ← use GPT models (default)
    AI_PROVIDER=anthropic    ← use Claude

That's the ONLY change needed to switch providers across the entire codebase.
The provider only counts as configured when its API key is set; without a
key the chat engine answers from rule patterns and product search alone.
"""

# Python Packages
import logging

# Constants
from ..base import constants


logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "anthropic")





def get_provider() -> str:
    return constants.AI_PROVIDER.lower().strip()


def is_ai_configured() -> bool:
    """
    True when AI_PROVIDER names a supported provider and that provider's
    API key is present.
    """

    provider = get_provider()

    if provider == "anthropic":
        return bool(constants.ANTHROPIC_API_KEY)

    if provider == "openai":
        return bool(constants.OPENAI_API_KEY)

    return False



def get_chat_service():
    """
    Return the correct ChatService instance based on AI_PROVIDER env variable.

    Returns:
        ChatService with a generate_response(messages, model, temperature, max_tokens, timeout) method.

    Raises:
        ValueError: If AI_PROVIDER is set to an unsupported value.
    """

    provider = get_provider()

    if provider == "anthropic":
        from .anthropic.chat_service import ChatService
        logger.debug("🤖 LLM Provider: Anthropic (%s)", constants.ANTHROPIC_DEFAULT_MODEL)
        return ChatService()

    elif provider == "openai":
        from .openai.chat_service import ChatService
        logger.debug("🤖 LLM Provider: OpenAI (%s)", constants.OPENAI_DEFAULT_MODEL)
        return ChatService()

    else:
        raise ValueError(
            f"Unsupported AI_PROVIDER='{provider}'. "
            f"Allowed values: {', '.join(SUPPORTED_PROVIDERS)}. "
            f"Check your .env file."
        )
