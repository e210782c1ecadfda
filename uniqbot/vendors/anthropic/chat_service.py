"""
vendors/anthropic/chat_service.py
===================================
ChatService implementation using Anthropic Claude models.

Implements the same interface as vendors/openai/chat_service.py so the
factory can swap providers transparently.

Key difference from OpenAI:
  Anthropic separates the system prompt from the messages array and the
  conversation must open with a "user" turn. Callers always pass messages
  in the OpenAI format (system role inside messages array) and this service
  converts them before calling the Anthropic API.
"""

# Python Packages
import logging
from typing import List, Dict, Optional

# Client
from .anthropic_client import AnthropicClient

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class ChatService:
    """
    Anthropic Claude implementation of ChatService.
    Drop-in replacement for vendors/openai/chat_service.py.
    """

    def __init__(self):
        self.client        = AnthropicClient().get_client()
        self.default_model = constants.ANTHROPIC_DEFAULT_MODEL


    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
        timeout: Optional[float] = None
    ) -> str:
        """
        Generate a response using the Anthropic Claude API.

        The *model* argument is only honoured when it names a Claude model;
        the runtime setting stores an OpenAI model name by default.

        Args:
            messages:    List of message dicts with 'role' and 'content'.
            model:       Claude model string. Defaults to ANTHROPIC_DEFAULT_MODEL.
            temperature: Sampling temperature (0.0 – 1.0).
            max_tokens:  Maximum tokens in response.
            timeout:     Per-request timeout in seconds.

        Returns:
            Generated response text as a string.
        """

        system_prompt, conversation = self._split_messages(messages)

        kwargs = dict(
            model       = model if model and model.startswith("claude") else self.default_model,
            max_tokens  = max_tokens,
            temperature = min(temperature, 1.0),
            messages    = conversation,
        )

        if system_prompt:
            kwargs["system"] = system_prompt
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self.client.messages.create(**kwargs)
            return "".join(
                block.text for block in response.content if getattr(block, "type", "") == "text"
            )

        except Exception as e:
            logger.error("❌ Anthropic error generating response: %s", e)
            raise



    # ── Private ────────────────────────────────────────────────────────────────
    def _split_messages(self, messages: List[Dict[str, str]]):
        """
        Split OpenAI-style messages into Anthropic format.

        Returns:
            (system_prompt: str, conversation: List[Dict])

        Rules:
          - "system" messages before the first turn become the top-level system prompt.
          - Later system messages are prepended to the next user message.
          - Leading assistant turns are dropped (Anthropic requires a user turn first).
        """
        system_parts   = []
        conversation   = []
        pending_system = []

        for msg in messages:
            role    = msg.get("role", "user")
            content = msg.get("content", "")

            if role == "system":
                if not conversation:
                    system_parts.append(content)
                else:
                    pending_system.append(content)

            elif role == "assistant" and not conversation:
                continue

            elif role in ("user", "assistant"):
                if pending_system and role == "user":
                    content = "\n\n".join(pending_system) + "\n\n" + content
                    pending_system = []
                conversation.append({"role": role, "content": content})

        system_prompt = "\n\n".join(system_parts)
        return system_prompt, conversation
