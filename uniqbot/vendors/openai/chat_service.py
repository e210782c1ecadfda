""" OpenAI Chat/Completion Service... """

# Python Packages
import logging
from typing import List, Dict, Optional

# Client
from .openai_client import OpenAIClient

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class ChatService:
    """ Chat completions using OpenAI... """

    def __init__(self, api_key: str = None):
        self.client = OpenAIClient(api_key).get_client()
        self.default_model = constants.OPENAI_DEFAULT_MODEL



    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
        timeout: Optional[float] = None
    ) -> str:
        """
        Generate a chat completion response

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use (default: constants.OPENAI_DEFAULT_MODEL)
            temperature: Sampling temperature (0-2)
            max_tokens: Maximum tokens in response
            timeout: Per-request timeout in seconds (default: client timeout)

        Returns:
            Generated response text ("" when the model returns nothing)
        """

        kwargs = dict(
            model       = model or self.default_model,
            messages    = messages,
            temperature = temperature,
            max_tokens  = max_tokens,
        )
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self.client.chat.completions.create(**kwargs)
            return response.choices[0].message.content or ""

        except Exception as e:
            logger.error("❌ OpenAI error generating response: %s", e)
            raise
