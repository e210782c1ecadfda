""" Anthropic Client Configuration... """

# Python Packages
from anthropic import Anthropic
from typing import Optional

# Constants
from ...base import constants





class AnthropicClient:
    """ Singleton Anthropic client, created with the per-request AI timeout... """

    _instance = None
    _client   = None

    def __new__(cls, api_key: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super(AnthropicClient, cls).__new__(cls)
            cls._client   = Anthropic(
                api_key = api_key or constants.ANTHROPIC_API_KEY,
                timeout = constants.AI_REQUEST_TIMEOUT
            )
        return cls._instance



    @property
    def client(self) -> Anthropic:
        if self._client is None:
            raise RuntimeError("Anthropic client not initialized. Set ANTHROPIC_API_KEY environment variable.")

        return self._client


    def get_client(self) -> Anthropic:
        return self.client
