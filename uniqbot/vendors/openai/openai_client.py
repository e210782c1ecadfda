""" OpenAI Client Configuration... """

# Python Packages
from openai import OpenAI
from typing import Optional

# Constants
from ...base import constants





class OpenAIClient:
    """ Singleton OpenAI client for the application... """

    _instance = None
    _client = None

    def __new__(cls, api_key: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super(OpenAIClient, cls).__new__(cls)
            cls._client = OpenAI(
                api_key = api_key or constants.OPENAI_API_KEY,
                timeout = constants.AI_REQUEST_TIMEOUT
            )
        return cls._instance



    @property
    def client(self) -> OpenAI:
        """ Get the OpenAI client instance... """

        if self._client is None:
            raise RuntimeError("OpenAI client not initialized. Set OPENAI_API_KEY environment variable.")

        return self._client


    def get_client(self) -> OpenAI:
        return self.client
