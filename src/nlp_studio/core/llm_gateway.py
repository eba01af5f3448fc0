"""
LLM Gateway Module
Single narrow adapter around the generative-language API.

``generate`` never raises: a provider error, a missing key or an empty reply
comes back as ``ExternalServiceFailure`` and the caller picks its fallback.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

import google.generativeai as genai

from nlp_studio import config

logger = logging.getLogger("NLPSTUDIO_LLM")


@dataclass(frozen=True)
class Generated:
    """Successful completion."""
    text: str


@dataclass(frozen=True)
class ExternalServiceFailure:
    """The language model could not produce a usable reply."""
    reason: str


LLMResult = Union[Generated, ExternalServiceFailure]


class LLMGateway(ABC):
    """Contract for anything that turns a prompt into text."""

    @abstractmethod
    async def generate(self, prompt: str) -> LLMResult:
        """Send ``prompt`` once and return the reply or a failure value."""
        pass


class GeminiGateway(LLMGateway):
    """
    Google Generative AI (Gemini) gateway.

    Lifecycle:
        gateway = GeminiGateway(api_key="...")
        result = await gateway.generate("Summarize ...")
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self.model_name = model_name or config.GEMINI_MODEL
        self._model = None

    def validate(self) -> bool:
        """Configure the client; False when no API key is set."""
        if self._model is not None:
            return True
        if not self.api_key:
            logger.error("Gemini API key not provided (set GEMINI_API_KEY)")
            return False

        genai.configure(api_key=self.api_key)
        self._model = genai.GenerativeModel(self.model_name)
        logger.info(f"Gemini client initialized ({self.model_name})")
        return True

    async def generate(self, prompt: str) -> LLMResult:
        try:
            if not self.validate():
                return ExternalServiceFailure("language model not configured")

            response = await self._model.generate_content_async(prompt)
            text = response.text or ""
        except Exception as e:
            logger.error(f"Gemini API error: {e}")
            return ExternalServiceFailure(str(e) or type(e).__name__)

        if not text.strip():
            logger.error("Gemini API returned an empty response")
            return ExternalServiceFailure("empty response")

        return Generated(text)
