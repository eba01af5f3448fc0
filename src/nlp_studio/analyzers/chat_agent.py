"""Conversational reply through the LLM gateway."""

import logging

from nlp_studio.core.llm_gateway import ExternalServiceFailure, LLMGateway

from .interface import AnalyzerInterface
from .results import ChatResult, OperationKind

logger = logging.getLogger("NLPSTUDIO_CHAT")

UNAVAILABLE_REPLY = "The language model is temporarily unavailable. Try again later!"


def build_chat_prompt(text: str) -> str:
    return f'You are a friendly AI assistant. Respond conversationally to:\n"{text}"\n'


class ChatAgent(AnalyzerInterface):

    operation = OperationKind.CHAT

    def __init__(self, gateway: LLMGateway):
        self.gateway = gateway

    async def analyze(self, text: str) -> ChatResult:
        outcome = await self.gateway.generate(build_chat_prompt(text))
        if isinstance(outcome, ExternalServiceFailure):
            logger.warning(f"Chat fallback used: {outcome.reason}")
            return ChatResult(reply=UNAVAILABLE_REPLY)
        return ChatResult(reply=outcome.text)
