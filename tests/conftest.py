"""Shared fixtures: scripted LLM gateway, fresh stores, app clients."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from nlp_studio.analyzers.orchestrator import OperationDispatcher
from nlp_studio.api.main import create_app
from nlp_studio.core.llm_gateway import ExternalServiceFailure, Generated, LLMGateway
from nlp_studio.db.history_store import AnalysisStore


class FakeGateway(LLMGateway):
    """Returns scripted replies (or failures) and records every prompt."""

    def __init__(self, reply: str | None = None, failure: str | None = None):
        self.reply = reply
        self.failure = failure
        self.prompts: list[str] = []

    async def generate(self, prompt: str):
        self.prompts.append(prompt)
        if self.failure is not None or self.reply is None:
            return ExternalServiceFailure(self.failure or "scripted failure")
        return Generated(self.reply)


@pytest.fixture
def failing_gateway() -> FakeGateway:
    return FakeGateway(failure="provider down")


@pytest.fixture
def store() -> AnalysisStore:
    return AnalysisStore()


@pytest.fixture
def client(store, failing_gateway) -> TestClient:
    app = create_app(store=store, dispatcher=OperationDispatcher(gateway=failing_gateway))
    return TestClient(app)
