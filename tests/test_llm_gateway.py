"""Tests for the Gemini gateway failure contract."""

from types import SimpleNamespace

from nlp_studio.core.llm_gateway import ExternalServiceFailure, GeminiGateway, Generated


class FakeModel:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = 0

    async def generate_content_async(self, prompt):
        self.calls += 1
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _gateway_with(model):
    gateway = GeminiGateway(api_key="test-key", model_name="test-model")
    gateway._model = model
    return gateway


async def test_missing_api_key_is_a_failure_value():
    result = await GeminiGateway(api_key="").generate("hello")

    assert isinstance(result, ExternalServiceFailure)
    assert "not configured" in result.reason


async def test_success_returns_generated_text():
    result = await _gateway_with(FakeModel(text="Hello back")).generate("hello")
    assert result == Generated("Hello back")


async def test_provider_exception_is_not_raised():
    model = FakeModel(error=RuntimeError("quota exceeded"))
    result = await _gateway_with(model).generate("hello")

    assert isinstance(result, ExternalServiceFailure)
    assert result.reason == "quota exceeded"
    assert model.calls == 1  # single attempt


async def test_blank_reply_is_a_failure():
    result = await _gateway_with(FakeModel(text="   \n")).generate("hello")
    assert result == ExternalServiceFailure("empty response")
