"""Tests for structured generation and the fallback policy."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from openai import OpenAIError

from parkpulse.schemas.email_schema import SingleEmail
from parkpulse.tools.text_generation import (
    OfflineTextGenerator,
    OpenAITextGenerator,
    TextGenerationError,
    build_structured_prompt,
    generate_or_fallback,
)

from tests.conftest import FakeTextGenerator

FALLBACK = SingleEmail(subject="fallback", body="fallback body")


def _client_returning(content):
    client = MagicMock()
    message = SimpleNamespace(content=content)
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=message)]
    )
    return client


class TestBuildStructuredPrompt:
    def test_appends_schema(self):
        prompt = build_structured_prompt("Write an email.", SingleEmail)
        assert prompt.startswith("Write an email.")
        assert '"subject"' in prompt
        assert '"body"' in prompt


class TestOpenAITextGenerator:
    def test_parses_json_reply(self):
        client = _client_returning('{"subject": "Hi", "body": "<p>Hello</p>"}')
        result = OpenAITextGenerator(client=client).generate("prompt", SingleEmail)
        assert result == SingleEmail(subject="Hi", body="<p>Hello</p>")
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0]["role"] == "system"

    def test_schema_mismatch_raises(self):
        client = _client_returning('{"subject": "Hi"}')
        with pytest.raises(TextGenerationError, match="SingleEmail"):
            OpenAITextGenerator(client=client).generate("prompt", SingleEmail)

    def test_empty_reply_raises(self):
        client = _client_returning(None)
        with pytest.raises(TextGenerationError, match="empty"):
            OpenAITextGenerator(client=client).generate("prompt", SingleEmail)

    def test_sdk_error_raises(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = OpenAIError("boom")
        with pytest.raises(TextGenerationError, match="boom"):
            OpenAITextGenerator(client=client).generate("prompt", SingleEmail)


class TestGenerateOrFallback:
    def test_returns_generated_value(self):
        generated = SingleEmail(subject="s", body="b")
        result = generate_or_fallback(FakeTextGenerator(generated), "p", SingleEmail, FALLBACK)
        assert result == generated

    def test_offline_uses_fallback(self):
        assert generate_or_fallback(OfflineTextGenerator(), "p", SingleEmail, FALLBACK) is FALLBACK

    def test_wrong_type_uses_fallback(self):
        generator = FakeTextGenerator(SimpleNamespace(subject="x"))
        assert generate_or_fallback(generator, "p", SingleEmail, FALLBACK) is FALLBACK

    def test_fallback_is_logged(self, caplog):
        generate_or_fallback(OfflineTextGenerator(), "p", SingleEmail, FALLBACK)
        assert "Falling back" in caplog.text
