"""
Structured text generation through a language model.

Search results and notification emails are produced by an LLM that must
answer with JSON matching a pydantic schema. Every caller goes through
``generate_or_fallback``: a failed request or malformed output always
degrades to that call site's canned value instead of surfacing an error.

Usage:
    generator = OpenAITextGenerator()
    email = generate_or_fallback(generator, prompt, SingleEmail, fallback=canned)
"""

import json
import logging
from typing import Optional, Protocol, TypeVar

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from parkpulse.config import settings
from parkpulse.prompts.system_prompts import STRUCTURED_OUTPUT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class TextGenerationError(Exception):
    """Raised when the model call fails or its output does not match the schema."""


class TextGenerator(Protocol):
    """Capability: (prompt, schema) -> structured result, or TextGenerationError."""

    def generate(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        ...


def build_structured_prompt(prompt: str, schema: type[BaseModel]) -> str:
    """Append the JSON schema the answer must follow."""
    schema_json = json.dumps(schema.model_json_schema(), indent=2)
    return (
        f"{prompt.strip()}\n\n"
        "Respond with a single JSON object that matches this JSON schema:\n"
        f"{schema_json}"
    )


class OpenAITextGenerator:
    """TextGenerator backed by the OpenAI chat completions API in JSON mode."""

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        self._client = client
        self._model = model or settings.model.llm_model
        self._temperature = (
            settings.model.llm_temperature if temperature is None else temperature
        )

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=settings.model.api_key or None,
                timeout=settings.model.llm_timeout_sec,
            )
        return self._client

    def generate(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        try:
            response = self._get_client().chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": STRUCTURED_OUTPUT_SYSTEM_PROMPT},
                    {"role": "user", "content": build_structured_prompt(prompt, schema)},
                ],
            )
        except OpenAIError as exc:
            raise TextGenerationError(f"Model request failed: {exc}") from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise TextGenerationError("Model returned an empty response")
        try:
            return schema.model_validate_json(content)
        except ValidationError as exc:
            raise TextGenerationError(
                f"Model output does not match {schema.__name__}: {exc.error_count()} errors"
            ) from exc


class OfflineTextGenerator:
    """TextGenerator for runs without model access; every call degrades to fallback."""

    def generate(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        raise TextGenerationError("Text generation is offline")


def generate_or_fallback(
    generator: TextGenerator,
    prompt: str,
    schema: type[SchemaT],
    fallback: SchemaT,
) -> SchemaT:
    """Generate ``schema`` from ``prompt``; on any generation failure return ``fallback``."""
    try:
        result = generator.generate(prompt, schema)
    except TextGenerationError as exc:
        logger.warning("Falling back to canned %s: %s", schema.__name__, exc)
        return fallback
    if not isinstance(result, schema):
        logger.warning(
            "Generator returned %s instead of %s, using fallback",
            type(result).__name__, schema.__name__,
        )
        return fallback
    return result
