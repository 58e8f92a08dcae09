"""Adapters that ask an external text-generation service for a task description.

Each adapter makes a single request with httpx's default timeout. There are no
retries: a failed call surfaces as ProviderError (or ConfigError) and the task
is not stored.
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError as SchemaError

from domain.errors import ConfigError, ProviderError
from schemas.providers import AnthropicCompletion, GeminiResponse, OllamaChunk

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 500
ELLIPSIS = "..."
GEMINI_TEMPERATURE = 0.7
GEMINI_MAX_OUTPUT_TOKENS = 100


def assemble_stream(body: str) -> str:
    """Joins the text fragments of a newline-delimited JSON stream.

    Blank lines and lines that do not decode into a chunk are skipped. Every
    fragment is kept, including those after a chunk marked done.
    """
    fragments = []
    for line in body.split("\n"):
        if not line.strip():
            continue
        try:
            chunk = OllamaChunk.model_validate_json(line)
        except SchemaError:
            logger.debug(f"Skipping unparseable stream line: {line!r}")
            continue
        fragments.append(chunk.response)
    return "".join(fragments)


def truncate_description(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def first_candidate_text(response: GeminiResponse) -> str:
    if not response.candidates or not response.candidates[0].content.parts:
        raise ProviderError("Empty response from Gemini")
    return response.candidates[0].content.parts[0].text


class AnthropicProvider:
    """Single-document completion: the reply's `content` field is the description."""

    def __init__(self, api_key: str, api_url: str, model: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.transport = transport

    async def generate(self, title: str) -> str:
        payload = {
            "prompt": f"Generate a short description for a task titled '{title}'",
            "model": self.model,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(self.api_url, json=payload, headers=headers)
            except httpx.HTTPError as e:
                logger.error(f"Anthropic request failed: {e}")
                raise ProviderError("Failed to call AI") from e

        if not response.is_success:
            # Error replies carry no completion; the description is left empty.
            logger.warning(f"Anthropic returned HTTP {response.status_code}; using empty description")
            return ""
        try:
            completion = AnthropicCompletion.model_validate_json(response.content)
        except SchemaError as e:
            logger.error(f"Could not decode Anthropic response: {e}")
            raise ProviderError("Failed to call AI") from e
        return completion.content


class OllamaProvider:
    """Streaming completion from a local Ollama server, reassembled from NDJSON lines."""

    def __init__(self, api_url: str, model: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_url = api_url
        self.model = model
        self.transport = transport

    async def generate(self, title: str) -> str:
        payload = {
            "model": self.model,
            "prompt": f"Generate a short description for a task titled '{title}'. Keep it under 100 characters.",
        }
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(self.api_url, json=payload)
            except httpx.HTTPError as e:
                logger.error(f"Ollama request failed: {e}")
                raise ProviderError(f"Failed to call Ollama: {e}") from e

        body = response.text
        logger.debug(f"Response from Ollama: {body}")
        return truncate_description(assemble_stream(body))


class GeminiProvider:
    """Structured candidate completion; the first part of the first candidate wins."""

    def __init__(self, api_key: Optional[str], api_url: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.transport = transport

    async def generate(self, title: str) -> str:
        if not self.api_key:
            raise ConfigError("GEMINI_API_KEY not set")

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": f"Generate a short description for a task titled '{title}'. Keep it concise and clear."},
                    ],
                },
            ],
            "generationConfig": {
                "temperature": GEMINI_TEMPERATURE,
                "maxOutputTokens": GEMINI_MAX_OUTPUT_TOKENS,
            },
        }
        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.post(
                    self.api_url,
                    params={"key": self.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                logger.error(f"Gemini request failed: {e}")
                raise ProviderError(f"Failed to call Gemini: {e}") from e

        result = GeminiResponse()
        if response.is_success:
            try:
                result = GeminiResponse.model_validate_json(response.content)
            except SchemaError as e:
                logger.error(f"Could not decode Gemini response: {e}")
        else:
            logger.error(f"Gemini returned HTTP {response.status_code}: {response.text}")
        return first_candidate_text(result)
