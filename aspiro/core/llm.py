"""
Generative-language provider abstraction.

Every text-completion call in the application goes through a
TextCompletionProvider so that:
  - the vendor (OpenAI or Gemini) is a configuration choice
  - every failure mode surfaces as a single CompletionError
  - tests can substitute a stub through FastAPI dependency overrides

Providers make exactly one attempt per call, bounded by llm_timeout_seconds.
Callers are expected to catch CompletionError and fall back to their
deterministic result; provider failures never reach the client.
"""
import asyncio
import json
import re
from functools import lru_cache
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import openai
from google import genai
from google.genai import types as genai_types
from openai import AsyncOpenAI

from aspiro.core.config import settings
from aspiro.core.logging import get_logger

logger = get_logger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class CompletionError(Exception):
    """The provider could not produce a usable completion."""


@runtime_checkable
class TextCompletionProvider(Protocol):
    """Single request/response text completion."""

    name: str
    enabled: bool

    async def complete(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        ...


class DisabledCompletionProvider:
    """Used when no provider is configured; every call fails immediately."""

    name = "none"
    enabled = False

    async def complete(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        raise CompletionError("No text completion provider is configured")


class OpenAICompletionProvider:
    """Chat completions through the OpenAI async client."""

    name = "openai"
    enabled = True

    def __init__(self, api_key: str, model: str):
        self.model = model
        # max_retries=0: one attempt, the caller owns the fallback
        self._client = AsyncOpenAI(
            api_key=api_key,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
        )

    async def complete(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs: Dict[str, Any] = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=settings.llm_temperature,
                    max_tokens=settings.llm_max_tokens,
                    **kwargs,
                ),
                timeout=settings.llm_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("llm_timeout", provider=self.name)
            raise CompletionError("Completion timed out") from exc
        except openai.OpenAIError as exc:
            logger.warning("llm_api_error", provider=self.name, error=str(exc))
            raise CompletionError("Completion request failed") from exc

        text = response.choices[0].message.content if response.choices else None
        if not text or not text.strip():
            raise CompletionError("Empty completion")
        return text


class GeminiCompletionProvider:
    """Content generation through the google-genai async client."""

    name = "gemini"
    enabled = True

    def __init__(self, api_key: str, model: str):
        self.model = model
        self._client = genai.Client(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        *,
        system: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        config = genai_types.GenerateContentConfig(
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
            system_instruction=system,
            response_mime_type="application/json" if json_mode else None,
        )
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=config,
                ),
                timeout=settings.llm_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("llm_timeout", provider=self.name)
            raise CompletionError("Completion timed out") from exc
        except Exception as exc:
            # google-genai raises its own errors as well as raw transport errors
            logger.warning("llm_api_error", provider=self.name, error=str(exc))
            raise CompletionError("Completion request failed") from exc

        text = response.text
        if not text or not text.strip():
            raise CompletionError("Empty completion")
        return text


def build_completion_provider() -> TextCompletionProvider:
    """Pick a provider from settings; missing keys disable generation."""
    provider = settings.llm_provider.lower()

    if provider == "openai" and settings.openai_api_key:
        return OpenAICompletionProvider(settings.openai_api_key, settings.openai_chat_model)
    if provider == "gemini" and settings.gemini_api_key:
        return GeminiCompletionProvider(settings.gemini_api_key, settings.gemini_model)

    if provider != "none":
        logger.warning("llm_provider_not_configured", provider=provider)
    return DisabledCompletionProvider()


@lru_cache()
def get_completion_provider() -> TextCompletionProvider:
    """FastAPI dependency returning the process-wide provider."""
    return build_completion_provider()


def extract_json_object(raw: str) -> Optional[Dict[str, Any]]:
    """
    Parse the first JSON object out of a model reply.

    Tolerates markdown code fences and prose around the object.
    Returns None when nothing parseable is found.
    """
    text = _CODE_FENCE.sub("", raw.strip())
    match = _JSON_OBJECT.search(text)
    if not match:
        logger.warning("llm_json_missing", raw_head=raw[:200])
        return None
    try:
        parsed = json.loads(match.group(0))
    except (json.JSONDecodeError, TypeError) as exc:
        logger.warning("llm_json_parse_error", error=str(exc), raw_head=raw[:200])
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed
