"""Providers for generating chat completions."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import openai
from openai import AsyncOpenAI

from .errors import ProviderError, ProviderTimeoutError

logger = logging.getLogger(__name__)

ProviderMessages = List[Dict[str, str]]


class ChatCompletionProvider:
    """Base provider interface."""

    async def complete(
        self,
        messages: ProviderMessages,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        raise NotImplementedError


class LocalChatProvider(ChatCompletionProvider):
    """Rule-based provider used when no external LLM is configured."""

    async def complete(
        self,
        messages: ProviderMessages,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        latest = messages[-1]["content"] if messages else ""
        lower = latest.lower()

        if any(keyword in lower for keyword in ["pricing", "quote", "cost", "consult", "schedule"]):
            return (
                "Happy to help you scope this out. Pricing for in-building wireless depends on "
                "building size, construction materials, and which carriers or public safety bands you need.\n\n"
                "1. Square footage and number of floors\n"
                "2. Carriers or radio systems that need coverage\n"
                "3. Any local public safety code requirements"
            )
        if "das" in lower or "distributed antenna" in lower:
            return (
                "A Distributed Antenna System (DAS) is a network of antennas spread through a building "
                "that extends cellular or radio coverage where outdoor signal can't reach.\n\n"
                "It is common in hospitals, stadiums, office towers, and transit tunnels."
            )
        if any(keyword in lower for keyword in ["service", "offer", "linkwave"]):
            return (
                "Linkwave focuses on three core areas:\n\n"
                "1. DAS systems for carrier coverage\n"
                "2. Private 5G networks\n"
                "3. Public safety radio (ERRCS)\n\n"
                "If this is a live project, I can help map next steps."
            )
        return (
            "I'm your Linkwave assistant. I can explain DAS, in-building coverage, private 5G, "
            "and public safety radio. What would you like to know?"
        )


class OpenAIChatProvider(ChatCompletionProvider):
    """OpenAI-backed provider."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        client_kwargs: Dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if api_base:
            client_kwargs["base_url"] = api_base
        if timeout:
            client_kwargs["timeout"] = timeout
        self.client = AsyncOpenAI(**client_kwargs)
        self.model = model
        self.timeout = timeout

    async def complete(
        self,
        messages: ProviderMessages,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        logger.debug(f"Requesting completion from {self.model} ({len(messages)} messages, max_tokens={max_tokens})")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except openai.APITimeoutError as exc:
            raise ProviderTimeoutError(self.timeout or 0) from exc
        except openai.APIStatusError as exc:
            raise ProviderError(f"OpenAI returned {exc.status_code}: {exc.message}", status_code=exc.status_code) from exc
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}") from exc

        return _extract_content(response)


def _extract_content(response: Any) -> str:
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as exc:
        raise ProviderError("Malformed completion response") from exc
    if not isinstance(content, str):
        raise ProviderError("Completion response had no text content")
    return content
