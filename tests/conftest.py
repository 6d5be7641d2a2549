import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.rate_limit import RateLimiter, get_chat_rate_limiter, get_health_rate_limiter
from app.main import app
from app.services.chat import ChatService, get_chat_service
from app.services.chat.completion import CompletionAdapter
from app.services.chat.provider import ChatCompletionProvider

TEST_PROMPT = "You are a test persona."


class FakeProvider(ChatCompletionProvider):
    """Returns a canned reply (or raises) and records every call."""

    def __init__(self, reply: str = "DAS extends coverage indoors.", error: Optional[Exception] = None, delay: float = 0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: List[dict] = []

    async def complete(self, messages, *, max_tokens, temperature):
        self.calls.append({"messages": messages, "max_tokens": max_tokens, "temperature": temperature})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


def make_service(provider: ChatCompletionProvider, **adapter_kwargs) -> ChatService:
    return ChatService(CompletionAdapter(provider, TEST_PROMPT, **adapter_kwargs))


def history_of(*pairs):
    """Build a raw history list from (role, content) tuples."""
    return [{"role": role, "content": content} for role, content in pairs]


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def chat_limiter():
    return RateLimiter(100, 900)


@pytest.fixture
def health_limiter():
    return RateLimiter(100, 60)


@pytest.fixture
def client(provider, chat_limiter, health_limiter):
    service = make_service(provider)
    app.dependency_overrides[get_chat_service] = lambda: service
    app.dependency_overrides[get_chat_rate_limiter] = lambda: chat_limiter
    app.dependency_overrides[get_health_rate_limiter] = lambda: health_limiter
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
