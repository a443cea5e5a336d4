"""
Shared test fixtures and configuration.
"""

import asyncio
import os
from typing import List, Optional

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("OPENAI_API_KEY", "sk-test-key-for-testing")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

from fastapi.testclient import TestClient  # noqa: E402

from chat_relay.main import app  # noqa: E402
from chat_relay.api.relay import get_llm_provider  # noqa: E402
from chat_relay.core import SessionStore, get_session_store  # noqa: E402
from chat_relay.llm import LLMProvider, LLMMessage, LLMResponse, LLMProviderError  # noqa: E402


class FakeProvider(LLMProvider):
    """Records every transcript it receives and answers from a script."""

    def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None,
                 delay: float = 0.0):
        super().__init__(api_key="fake", model="fake-model")
        self.replies = list(replies or [])
        self.error = error
        self.delay = delay
        self.calls: List[List[LLMMessage]] = []

    async def chat_completion(self, messages, temperature=None, max_tokens=None, **kwargs):
        self.calls.append(list(messages))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0) if self.replies else f"reply {len(self.calls)}"
        return LLMResponse(content=content, model=self.model)


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=LLMProviderError("upstream exploded"))


@pytest.fixture
def use_provider(store):
    """Install a store and a provider on the app; returns the setter."""
    def _install(llm_provider):
        app.dependency_overrides[get_session_store] = lambda: store
        app.dependency_overrides[get_llm_provider] = lambda: llm_provider
        return llm_provider
    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def client(use_provider, provider):
    use_provider(provider)
    return TestClient(app)
