"""LLM module - provides a unified interface for chat completion providers."""

from .base import LLMProvider, LLMMessage, LLMResponse, LLMProviderError, LLMResponseError
from .openai_provider import OpenAIProvider
from .factory import create_llm_provider

__all__ = [
    'LLMProvider',
    'LLMMessage',
    'LLMResponse',
    'LLMProviderError',
    'LLMResponseError',
    'OpenAIProvider',
    'create_llm_provider',
]
