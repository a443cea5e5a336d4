"""
OpenAI LLM Provider.
Talks to any OpenAI-compatible Chat Completions endpoint over httpx.
"""

import httpx
import logging
import time
from typing import Optional, List, Dict, Any

from .base import LLMProvider, LLMMessage, LLMResponse, LLMProviderError, LLMResponseError

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    Provider for the OpenAI Chat Completions API.
    Default base_url points to api.openai.com.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str = "https://api.openai.com/v1",
        default_temperature: Optional[float] = None,
        default_max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        log_calls: bool = True,
    ):
        super().__init__(api_key, model, base_url.rstrip("/"), default_temperature, default_max_tokens)
        self.timeout = timeout
        self.log_calls = log_calls

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(
        self,
        messages: List[LLMMessage],
        temperature: Optional[float],
        max_tokens: Optional[int],
        **kwargs
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": self._format_messages(messages),
        }
        temperature = temperature if temperature is not None else self.default_temperature
        if temperature is not None:
            payload["temperature"] = temperature
        max_tokens = max_tokens or self.default_max_tokens
        if max_tokens:
            payload["max_tokens"] = max_tokens
        return payload

    @staticmethod
    def _extract_content(data: Any) -> str:
        """Pull choices[0].message.content out of a completion payload."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise LLMResponseError(f"Malformed completion payload: {e!r}") from e
        if not isinstance(content, str):
            raise LLMResponseError(f"Completion content is not text: {type(content).__name__}")
        return content

    async def chat_completion(
        self,
        messages: List[LLMMessage],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """Send request to the Chat Completions endpoint."""
        start_time = time.time()
        url = f"{self.base_url}/chat/completions"
        payload = self._build_payload(messages, temperature, max_tokens, **kwargs)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"LLM API call starting: provider=openai, model={payload['model']}, "
                f"{len(messages)} messages"
            )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(url, json=payload, headers=self._get_headers())
                logger.debug(f"LLM API response status: {resp.status_code}")
                resp.raise_for_status()
                try:
                    data = resp.json()
                except ValueError as e:
                    raise LLMResponseError(f"Completion payload is not JSON: {e}") from e

            content = self._extract_content(data)
        except httpx.HTTPError as e:
            self._log_failure(e, payload, start_time)
            raise LLMProviderError(str(e) or type(e).__name__) from e
        except LLMProviderError as e:
            self._log_failure(e, payload, start_time)
            raise

        usage = data.get("usage")
        if not isinstance(usage, dict):
            usage = {}
        duration_ms = (time.time() - start_time) * 1000

        if self.log_calls:
            logger.info(
                "LLM API call completed",
                extra={"extra_fields": {
                    "provider": "openai",
                    "model": data.get("model", payload["model"]),
                    "prompt_tokens": usage.get("prompt_tokens", 0),
                    "completion_tokens": usage.get("completion_tokens", 0),
                    "total_tokens": usage.get("total_tokens", 0),
                    "duration_ms": round(duration_ms, 2),
                }}
            )

        return LLMResponse(
            content=content,
            model=data.get("model", payload["model"]),
            usage=usage,
            raw=data,
        )

    def _log_failure(self, error: Exception, payload: Dict[str, Any], start_time: float) -> None:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"LLM API call failed: {error}",
            exc_info=True,
            extra={"extra_fields": {
                "provider": "openai",
                "model": payload.get("model"),
                "duration_ms": round(duration_ms, 2),
                "error": str(error),
            }}
        )
