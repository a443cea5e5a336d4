"""
Relay API endpoint - forwards one chat turn to the completion provider.
The session transcript is kept in process memory between calls.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..config import settings
from ..core import SYSTEM_PROMPT, SessionStore, get_session_store, render_context
from ..core.logging_config import LoggerAdapter
from ..llm import LLMMessage, LLMProvider, LLMProviderError, create_llm_provider
from ..models import RelayRequest
from .exceptions import UpstreamFailureError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["relay"])


def get_llm_provider() -> Optional[LLMProvider]:
    """Get configured LLM provider or None."""
    return create_llm_provider(
        provider=settings.llm_provider,
        api_key=settings.openai_api_key,
        model=settings.llm_model,
        base_url=settings.llm_base_url,
        default_temperature=settings.llm_temperature,
        default_max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout,
        log_calls=settings.log_llm_calls,
    )


@router.post("/canti")
async def relay_message(
    payload: RelayRequest,
    store: SessionStore = Depends(get_session_store),
    llm_provider: Optional[LLMProvider] = Depends(get_llm_provider),
):
    """
    Append a user message to a session and return the assistant's reply.

    The first call for a session id seeds the transcript with the system
    prompt and the rendered location/weather context. The per-session lock is
    held until the reply is recorded, so turns of one session never overlap.

    Returns:
        dict: assistantMessage and the full updated transcript
    """
    log = LoggerAdapter(logger, {"session_id": payload.session_id})
    context_message = render_context(payload.user_context())

    async with store.lock(payload.session_id):
        session = store.get_or_create(payload.session_id)
        if session.seed(SYSTEM_PROMPT, context_message):
            log.info("Session seeded")

        turn = session.begin_turn(payload.user_message)

        try:
            if llm_provider is None:
                raise LLMProviderError("LLM provider not configured")
            completion = await llm_provider.chat_completion(
                [LLMMessage.text(m.role, m.content) for m in session.messages]
            )
        except LLMProviderError as e:
            session.fail_turn(turn)
            log.error(f"Error fetching completion: {e}", exc_info=True)
            raise UpstreamFailureError()
        except Exception as e:
            session.fail_turn(turn)
            log.error(f"Unexpected error fetching completion: {e}", exc_info=True)
            raise UpstreamFailureError()

        session.answer_turn(turn, completion.content)
        log.info(f"Turn answered, transcript length {len(session.messages)}")

        return {
            "assistantMessage": completion.content,
            "messages": session.transcript(),
        }
