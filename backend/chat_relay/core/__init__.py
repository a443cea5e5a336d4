"""Core module - session state, prompt templating and logging setup."""

from .prompts import SYSTEM_PROMPT, CONTEXT_TEMPLATE, render_context
from .session_store import SessionStore, session_store, get_session_store

__all__ = [
    'SYSTEM_PROMPT', 'CONTEXT_TEMPLATE', 'render_context',
    'SessionStore', 'session_store', 'get_session_store',
]
