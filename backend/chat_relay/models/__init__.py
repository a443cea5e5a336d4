"""Models module."""

from .chat import Role, ChatMessage, UserContext, RelayRequest
from .session import SeedState, TurnStatus, Session

__all__ = [
    'Role', 'ChatMessage', 'UserContext', 'RelayRequest',
    'SeedState', 'TurnStatus', 'Session',
]
