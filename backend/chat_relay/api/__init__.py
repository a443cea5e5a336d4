"""API module."""

from .relay import router as relay_router
from .exceptions import register_exception_handlers

__all__ = ['relay_router', 'register_exception_handlers']
