"""Chat Relay - session-scoped relay to an OpenAI-compatible chat completion API."""

__version__ = "1.0.0"
