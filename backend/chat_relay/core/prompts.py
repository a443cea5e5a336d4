"""
Fixed prompt texts and context templating.
"""

from typing import Any

from ..models import UserContext

LOCATION_PLACEHOLDER = "<user_location>"
WEATHER_PLACEHOLDER = "<user_weather>"

SYSTEM_PROMPT = """
You are ChatGPT, a large language model trained by OpenAI.
You are chatting with a human who is asking you questions using voice dictation.
You are trying to answer the questions as best you can.
Be succint and informative unless the user asks you to be more verbose.
"""

CONTEXT_TEMPLATE = f"""
For context you can use the following information:
user_location: {LOCATION_PLACEHOLDER}
user_weather: {WEATHER_PLACEHOLDER}
"""


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def render_context(user_context: UserContext, template: str = CONTEXT_TEMPLATE) -> str:
    """
    Fill the context template with the caller's location and weather.

    Values are substituted verbatim, location first, first occurrence only.
    Missing values become the empty string.
    """
    return (
        template
        .replace(LOCATION_PLACEHOLDER, _as_text(user_context.user_location), 1)
        .replace(WEATHER_PLACEHOLDER, _as_text(user_context.user_weather), 1)
    )
