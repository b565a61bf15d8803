"""LLM Client Package"""

from gai.llm.base import (
    LLMResponse,
    LLMError,
    validate_model,
    validate_temperature,
    MIN_TEMPERATURE,
    MAX_TEMPERATURE,
)
from gai.llm.openai_client import OpenAIClient


def get_client(model: str | None = None, temperature: float | None = None) -> OpenAIClient:
    """Create the completion client. Raises LLMError on bad settings or a missing key."""
    return OpenAIClient(model=model, temperature=temperature)


__all__ = [
    "LLMResponse",
    "LLMError",
    "OpenAIClient",
    "get_client",
    "validate_model",
    "validate_temperature",
    "MIN_TEMPERATURE",
    "MAX_TEMPERATURE",
]
