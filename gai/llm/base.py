"""LLM Shared Types and Validation"""

import math
from dataclasses import dataclass

MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


@dataclass
class LLMResponse:
    """Structured response from the completion API."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


def validate_model(model: str | None) -> str:
    """Reject empty or whitespace-containing model names. Returns the stripped name."""
    if not isinstance(model, str) or not model.strip():
        raise LLMError("Model name must not be empty.")
    name = model.strip()
    if any(c.isspace() for c in name):
        raise LLMError(f"Invalid model name '{model}': must not contain whitespace.")
    return name


def validate_temperature(temperature) -> float:
    """Reject anything that is not a finite number in [0.0, 2.0]."""
    if isinstance(temperature, bool):
        raise LLMError(f"Invalid temperature '{temperature}': must be a number.")
    try:
        value = float(temperature)
    except (TypeError, ValueError):
        raise LLMError(f"Invalid temperature '{temperature}': must be a number.")
    if not math.isfinite(value) or not MIN_TEMPERATURE <= value <= MAX_TEMPERATURE:
        raise LLMError(
            f"Invalid temperature {temperature}: must be between {MIN_TEMPERATURE} and {MAX_TEMPERATURE}."
        )
    return value
