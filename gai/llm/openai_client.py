"""OpenAI Chat Completions Client"""

import os

import openai

from gai import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from gai.llm.base import LLMResponse, LLMError, validate_model, validate_temperature
from gai.prompts import SYSTEM_PROMPT


class OpenAIClient:
    """One-shot chat completion client. Requires OPENAI_API_KEY."""

    # Failures are reported, never retried
    MAX_RETRIES = 0

    def __init__(self, api_key: str | None = None, model: str | None = None,
                 temperature: float | None = None):
        self.model = validate_model(model or DEFAULT_MODEL)
        self.temperature = validate_temperature(DEFAULT_TEMPERATURE if temperature is None else temperature)
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")

        if not self.api_key:
            raise LLMError(
                "OPENAI_API_KEY not found. Please set it in your .env file or environment variables."
            )

        self._client = openai.OpenAI(api_key=self.api_key, max_retries=self.MAX_RETRIES)

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def generate(self, prompt: str) -> LLMResponse:
        """Send a single chat completion request and return the first choice."""
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except openai.AuthenticationError:
            raise LLMError("Invalid API key. Check your OPENAI_API_KEY.")
        except openai.APIStatusError as e:
            raise LLMError(f"API request failed ({e.status_code}): {e.message}")
        except openai.APIConnectionError as e:
            raise LLMError(f"Failed to send request to OpenAI API: {e}")
        except openai.APIError as e:
            raise LLMError(f"OpenAI API error: {e.message}")

        if not response.choices:
            raise LLMError("No choices in response")

        content = response.choices[0].message.content or ""
        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=content,
            model=getattr(response, "model", None) or self.model,
            tokens_used=getattr(usage, "total_tokens", 0) or 0,
        )
