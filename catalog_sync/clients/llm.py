"""Generic LLM client with provider-agnostic interface."""

import logging
import threading

from openai import OpenAI

from ..errors import TranslationError

logger = logging.getLogger(__name__)


class LLMClient:
    """Generic LLM client. Currently uses OpenAI chat completions."""

    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo-0125"):
        self._client = OpenAI(api_key=api_key)
        self.model = model
        self.total_input_tokens = 0
        self.total_output_tokens = 0
        self._lock = threading.Lock()

    def call(self, system_prompt: str, user_message: str, label: str = "") -> str:
        """Make LLM call and return the first completion's text, unmodified.

        Args:
            system_prompt: System prompt.
            user_message: User message.
            label: Optional label for logging token usage.

        Returns:
            Response text content.
        """
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
        )

        if not response.choices or response.choices[0].message.content is None:
            raise TranslationError(f"No completion returned for {label or 'request'}")

        # Track tokens
        usage = response.usage
        if usage is not None:
            with self._lock:
                self.total_input_tokens += usage.prompt_tokens
                self.total_output_tokens += usage.completion_tokens
            if label:
                logger.debug(
                    f"{label}: input={usage.prompt_tokens}, output={usage.completion_tokens}"
                )

        return response.choices[0].message.content

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated (input, output) tokens."""
        return self.total_input_tokens, self.total_output_tokens
