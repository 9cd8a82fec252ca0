"""Generic LLM client with provider-agnostic interface."""

import logging

from openai import OpenAI

from ..utils import extract_json_object

logger = logging.getLogger(__name__)


class LLMResponseError(ValueError):
    """Model reply could not be parsed."""

    def __init__(self, message: str, raw_output: str):
        self.raw_output = raw_output
        super().__init__(message)


class LLMClient:
    """Generic LLM client. Currently uses OpenAI, interface is provider-agnostic."""

    def __init__(self, api_key: str, model: str = "gpt-5.2"):
        self._client = OpenAI(api_key=api_key)
        self.model = model
        self.total_input_tokens = 0
        self.total_output_tokens = 0

    def call(self, system_prompt: str, user_message: str, label: str = "") -> str:
        """Make LLM call and return response text.

        Args:
            system_prompt: System/developer prompt.
            user_message: User message.
            label: Optional label for logging token usage.

        Returns:
            Response text content.
        """
        response = self._client.responses.create(
            model=self.model,
            input=[
                {"role": "developer", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            reasoning={"effort": "low"},
        )

        # Track tokens
        usage = response.usage
        if usage is not None:
            self.total_input_tokens += usage.input_tokens
            self.total_output_tokens += usage.output_tokens
            if label:
                logger.info(f"{label}: input={usage.input_tokens}, output={usage.output_tokens}")

        return response.output_text.strip()

    def call_json(self, system_prompt: str, user_message: str, label: str = "") -> dict:
        """Make LLM call and parse the reply as a JSON object.

        Raises:
            LLMResponseError: reply carries no parseable JSON object.
        """
        output = self.call(system_prompt, user_message, label=label)
        try:
            return extract_json_object(output)
        except ValueError as e:
            raise LLMResponseError(f"Invalid JSON reply: {e}", raw_output=output) from e

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated (input, output) tokens."""
        return self.total_input_tokens, self.total_output_tokens
