"""
LLM Client: a single-shot prompt interface via LiteLLM.

Each call is one round trip. No retries, no history, no caching: the lookups
built on top of it are short interactive questions.
"""

from typing import Any

from loguru import logger

from .config import DEFAULT_MODEL, infer_provider
from .utils import safe_get_content


class LLMClient:
    """
    Multi-provider LLM client backed by LiteLLM.

    Model names follow litellm conventions:
      - Gemini:    ``"gemini/gemini-2.5-flash"``
      - OpenAI:    ``"gpt-4o-mini"``
      - Anthropic: ``"anthropic/claude-sonnet-4-20250514"``
    """

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 256,
        timeout: float | None = None,
    ):
        self.model = model or DEFAULT_MODEL
        self.provider = infer_provider(self.model)
        self.api_key = api_key
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

        logger.debug(f"LLMClient: model={self.model}  provider={self.provider}")

    def completion(self, messages: list[dict[str, Any]]) -> Any:
        """Call litellm.completion() once and return the raw response."""
        import litellm

        return litellm.completion(**self._build_completion_kwargs(messages))

    async def acompletion(self, messages: list[dict[str, Any]]) -> Any:
        """Async version of completion()."""
        import litellm

        return await litellm.acompletion(**self._build_completion_kwargs(messages))

    def ask(self, prompt: str) -> str:
        """Send a single user prompt and return the response text (untrimmed)."""
        response = self.completion([{"role": "user", "content": prompt}])
        return safe_get_content(response)

    async def aask(self, prompt: str) -> str:
        """Async version of ask()."""
        response = await self.acompletion([{"role": "user", "content": prompt}])
        return safe_get_content(response)

    def _build_completion_kwargs(self, messages: list[dict[str, Any]]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "num_retries": 0,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs
