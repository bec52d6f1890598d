"""Anthropic chat adapter used by the insight relay."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from anthropic import Anthropic, APIError, AuthenticationError, RateLimitError

from app.core.config import Settings

LOGGER = logging.getLogger(__name__)


class LLMError(Exception):
    """Base LLM error."""


class LLMRateLimitError(LLMError):
    """Rate limit hit."""


class LLMAuthError(LLMError):
    """Authentication failure."""


class ChatProvider:
    """Thin wrapper around the Anthropic Messages API.

    Every call is a new single-turn conversation; the provider keeps no
    history between calls.
    """

    provider_name = "anthropic"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 1024,
        client: Any = None,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self.client = client if client is not None else Anthropic(api_key=api_key)

    def complete(self, prompt: str) -> List[Any]:
        """Send ``prompt`` as one user message and return the response content blocks."""
        messages: List[Dict[str, str]] = [{"role": "user", "content": prompt}]
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=messages,
            )
        except Exception as exc:  # noqa: BLE001
            self._handle_error(exc)
        return list(getattr(response, "content", None) or [])

    def _handle_error(self, exc: Exception) -> None:
        if isinstance(exc, AuthenticationError):
            raise LLMAuthError(f"Anthropic auth failed: {exc}") from exc
        if isinstance(exc, RateLimitError):
            raise LLMRateLimitError(f"Anthropic rate limit: {exc}") from exc
        if isinstance(exc, APIError):
            raise LLMError(f"Anthropic API error: {exc}") from exc
        raise LLMError(f"Anthropic error: {exc}") from exc


def build_provider(settings: Settings) -> ChatProvider:
    """Create the provider from injected settings rather than reading env ad hoc."""
    if not settings.ANTHROPIC_API_KEY:
        LOGGER.warning("⚠️ ANTHROPIC_API_KEY is not set; insight requests will fail")
    return ChatProvider(
        api_key=settings.ANTHROPIC_API_KEY,
        model=settings.LLM_MODEL,
        max_tokens=settings.LLM_MAX_TOKENS,
    )
