"""Domain service turning a mood submission into LLM-generated insights."""
from __future__ import annotations

import logging

from app.schemas.mood import InsightResponse, MoodRequest
from app.services.llm_provider import ChatProvider, LLMAuthError, LLMError, LLMRateLimitError

LOGGER = logging.getLogger(__name__)

PROVIDER_FAILURE_MESSAGE = "Failed to fetch insights."
UNEXPECTED_FORMAT_MESSAGE = "Unexpected API response format or no insights generated."


class InsightError(Exception):
    """Base error for a failed insight request; ``str(exc)`` is safe to show callers."""


class InsightProviderError(InsightError):
    """The LLM provider call itself failed."""


class InsightFormatError(InsightError):
    """The provider answered without a usable text block."""


def _format_level(level: float) -> str:
    # 4.0 -> "4", 3.5 -> "3.5"
    return f"{level:g}"


def build_prompt(payload: MoodRequest) -> str:
    level = payload.level
    if payload.emotion and level is not None:
        opening = f'The user is feeling "{payload.emotion}" with an intensity of {_format_level(level)} out of 5.'
    elif payload.emotion:
        opening = f'The user is feeling "{payload.emotion}". They did not rate the intensity.'
    elif level is not None:
        opening = f"The user feels a mood level of {_format_level(level)} out of 5."
    else:
        opening = "The user did not rate their mood level."
    return (
        f'{opening} Here\'s their description: "{payload.description}". '
        "Provide personalized insights, advice, or tips to help them understand "
        "their mood and improve it."
    )


class InsightService:
    def __init__(self, provider: ChatProvider) -> None:
        self.provider = provider

    def generate_insights(self, payload: MoodRequest) -> InsightResponse:
        prompt = build_prompt(payload)
        LOGGER.info("📥 Requesting insights (emotion=%s, level=%s)", payload.emotion, payload.level)
        try:
            blocks = self.provider.complete(prompt)
        except LLMAuthError as exc:
            LOGGER.error("❌ Provider rejected credentials: %s", exc)
            raise InsightProviderError(PROVIDER_FAILURE_MESSAGE) from exc
        except LLMRateLimitError as exc:
            LOGGER.error("❌ Provider rate limit reached: %s", exc)
            raise InsightProviderError(PROVIDER_FAILURE_MESSAGE) from exc
        except LLMError as exc:
            LOGGER.error("❌ Error communicating with provider: %s", exc, exc_info=True)
            raise InsightProviderError(PROVIDER_FAILURE_MESSAGE) from exc

        text = getattr(blocks[0], "text", None) if blocks else None
        if not isinstance(text, str):
            LOGGER.error("❌ Unexpected provider response: %d content block(s)", len(blocks))
            raise InsightFormatError(UNEXPECTED_FORMAT_MESSAGE)

        LOGGER.info("✅ Insights generated (%d chars)", len(text))
        return InsightResponse(insights=text.strip())
