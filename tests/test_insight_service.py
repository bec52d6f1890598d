"""Tests for prompt construction and insight extraction."""

from unittest.mock import MagicMock

import pytest

from app.schemas.mood import MoodRequest
from app.services.insight_service import (
    PROVIDER_FAILURE_MESSAGE,
    UNEXPECTED_FORMAT_MESSAGE,
    InsightFormatError,
    InsightProviderError,
    InsightService,
    build_prompt,
)
from app.services.llm_provider import LLMAuthError, LLMError, LLMRateLimitError


class TestBuildPrompt:
    def test_legacy_mood_payload(self):
        prompt = build_prompt(MoodRequest(mood=4, description="Felt great after a walk"))

        assert "mood level of 4 out of 5" in prompt
        assert '"Felt great after a walk"' in prompt

    def test_emotion_payload(self):
        prompt = build_prompt(MoodRequest(emotion="Anxious", intensity=2, description="Big exam tomorrow"))

        assert '"Anxious"' in prompt
        assert "intensity of 2 out of 5" in prompt
        assert '"Big exam tomorrow"' in prompt

    def test_intensity_wins_over_mood(self):
        payload = MoodRequest(intensity=5, mood=1, description="x")

        assert payload.level == 5
        assert "5 out of 5" in build_prompt(payload)

    def test_fractional_level_kept(self):
        assert "3.5 out of 5" in build_prompt(MoodRequest(mood=3.5, description="meh"))

    def test_missing_level(self):
        prompt = build_prompt(MoodRequest(description="no rating given"))

        assert "did not rate their mood level" in prompt
        assert "None" not in prompt

    def test_emotion_without_level(self):
        prompt = build_prompt(MoodRequest(emotion="Sad", description="lonely evening"))

        assert '"Sad"' in prompt
        assert "did not rate the intensity" in prompt
        assert "out of 5" not in prompt
        assert "None" not in prompt


def _service(*texts):
    provider = MagicMock()
    provider.complete.return_value = [MagicMock(text=t) for t in texts]
    return InsightService(provider), provider


class TestInsightService:
    def test_returns_first_block_stripped(self):
        service, provider = _service("  Try to keep up the walking routine!\n", "ignored")

        result = service.generate_insights(MoodRequest(mood=4, description="Felt great after a walk"))

        assert result.insights == "Try to keep up the walking routine!"
        prompt = provider.complete.call_args.args[0]
        assert "4" in prompt and "Felt great after a walk" in prompt

    def test_no_content_blocks(self):
        service, _ = _service()

        with pytest.raises(InsightFormatError) as exc_info:
            service.generate_insights(MoodRequest(mood=2, description="tired"))
        assert str(exc_info.value) == UNEXPECTED_FORMAT_MESSAGE

    def test_first_block_without_text(self):
        provider = MagicMock()
        provider.complete.return_value = [MagicMock(text=None)]

        with pytest.raises(InsightFormatError):
            InsightService(provider).generate_insights(MoodRequest(mood=2, description="tired"))

    @pytest.mark.parametrize("error", [LLMAuthError("bad key"), LLMRateLimitError("slow down"), LLMError("boom")])
    def test_provider_errors_are_uniform(self, error):
        provider = MagicMock()
        provider.complete.side_effect = error

        with pytest.raises(InsightProviderError) as exc_info:
            InsightService(provider).generate_insights(MoodRequest(mood=3, description="ok"))
        assert str(exc_info.value) == PROVIDER_FAILURE_MESSAGE
