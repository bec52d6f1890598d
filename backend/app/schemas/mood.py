"""Pydantic schemas for mood submissions and generated insights."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class MoodRequest(BaseModel):
    """Mood payload as sent by any client revision.

    Older clients send ``mood`` + ``description``; newer ones send
    ``emotion`` + ``intensity`` + ``description``. Both are accepted.
    """

    emotion: Optional[str] = Field(default=None, description="Emotion label chosen by the user")
    intensity: Optional[float] = Field(default=None, description="Mood intensity on a 1-5 scale")
    mood: Optional[float] = Field(default=None, description="Legacy name for the 1-5 mood level")
    description: str = Field(..., description="Free-text description of the mood")

    @property
    def level(self) -> Optional[float]:
        # intensity takes precedence over the legacy field
        return self.intensity if self.intensity is not None else self.mood


class InsightResponse(BaseModel):
    insights: str
