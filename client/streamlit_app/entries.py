"""Mood entry value objects shared by the client modules."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

EMOTION_LABELS = ["Very Sad", "Sad", "Neutral", "Happy", "Very Happy", "Anxious", "Angry"]
MIN_INTENSITY = 1
MAX_INTENSITY = 5
DEFAULT_INTENSITY = 3


@dataclass(frozen=True)
class MoodDraft:
    """What the user filled in, before the relay has answered."""

    emotion: str
    intensity: int
    description: str


@dataclass(frozen=True)
class MoodEntry:
    emotion: str
    intensity: int
    description: str
    insights: str
    date: datetime

    @classmethod
    def from_draft(cls, draft: MoodDraft, insights: str, date: datetime) -> "MoodEntry":
        return cls(
            emotion=draft.emotion,
            intensity=draft.intensity,
            description=draft.description,
            insights=insights,
            date=date,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emotion": self.emotion,
            "intensity": self.intensity,
            "description": self.description,
            "insights": self.insights,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoodEntry":
        return cls(
            emotion=data["emotion"],
            intensity=data["intensity"],
            description=data["description"],
            insights=data.get("insights", ""),
            date=datetime.fromisoformat(data["date"]),
        )
