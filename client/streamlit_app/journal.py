"""Mood capture controller: validation, relay round trip and history upkeep."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List

from api_client import APIClient, InsightRequestError
from entries import EMOTION_LABELS, MAX_INTENSITY, MIN_INTENSITY, MoodDraft, MoodEntry
from history_store import HistoryStore

LOGGER = logging.getLogger(__name__)


class MoodInputError(ValueError):
    """The draft was rejected before anything was sent."""


def validate_draft(draft: MoodDraft) -> None:
    if not draft.description or not draft.description.strip():
        raise MoodInputError("Please enter a description of your mood.")
    if draft.emotion not in EMOTION_LABELS:
        raise MoodInputError(f"Unknown emotion: {draft.emotion!r}")
    if isinstance(draft.intensity, bool) or not isinstance(draft.intensity, int):
        raise MoodInputError("Intensity must be a whole number.")
    if not MIN_INTENSITY <= draft.intensity <= MAX_INTENSITY:
        raise MoodInputError(f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}.")


def load_history(store: HistoryStore) -> List[MoodEntry]:
    """Read the persisted log; an absent log is an empty one."""
    history = store.load()
    LOGGER.info("Loaded %d mood entries from %s", len(history), store.path)
    return history


class MoodJournal:
    """Owns the in-memory history log for one client session.

    The log is read from ``store`` once, on construction. ``submit`` only
    changes the log (and writes it back) after the relay answered.
    """

    def __init__(self, client: APIClient, store: HistoryStore, clock: Callable[[], datetime] = datetime.now) -> None:
        self.client = client
        self.store = store
        self.clock = clock
        # Advisory only; a second submit while this is set is not refused.
        self.loading = False
        self._history: List[MoodEntry] = load_history(store)

    @property
    def history(self) -> List[MoodEntry]:
        return list(self._history)

    def submit(self, draft: MoodDraft) -> str:
        """Send ``draft`` to the relay, record the result and return the insight text.

        Raises ``MoodInputError`` for invalid drafts and ``InsightRequestError``
        when the relay call fails. Neither touches the history.
        """
        validate_draft(draft)
        self.loading = True
        try:
            insights = self.client.submit_mood(draft.emotion, draft.intensity, draft.description)
        except InsightRequestError as exc:
            LOGGER.warning("Submission failed: %s", exc)
            raise
        finally:
            self.loading = False

        entry = MoodEntry.from_draft(draft, insights=insights, date=self.clock())
        updated = self._history + [entry]
        self.store.save(updated)
        self._history = updated
        return insights
