"""HTTP client for the insight relay."""
from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from config import BACKEND_BASE_URL, REQUEST_TIMEOUT

LOGGER = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to fetch insights. Please try again."
NO_INSIGHTS_MESSAGE = "No insights returned."


class InsightRequestError(Exception):
    """A mood submission did not produce insights; ``str(exc)`` is user-facing."""


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL, timeout: int = REQUEST_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # -------------------- Mood --------------------
    def submit_mood(self, emotion: str, intensity: int, description: str) -> str:
        """Post one mood entry and return the insight text."""
        payload = {"emotion": emotion, "intensity": intensity, "description": description}
        res = self._post("/api/mood", json=payload)
        return res.get("insights") or NO_INSIGHTS_MESSAGE

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _post(self, path: str, json: Dict[str, Any] | None = None) -> Dict[str, Any]:
        try:
            res = requests.post(f"{self.base_url}{path}", json=json or {}, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.error("POST %s failed: %s", path, exc)
            raise InsightRequestError(GENERIC_FAILURE_MESSAGE) from exc
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            LOGGER.error("POST %s -> %s %s; body=%s", path, res.status_code, res.reason, res.text)
            raise InsightRequestError(_error_message(res)) from exc
        if not res.text:
            return {}
        try:
            body = res.json()
        except ValueError as exc:
            LOGGER.error("POST %s returned a non-JSON body: %s", path, res.text[:200])
            raise InsightRequestError(GENERIC_FAILURE_MESSAGE) from exc
        if not isinstance(body, dict):
            LOGGER.error("POST %s returned %s instead of an object", path, type(body).__name__)
            raise InsightRequestError(GENERIC_FAILURE_MESSAGE)
        return body


def _error_message(res: requests.Response) -> str:
    try:
        body = res.json()
    except ValueError:
        return GENERIC_FAILURE_MESSAGE
    if isinstance(body, dict):
        for field in ("error", "message", "detail"):
            value = body.get(field)
            if isinstance(value, str) and value:
                return value
    return GENERIC_FAILURE_MESSAGE


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
