"""Configuration for the Streamlit mood journal client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:5000")
HISTORY_DIR = os.getenv("MOOD_HISTORY_DIR", "data")
HISTORY_KEY = os.getenv("MOOD_HISTORY_KEY", "moodHistory")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "60"))
