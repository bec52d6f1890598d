"""Session state helpers for Streamlit."""
from __future__ import annotations

import streamlit as st

from entries import DEFAULT_INTENSITY, EMOTION_LABELS

FORM_DEFAULTS = {
    "emotion": EMOTION_LABELS[2],
    "intensity": DEFAULT_INTENSITY,
    "description": "",
}


def init_session_state() -> None:
    defaults = {
        **FORM_DEFAULTS,
        "journal": None,
        "insights": None,
        "error": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def set_result(insights: str | None = None, error: str | None = None) -> None:
    st.session_state.insights = insights
    st.session_state.error = error


def reset_form() -> None:
    """Clear the form and the last result; history is left alone."""
    for key, value in FORM_DEFAULTS.items():
        st.session_state[key] = value
    set_result()
