"""Streamlit client for mood journaling with AI-generated insights."""
from __future__ import annotations

import logging

import streamlit as st

from api_client import InsightRequestError, get_client
from charts import derive_chart_series, mood_trend_chart
from entries import EMOTION_LABELS, MAX_INTENSITY, MIN_INTENSITY, MoodDraft
from history_store import HistoryStore, HistoryStoreError
from journal import MoodInputError, MoodJournal
from state import init_session_state, reset_form, set_result

LOGGER = logging.getLogger(__name__)


def load_journal() -> MoodJournal:
    # Built once per session so the history file is read only at startup
    if st.session_state.journal is None:
        try:
            st.session_state.journal = MoodJournal(get_client(), HistoryStore())
        except HistoryStoreError as e:
            st.error(f"Could not load your mood history: {e}")
            st.stop()
    return st.session_state.journal


def render_capture(journal: MoodJournal):
    st.header("Track Your Mood")
    st.selectbox("Emotion", EMOTION_LABELS, key="emotion")
    st.slider("Mood Level", min_value=MIN_INTENSITY, max_value=MAX_INTENSITY, step=1, key="intensity")
    st.text_area("How are you feeling today?", key="description")

    col1, col2 = st.columns(2)
    with col1:
        submitted = st.button("Submit", disabled=journal.loading)
    with col2:
        st.button("Clear", on_click=reset_form)

    if submitted:
        draft = MoodDraft(
            emotion=st.session_state.emotion,
            intensity=int(st.session_state.intensity),
            description=st.session_state.description,
        )
        with st.spinner("Fetching insights..."):
            try:
                set_result(insights=journal.submit(draft))
            except MoodInputError as e:
                st.warning(f"Input Required: {e}")
            except InsightRequestError as e:
                set_result(error=str(e))

    if st.session_state.insights:
        st.success(f"Insights: {st.session_state.insights}")
    if st.session_state.error:
        st.error(f"Error: {st.session_state.error}")


def render_history(journal: MoodJournal):
    st.header("Mood History")
    history = journal.history
    if not history:
        st.info("No entries yet.")
        return

    series = derive_chart_series(history)
    st.plotly_chart(mood_trend_chart(series), use_container_width=True)

    rows = [
        {
            "date": entry.date.strftime("%Y-%m-%d %H:%M"),
            "emotion": entry.emotion,
            "intensity": entry.intensity,
            "description": entry.description,
            "insights": entry.insights,
        }
        for entry in reversed(history)
    ]
    st.table(rows)


def main():
    st.set_page_config(page_title="Mood Journal", layout="wide")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    init_session_state()
    journal = load_journal()

    page = st.sidebar.radio("Navigation", ["Track", "History"])

    if page == "Track":
        render_capture(journal)
    elif page == "History":
        render_history(journal)


if __name__ == "__main__":
    main()
