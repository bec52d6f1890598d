"""Chart data shaping for the mood history."""
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import plotly.express as px

from entries import MoodEntry

# Entries whose intensity is missing or not a number are plotted at this
# value instead of being dropped from the series.
MISSING_INTENSITY_VALUE = 0
DATE_LABEL_FORMAT = "%m/%d/%Y"


def coerce_intensity(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return MISSING_INTENSITY_VALUE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return MISSING_INTENSITY_VALUE
    if number != number:  # NaN
        return MISSING_INTENSITY_VALUE
    return number


def derive_chart_series(history: Sequence[MoodEntry]) -> List[Tuple[str, float]]:
    """Return one ``(date label, intensity)`` pair per entry, in history order."""
    return [(entry.date.strftime(DATE_LABEL_FORMAT), coerce_intensity(entry.intensity)) for entry in history]


def series_to_chart_data(series: Sequence[Tuple[str, float]]) -> Dict[str, list]:
    """Column layout accepted by ``st.line_chart``."""
    return {
        "entry": list(range(1, len(series) + 1)),
        "date": [label for label, _ in series],
        "intensity": [value for _, value in series],
    }


def mood_trend_chart(series: Sequence[Tuple[str, float]]):
    """Line chart of intensity per entry, with the date labels on the x axis."""
    data = series_to_chart_data(series)
    fig = px.line(data, x="entry", y="intensity", hover_data=["date"], title="Mood Intensity", markers=True)
    # entries on the same day share a label but keep their own point
    fig.update_xaxes(title="Date", tickmode="array", tickvals=data["entry"], ticktext=data["date"])
    fig.update_yaxes(title="Intensity", range=[0, 5.5])
    return fig
