"""Tests for chart series derivation."""

from datetime import datetime

from charts import (
    MISSING_INTENSITY_VALUE,
    coerce_intensity,
    derive_chart_series,
    mood_trend_chart,
    series_to_chart_data,
)
from entries import MoodEntry


def _entry(intensity, day=1):
    return MoodEntry(
        emotion="Neutral",
        intensity=intensity,
        description="d",
        insights="i",
        date=datetime(2026, 3, day, 18, 0),
    )


def test_series_follows_history_order():
    history = [_entry(2, day=5), _entry(4, day=1), _entry(5, day=9)]

    assert derive_chart_series(history) == [("03/05/2026", 2), ("03/01/2026", 4), ("03/09/2026", 5)]


def test_missing_or_non_numeric_intensity_is_zero():
    history = [_entry(None), _entry("abc"), _entry(float("nan")), _entry("3")]

    values = [value for _, value in derive_chart_series(history)]

    assert values == [MISSING_INTENSITY_VALUE, MISSING_INTENSITY_VALUE, MISSING_INTENSITY_VALUE, 3]
    assert len(values) == len(history)


def test_coerce_intensity_rejects_bool():
    assert coerce_intensity(True) == MISSING_INTENSITY_VALUE


def test_empty_history():
    assert derive_chart_series([]) == []


def test_chart_data_columns():
    data = series_to_chart_data([("03/01/2026", 2), ("03/01/2026", 4)])

    assert data == {"entry": [1, 2], "date": ["03/01/2026", "03/01/2026"], "intensity": [2, 4]}


def test_trend_chart_labels_axis_with_dates():
    series = derive_chart_series([_entry(2, day=5), _entry(4, day=5), _entry(None, day=7)])

    fig = mood_trend_chart(series)

    assert tuple(fig.layout.xaxis.ticktext) == ("03/05/2026", "03/05/2026", "03/07/2026")
    assert tuple(fig.layout.xaxis.tickvals) == (1, 2, 3)
    assert list(fig.data[0].y) == [2, 4, MISSING_INTENSITY_VALUE]
