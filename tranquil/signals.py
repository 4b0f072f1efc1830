"""
Signal extraction over the assessment history: date-ordered frame,
gap-based weekly buckets, trend slope, and windowed means.

All functions are pure. The caller's history is never mutated.
"""

from typing import Dict, Iterable, Sequence

import numpy as np
import pandas as pd


FRAME_COLUMNS = (
    "date", "stress_level", "mood_level", "sleep_hours", "work_hours",
    "exercise_minutes", "social_interaction", "screen_time", "caffeine",
    "alcohol", "user_id",
)


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def as_timestamp(value) -> pd.Timestamp:
    """
    Normalize a date, datetime or ISO string to a UTC timestamp.

    Naive values are read as UTC, so mixed date / datetime / tz-aware
    inputs order consistently.
    """
    return pd.to_datetime(value, utc=True)


def to_frame(history: Iterable) -> pd.DataFrame:
    """
    Build a DataFrame of the history sorted ascending by date.

    Uses a stable sort, so samples sharing a date keep their input order.
    Dates are normalized to UTC (see `as_timestamp`).
    """
    rows = [{col: getattr(a, col) for col in FRAME_COLUMNS} for a in history]
    df = pd.DataFrame(rows, columns=list(FRAME_COLUMNS))
    if df.empty:
        return df

    df["date"] = pd.to_datetime(df["date"], utc=True)
    df = df.sort_values("date", kind="mergesort")
    df.reset_index(drop=True, inplace=True)
    return df


# ---------------------------------------------------------------------------
# Weekly bucketing
# ---------------------------------------------------------------------------

def assign_buckets(dates: pd.Series, gap_days: int) -> np.ndarray:
    """
    Label each (sorted) date with a bucket index.

    A bucket is anchored at its first sample. Later samples join it while
    they fall less than `gap_days` after the anchor; the first sample at or
    beyond that gap anchors the next bucket. Boundaries follow the data's own
    cadence, not calendar weeks.
    """
    gap = pd.Timedelta(days=gap_days)
    labels = np.zeros(len(dates), dtype=np.int64)

    bucket = 0
    anchor = None
    for i, ts in enumerate(dates):
        if anchor is None:
            anchor = ts
        elif ts - anchor >= gap:
            bucket += 1
            anchor = ts
        labels[i] = bucket

    return labels


def weekly_averages(df: pd.DataFrame, gap_days: int) -> np.ndarray:
    """Mean stress_level per bucket, in bucket order."""
    if df.empty:
        return np.array([], dtype=np.float64)
    buckets = assign_buckets(df["date"], gap_days)
    means = df["stress_level"].groupby(buckets, sort=True).mean()
    return means.to_numpy(dtype=np.float64)


# ---------------------------------------------------------------------------
# Trend
# ---------------------------------------------------------------------------

def ols_slope(y: Sequence[float]) -> float:
    """
    Ordinary least-squares slope of y against its 0-based index.

        slope = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)

    Returns 0.0 for fewer than two points.
    """
    y = np.asarray(y, dtype=np.float64)
    n = len(y)
    if n < 2:
        return 0.0
    x = np.arange(n, dtype=np.float64)
    sum_x = x.sum()
    denom = n * np.dot(x, x) - sum_x * sum_x
    if denom == 0.0:
        return 0.0
    return float((n * np.dot(x, y) - sum_x * y.sum()) / denom)


# ---------------------------------------------------------------------------
# Windowed means
# ---------------------------------------------------------------------------

def column_means(df: pd.DataFrame, columns: Iterable[str]) -> Dict[str, float]:
    """Mean of each column; an empty frame averages to 0.0."""
    if df.empty:
        return {col: 0.0 for col in columns}
    return {col: float(df[col].astype(np.float64).mean()) for col in columns}


def recent_means(df: pd.DataFrame, columns: Iterable[str], window: int) -> Dict[str, float]:
    """Column means over the last `window` rows (fewer if the frame is shorter)."""
    return column_means(df.tail(window), columns)
