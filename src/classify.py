"""
src/classify.py

Maps continuous fields to ordered categorical labels using fixed thresholds.

Each scalar function returns exactly one label for every value in its domain
and raises ValidationError outside it. Out-of-range inputs are never clamped
into the nearest band.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

import pandas as pd

from src.data_dictionary import ID_COLUMN
from src.errors import ValidationError

STUDY_INTENSITY_LABELS: Tuple[str, ...] = ("Light", "Moderate", "Intense")
SCREEN_TIME_LABELS: Tuple[str, ...] = ("Low", "Moderate", "High", "Very High")
PERFORMANCE_LABELS: Tuple[str, ...] = (
    "Fail",
    "Sufficient",
    "Satisfactory",
    "Good",
    "Very Good",
    "Excellent",
    "Outstanding",
)


def _as_float(name: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be numeric, got {value!r}") from e


def _check_hours(name: str, value: float) -> float:
    value = _as_float(name, value)
    if math.isnan(value) or value < 0:
        raise ValidationError(f"{name} must be a non-negative number, got {value}")
    return value


def study_intensity(study_hours: float) -> str:
    h = _check_hours("study_hours_per_day", study_hours)
    if h < 2:
        return "Light"
    if h < 4:
        return "Moderate"
    return "Intense"


def screen_time_level(social_media_hours: float, netflix_hours: float) -> str:
    """
    Band combined social media + streaming time.

    Bands are upper-inclusive (a total of exactly 2.0 is still Low) and are
    checked from the highest band down.
    """
    s = _check_hours("social_media_hours", social_media_hours) + _check_hours("netflix_hours", netflix_hours)
    if s > 6:
        return "Very High"
    if s > 4:
        return "High"
    if s > 2:
        return "Moderate"
    return "Low"


def performance_group(exam_score: float) -> str:
    score = _as_float("exam_score", exam_score)
    if math.isnan(score) or score < 0 or score > 100:
        raise ValidationError(f"exam_score must lie in [0, 100], got {score}")
    if score < 50:
        return "Fail"
    if score < 60:
        return "Sufficient"
    if score < 70:
        return "Satisfactory"
    if score < 80:
        return "Good"
    if score < 90:
        return "Very Good"
    if score < 100:
        return "Excellent"
    return "Outstanding"


# derived column -> (source columns, labelling function, ordered labels)
LABELERS: Dict[str, Tuple[List[str], Callable[..., str], Tuple[str, ...]]] = {
    "study_intensity": (["study_hours_per_day"], study_intensity, STUDY_INTENSITY_LABELS),
    "screen_time_level": (["social_media_hours", "netflix_hours"], screen_time_level, SCREEN_TIME_LABELS),
    "performance_group": (["exam_score"], performance_group, PERFORMANCE_LABELS),
}


def label_column(df: pd.DataFrame, name: str) -> pd.Series:
    """Compute one derived label for every row as an ordered categorical."""
    sources, fn, labels = LABELERS[name]
    values = []
    for idx, row in zip(df.index, df[sources].itertuples(index=False, name=None)):
        try:
            values.append(fn(*row))
        except ValidationError as e:
            who = df.at[idx, ID_COLUMN] if ID_COLUMN in df.columns else idx
            raise ValidationError(f"{name} for {who}: {e}") from e
    return pd.Series(pd.Categorical(values, categories=list(labels), ordered=True), index=df.index, name=name)


def add_labels(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of df with study_intensity, screen_time_level and performance_group added."""
    out = df.copy()
    for name in LABELERS:
        out[name] = label_column(out, name)
    return out
