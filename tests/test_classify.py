import math

import pandas as pd
import pytest

from src.classify import (
    PERFORMANCE_LABELS,
    SCREEN_TIME_LABELS,
    STUDY_INTENSITY_LABELS,
    add_labels,
    performance_group,
    screen_time_level,
    study_intensity,
)
from src.errors import ValidationError
from src.loader import prepare_students

from conftest import make_raw


@pytest.mark.parametrize(
    "hours, expected",
    [
        (0.0, "Light"),
        (1.99, "Light"),
        (2.0, "Moderate"),
        (3.99, "Moderate"),
        (4.0, "Intense"),
        (12.0, "Intense"),
    ],
)
def test_study_intensity_boundaries(hours, expected):
    assert study_intensity(hours) == expected


@pytest.mark.parametrize(
    "social, netflix, expected",
    [
        (0.0, 0.0, "Low"),
        (2.0, 0.0, "Low"),
        (1.5, 0.5, "Low"),
        (2.01, 0.0, "Moderate"),
        (3.0, 1.0, "Moderate"),
        (4.01, 0.0, "High"),
        (4.0, 2.0, "High"),
        (6.01, 0.0, "Very High"),
        (5.0, 3.0, "Very High"),
    ],
)
def test_screen_time_boundaries(social, netflix, expected):
    assert screen_time_level(social, netflix) == expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (0.0, "Fail"),
        (49.99, "Fail"),
        (50.0, "Sufficient"),
        (59.99, "Sufficient"),
        (60.0, "Satisfactory"),
        (70.0, "Good"),
        (80.0, "Very Good"),
        (89.99, "Very Good"),
        (90.0, "Excellent"),
        (99.99, "Excellent"),
        (100.0, "Outstanding"),
    ],
)
def test_performance_group_boundaries(score, expected):
    assert performance_group(score) == expected


@pytest.mark.parametrize("score", [-0.01, 100.01, 150.0, math.nan])
def test_performance_group_rejects_out_of_range(score):
    with pytest.raises(ValidationError):
        performance_group(score)


@pytest.mark.parametrize("hours", [-0.1, math.nan])
def test_negative_or_missing_hours_rejected(hours):
    with pytest.raises(ValidationError):
        study_intensity(hours)
    with pytest.raises(ValidationError):
        screen_time_level(hours, 1.0)
    with pytest.raises(ValidationError):
        screen_time_level(1.0, hours)


def test_every_value_maps_to_exactly_one_known_label():
    for i in range(0, 1001):
        score = i / 10
        assert performance_group(score) in PERFORMANCE_LABELS
        assert study_intensity(score / 10) in STUDY_INTENSITY_LABELS
        assert screen_time_level(score / 20, score / 20) in SCREEN_TIME_LABELS


def test_add_labels_end_to_end(three_students):
    labelled = add_labels(prepare_students(three_students))

    assert list(labelled["study_intensity"]) == ["Light", "Moderate", "Intense"]
    assert list(labelled["performance_group"]) == ["Fail", "Satisfactory", "Excellent"]
    assert labelled["study_intensity"].cat.ordered
    assert list(labelled["performance_group"].cat.categories) == list(PERFORMANCE_LABELS)


def test_add_labels_does_not_mutate_input(three_students):
    df = prepare_students(three_students)
    before = list(df.columns)
    add_labels(df)
    assert list(df.columns) == before


def test_add_labels_names_offending_student():
    df = make_raw([{"exam_score": 70.0}, {"exam_score": 101.0}])
    with pytest.raises(ValidationError, match="T001"):
        add_labels(df)


def test_add_labels_on_empty_frame():
    df = make_raw([]).astype({"study_hours_per_day": float, "social_media_hours": float,
                              "netflix_hours": float, "exam_score": float})
    out = add_labels(df)
    assert len(out) == 0
    assert isinstance(out["screen_time_level"].dtype, pd.CategoricalDtype)


@pytest.mark.parametrize("bad", ["lots", None, [1.0]])
def test_non_numeric_inputs_raise_validation_error(bad):
    with pytest.raises(ValidationError, match="numeric"):
        study_intensity(bad)
    with pytest.raises(ValidationError, match="numeric"):
        screen_time_level(1.0, bad)
    with pytest.raises(ValidationError, match="numeric"):
        performance_group(bad)
