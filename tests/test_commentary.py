import pandas as pd

from src.aggregate import GroupSummary
from src.commentary import build_commentary, describe_correlations, describe_groups, describe_linear_fit


SUMMARIES = [
    GroupSummary("Light", 10, {"exam_score": 52.0}),
    GroupSummary("Moderate", 30, {"exam_score": 68.5}),
    GroupSummary("Intense", 10, {"exam_score": 84.0}),
]


def test_describe_groups_mentions_extremes_and_gap():
    text = describe_groups(SUMMARIES, "study_intensity")
    assert text.startswith("By study intensity, Light (n=10, 20%) averaged 52.0")
    assert "Intense group has the highest" in text
    assert "Light group the lowest" in text
    assert "gap of 32.0 points" in text
    assert "largest group is Moderate with 30 students" in text


def test_describe_groups_single_and_empty():
    single = describe_groups(SUMMARIES[:1], "study_intensity")
    assert "gap" not in single
    assert "No records" in describe_groups([], "study_intensity")


def test_describe_correlations():
    corr = pd.Series(
        {"study_hours_per_day": 0.82, "netflix_hours": -0.17, "mental_health_rating": 0.32, "age": 0.01},
        name="r_with_exam_score",
    )
    corr = corr.reindex(corr.abs().sort_values(ascending=False).index)
    text = describe_correlations(corr, top_n=2)
    assert "Study hours / day shows a strong positive association with exam score (r = +0.82)" in text
    assert "Mental health rating shows a weak positive" in text
    assert "Age is essentially unrelated" in text


def test_describe_correlations_all_nan():
    corr = pd.Series({"age": float("nan")}, name="r_with_exam_score")
    assert "No numeric field" in describe_correlations(corr)


def test_linear_fit_sentence():
    text = describe_linear_fit("study_hours_per_day", "exam_score", 9.5, 35.0, 0.68)
    assert "35.0 + 9.50" in text
    assert "68%" in text


def test_build_commentary_order():
    corr = pd.Series({"study_hours_per_day": 0.8}, name="r_with_exam_score")
    paragraphs = build_commentary({"study_intensity": SUMMARIES}, corr)
    assert len(paragraphs) == 2
    assert paragraphs[0].startswith("Study hours / day")
    assert paragraphs[1].startswith("By study intensity")
