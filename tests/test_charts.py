import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from src import charts  # noqa: E402
from src.aggregate import correlations, summarize_by  # noqa: E402
from src.classify import add_labels  # noqa: E402
from src.loader import prepare_students  # noqa: E402


@pytest.fixture(scope="module")
def labelled(synthetic_raw):
    return add_labels(prepare_students(synthetic_raw))


def test_group_bar_saves_png(labelled, tmp_path):
    summaries = summarize_by(labelled, "study_intensity")
    out = tmp_path / "nested" / "bar.png"
    fig = charts.plot_group_bar(summaries, "exam_score", out_path=out)
    assert out.exists()
    assert len(fig.axes[0].patches) == len(summaries)
    charts.close(fig)


def test_scatter_fit_recovers_line(three_students):
    df = prepare_students(three_students)
    df["exam_score"] = 10.0 + 5.0 * df["study_hours_per_day"]
    fig, fit = charts.plot_scatter_fit(df, "study_hours_per_day", "exam_score")
    assert fit.slope == pytest.approx(5.0)
    assert fit.intercept == pytest.approx(10.0)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.n == 3
    charts.close(fig)


def test_fit_line_needs_distinct_x(three_students):
    df = prepare_students(three_students)
    with pytest.raises(ValueError):
        charts.fit_line(df["age"], df["exam_score"])


def test_box_and_density(labelled, tmp_path):
    fig = charts.plot_box_by_group(labelled, "screen_time_level", out_path=tmp_path / "box.png")
    charts.close(fig)
    fig = charts.plot_density_by_group(labelled, "study_intensity", out_path=tmp_path / "kde.png")
    charts.close(fig)
    assert (tmp_path / "box.png").exists()
    assert (tmp_path / "kde.png").exists()


def test_correlation_bar(labelled):
    fig = charts.plot_correlation_bar(correlations(labelled))
    assert fig.axes[0].get_xlabel() == "Pearson r"
    charts.close(fig)
