"""
src/charts.py

Figures for the report and the dashboard. Every function returns the
matplotlib Figure (the dashboard hands it to st.pyplot) and, when
``out_path`` is given, also saves it as PNG.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import matplotlib

matplotlib.use("Agg")  # non-interactive backend
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402
from sklearn.linear_model import LinearRegression  # noqa: E402

from src.aggregate import GroupSummary, label_order  # noqa: E402
from src.data_dictionary import display_name  # noqa: E402

PathLike = Union[str, Path]


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float
    r_squared: float
    n: int


def _save(fig: plt.Figure, out_path: Optional[PathLike]) -> None:
    if out_path:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=150, bbox_inches="tight")


def plot_group_bar(
    summaries: Sequence[GroupSummary],
    field_name: str = "exam_score",
    title: str = "",
    xlabel: str = "",
    out_path: Optional[PathLike] = None,
) -> plt.Figure:
    """Bar chart of each group's mean ``field_name``, annotated with n."""
    labels = [s.label for s in summaries]
    values = [s.means[field_name] for s in summaries]

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar(labels, values, color="teal")
    for bar, s in zip(bars, summaries):
        ax.annotate(
            f"n={s.count}",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=9,
        )
    ax.set_xlabel(xlabel)
    ax.set_ylabel(f"Mean {display_name(field_name).lower()}")
    ax.set_title(title or f"Mean {display_name(field_name).lower()} by group")
    fig.tight_layout()
    _save(fig, out_path)
    return fig


def fit_line(x: pd.Series, y: pd.Series) -> LinearFit:
    """Ordinary least-squares fit of y on x."""
    X = np.asarray(x, dtype=float).reshape(-1, 1)
    Y = np.asarray(y, dtype=float)
    if len(Y) < 2 or np.ptp(X) == 0:
        raise ValueError("Need at least two distinct x values for a linear fit.")
    model = LinearRegression().fit(X, Y)
    return LinearFit(
        slope=float(model.coef_[0]),
        intercept=float(model.intercept_),
        r_squared=float(model.score(X, Y)),
        n=int(len(Y)),
    )


def plot_scatter_fit(
    df: pd.DataFrame,
    x: str = "study_hours_per_day",
    y: str = "exam_score",
    hue: Optional[str] = None,
    out_path: Optional[PathLike] = None,
) -> Tuple[plt.Figure, LinearFit]:
    """Scatter of y against x with the fitted regression line drawn over it."""
    fit = fit_line(df[x], df[y])

    fig, ax = plt.subplots(figsize=(7, 5))
    if hue:
        sns.scatterplot(data=df, x=x, y=y, hue=hue, s=14, alpha=0.6, ax=ax)
    else:
        ax.scatter(df[x], df[y], s=10, alpha=0.6)
    xs = np.linspace(df[x].min(), df[x].max(), 100)
    ax.plot(
        xs,
        fit.intercept + fit.slope * xs,
        color="red",
        linewidth=2,
        label=f"y = {fit.slope:.2f}x + {fit.intercept:.2f} (R² = {fit.r_squared:.2f})",
    )
    ax.set_xlabel(display_name(x))
    ax.set_ylabel(display_name(y))
    ax.set_title(f"{display_name(y)} vs. {display_name(x)}")
    ax.legend(fontsize=8)
    fig.tight_layout()
    _save(fig, out_path)
    return fig, fit


def plot_box_by_group(
    df: pd.DataFrame,
    label_col: str,
    field_name: str = "exam_score",
    out_path: Optional[PathLike] = None,
) -> plt.Figure:
    """Box plot of ``field_name`` for each label present, in label order."""
    present = set(df[label_col].dropna().unique().tolist())
    order = [lbl for lbl in label_order(df[label_col]) if lbl in present]

    fig, ax = plt.subplots(figsize=(8, 5))
    sns.boxplot(data=df, x=label_col, y=field_name, order=order, color="lightsteelblue", ax=ax)
    ax.set_xlabel(display_name(label_col))
    ax.set_ylabel(display_name(field_name))
    ax.set_title(f"{display_name(field_name)} by {display_name(label_col).lower()}")
    fig.tight_layout()
    _save(fig, out_path)
    return fig


def plot_density_by_group(
    df: pd.DataFrame,
    label_col: str,
    field_name: str = "exam_score",
    out_path: Optional[PathLike] = None,
) -> plt.Figure:
    """
    Kernel density of ``field_name`` per label.

    Labels with fewer than two distinct values cannot be smoothed and are
    left out of the plot.
    """
    fig, ax = plt.subplots(figsize=(8, 5))
    for lbl in label_order(df[label_col]):
        values = df.loc[df[label_col] == lbl, field_name]
        if values.nunique() < 2:
            continue
        sns.kdeplot(x=values, ax=ax, label=str(lbl), fill=True, alpha=0.25)
    ax.set_xlabel(display_name(field_name))
    ax.set_ylabel("Density")
    ax.set_title(f"Distribution of {display_name(field_name).lower()} by {display_name(label_col).lower()}")
    if ax.get_legend_handles_labels()[0]:
        ax.legend(title=display_name(label_col))
    fig.tight_layout()
    _save(fig, out_path)
    return fig


def plot_correlation_bar(
    corr: pd.Series,
    out_path: Optional[PathLike] = None,
) -> plt.Figure:
    """Horizontal bar chart of correlations; positive teal, negative coral."""
    corr = corr.dropna().iloc[::-1]
    colors = ["teal" if v >= 0 else "coral" for v in corr.values]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.barh([display_name(c) for c in corr.index], corr.values, color=colors)
    ax.axvline(0, color="black", linewidth=1)
    ax.set_xlabel("Pearson r")
    ax.set_title(f"Correlation with {str(corr.name).replace('r_with_', '').replace('_', ' ')}")
    fig.tight_layout()
    _save(fig, out_path)
    return fig


def close(fig: plt.Figure) -> None:
    plt.close(fig)
