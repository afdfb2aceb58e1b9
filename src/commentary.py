"""
src/commentary.py

Short prose findings generated from group summaries and correlations, so the
report and the dashboard read as more than a wall of tables.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

import pandas as pd

from src.aggregate import GroupSummary, mean_gap, share_of_total
from src.data_dictionary import display_name


def _strength(r: float) -> str:
    a = abs(r)
    if a >= 0.7:
        return "strong"
    if a >= 0.4:
        return "moderate"
    if a >= 0.2:
        return "weak"
    return "negligible"


def describe_groups(
    summaries: Sequence[GroupSummary],
    grouping: str,
    field_name: str = "exam_score",
) -> str:
    """
    One paragraph on how ``field_name`` varies across the groups of ``grouping``.

    Groups are described in the order given; the highest and lowest group
    means are called out together with the gap between them.
    """
    if not summaries:
        return f"No records were available to group by {display_name(grouping).lower()}."

    what = display_name(field_name).lower()
    shares = share_of_total(summaries)
    parts = [
        f"{s.label} (n={s.count}, {shares[s.label]:.0%}) averaged {s.means[field_name]:.1f}"
        for s in summaries
    ]
    text = f"By {display_name(grouping).lower()}, " + "; ".join(parts) + "."

    if len(summaries) >= 2:
        best = max(summaries, key=lambda s: s.means[field_name])
        worst = min(summaries, key=lambda s: s.means[field_name])
        gap = mean_gap(summaries, field_name)
        text += (
            f" The {best.label} group has the highest mean {what} and the {worst.label} group the lowest,"
            f" a gap of {gap:.1f} points."
        )
    largest = max(summaries, key=lambda s: s.count)
    text += f" The largest group is {largest.label} with {largest.count} students."
    return text


def describe_correlations(corr: pd.Series, top_n: int = 3) -> str:
    """Name the strongest positive and negative associations with the target."""
    corr = corr.dropna()
    if corr.empty:
        return "No numeric field varies enough to measure a correlation."

    target = display_name(str(corr.name).replace("r_with_", "")).lower()
    sentences: List[str] = []
    for col, r in corr.head(top_n).items():
        direction = "rises" if r > 0 else "falls"
        sentences.append(
            f"{display_name(col)} shows a {_strength(r)} {'positive' if r > 0 else 'negative'} association"
            f" with {target} (r = {r:+.2f}): {target} {direction} as it increases."
        )
    weakest = corr.iloc[-1]
    if len(corr) > top_n and _strength(weakest) == "negligible":
        sentences.append(
            f"{display_name(corr.index[-1])} is essentially unrelated to {target} (r = {weakest:+.2f})."
        )
    return " ".join(sentences)


def describe_linear_fit(x: str, y: str, slope: float, intercept: float, r_squared: float) -> str:
    if math.isnan(slope):
        return ""
    return (
        f"A straight-line fit of {display_name(y).lower()} on {display_name(x).lower()} gives"
        f" {display_name(y).lower()} ≈ {intercept:.1f} + {slope:.2f} × {display_name(x).lower()};"
        f" each extra unit is worth about {slope:.1f} points and the line explains"
        f" {r_squared:.0%} of the variance."
    )


def build_commentary(
    group_summaries: Dict[str, Sequence[GroupSummary]],
    corr: pd.Series,
    field_name: str = "exam_score",
) -> List[str]:
    """Paragraphs for the report: correlations first, then one per grouping."""
    paragraphs = [describe_correlations(corr)]
    for grouping, summaries in group_summaries.items():
        paragraphs.append(describe_groups(summaries, grouping, field_name))
    return paragraphs
