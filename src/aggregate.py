"""
src/aggregate.py

Purpose
-------
Group-wise summary statistics over the labelled student frame.

Summaries are always recomputed from the full frame; nothing here keeps
state between calls. A label with no matching records produces no
GroupSummary at all.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from src.data_dictionary import NUMERIC_COLUMNS


@dataclass(frozen=True)
class GroupSummary:
    """
    Count and per-field means for all records sharing one label.

    ``means`` maps each requested numeric field to its arithmetic mean over
    the group, in the order the fields were requested.
    """
    label: str
    count: int
    means: Dict[str, float] = field(default_factory=dict)

    def mean(self, field_name: str) -> float:
        return self.means[field_name]


def _check_columns(df: pd.DataFrame, label_col: str, fields: Sequence[str]) -> None:
    if label_col not in df.columns:
        raise ValueError(f"Unknown label column {label_col!r}")
    missing = [f for f in fields if f not in df.columns]
    if missing:
        raise ValueError(f"Unknown fields: {missing}")


def label_order(series: pd.Series) -> List:
    """Categories in declared order for categoricals, sorted unique values otherwise."""
    if isinstance(series.dtype, pd.CategoricalDtype):
        return list(series.cat.categories)
    return sorted(series.dropna().unique().tolist(), key=str)


def summarize_by(
    df: pd.DataFrame,
    label_col: str,
    fields: Sequence[str] = ("exam_score",),
    sort_by: str = "label",
    ascending: bool = True,
) -> List[GroupSummary]:
    """
    Build one GroupSummary per label present in ``df[label_col]``.

    Parameters
    ----------
    df : pd.DataFrame
        Labelled student records.
    label_col : str
        Column to group by (a derived label or any categorical column).
    fields : Sequence[str]
        Numeric columns to average within each group.
    sort_by : str
        "label" (category order), "count", or one of ``fields`` (by its mean).
    ascending : bool
        Sort direction.

    Returns
    -------
    List[GroupSummary]

    Raises
    ------
    ValueError
        If the label column, a field, or the sort key is unknown.
    """
    fields = list(fields)
    _check_columns(df, label_col, fields)
    if sort_by not in ("label", "count") and sort_by not in fields:
        raise ValueError(f"sort_by must be 'label', 'count' or one of {fields}; got {sort_by!r}")

    grouped = df.groupby(label_col, observed=True, sort=False)
    counts = grouped.size()
    means = grouped[fields].mean() if fields else pd.DataFrame(index=counts.index)

    order = {lbl: i for i, lbl in enumerate(label_order(df[label_col]))}
    summaries = [
        GroupSummary(
            label=str(lbl),
            count=int(counts.loc[lbl]),
            means={f: float(means.at[lbl, f]) for f in fields},
        )
        for lbl in sorted(counts.index, key=lambda x: order.get(x, len(order)))
    ]

    if sort_by == "count":
        summaries.sort(key=lambda s: s.count, reverse=not ascending)
    elif sort_by != "label":
        summaries.sort(key=lambda s: s.means[sort_by], reverse=not ascending)
    elif not ascending:
        summaries.reverse()
    return summaries


def category_means(
    df: pd.DataFrame,
    column: str,
    field_name: str = "exam_score",
    sort_by: str = "label",
    ascending: bool = True,
) -> List[GroupSummary]:
    """Summaries keyed on a raw categorical or boolean column (gender, diet, part-time job...)."""
    return summarize_by(df, column, [field_name], sort_by=sort_by, ascending=ascending)


def summary_frame(summaries: Sequence[GroupSummary], label_name: str = "label") -> pd.DataFrame:
    """Tidy table of summaries: label, count, then one mean_<field> column per field."""
    rows = []
    for s in summaries:
        row = {label_name: s.label, "count": s.count}
        row.update({f"mean_{f}": v for f, v in s.means.items()})
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=[label_name, "count"])
    return pd.DataFrame(rows)


def crosstab_counts(df: pd.DataFrame, row_col: str, col_col: str) -> pd.DataFrame:
    """Counts of records for each (row label, column label) pair; empty categories dropped."""
    for c in (row_col, col_col):
        if c not in df.columns:
            raise ValueError(f"Unknown column {c!r}")
    ct = pd.crosstab(df[row_col], df[col_col])
    ct = ct.loc[ct.sum(axis=1) > 0, ct.sum(axis=0) > 0]
    return ct


def correlations(
    df: pd.DataFrame,
    target: str = "exam_score",
    columns: Optional[Sequence[str]] = None,
) -> pd.Series:
    """
    Pearson r of each numeric column with ``target``, strongest first.

    Columns with zero variance get NaN and sort last.
    """
    if target not in df.columns:
        raise ValueError(f"Unknown target column {target!r}")
    columns = [c for c in (columns or NUMERIC_COLUMNS) if c != target and c in df.columns]

    y = df[target].astype(float)
    out = {}
    for c in columns:
        x = df[c].astype(float)
        if x.var() == 0 or y.var() == 0 or len(df) < 2:
            out[c] = np.nan
        else:
            out[c] = float(np.corrcoef(x, y)[0, 1])

    r = pd.Series(out, name=f"r_with_{target}", dtype=float)
    strength = r.abs().fillna(-1.0)
    return r.loc[strength.sort_values(ascending=False, kind="mergesort").index]


def describe_numeric(df: pd.DataFrame) -> pd.DataFrame:
    """count/mean/std/min/quartiles/max of each numeric schema column (one row per column)."""
    cols = [c for c in NUMERIC_COLUMNS if c in df.columns]
    return df[cols].describe().T


def share_of_total(summaries: Sequence[GroupSummary]) -> Dict[str, float]:
    total = sum(s.count for s in summaries)
    if total == 0:
        return {}
    return {s.label: s.count / total for s in summaries}


def mean_gap(summaries: Sequence[GroupSummary], field_name: str) -> float:
    """Difference between the highest and lowest group mean of ``field_name`` (NaN if < 2 groups)."""
    values = [s.means[field_name] for s in summaries if not math.isnan(s.means[field_name])]
    if len(values) < 2:
        return float("nan")
    return max(values) - min(values)
