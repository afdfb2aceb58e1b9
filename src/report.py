"""
src/report.py

Builds the descriptive-statistics report: loads the student habits CSV,
derives study intensity / screen time / performance labels, summarises exam
scores per group, and writes tables, figures and a markdown report.

Outputs (under --out-dir, default reports/):
  tables/*.csv         group summaries, crosstab, correlations, describe()
  figures/*.png        bar, scatter + fit, box, density, correlation charts
  labelled.csv         input records with the three derived label columns
  report.md            commentary + tables in one readable document
  config.json          run settings
  data_schema.json     basic info about columns

Run (default)
-------------
python -m src.report

Run (custom)
------------
python -m src.report --data data/student_habits_performance.csv --out-dir reports
python -m src.report --synthetic --n-students 1000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from src import charts
from src.aggregate import (
    GroupSummary,
    category_means,
    correlations,
    crosstab_counts,
    describe_numeric,
    summarize_by,
    summary_frame,
)
from src.classify import LABELERS, add_labels
from src.commentary import build_commentary, describe_linear_fit
from src.data_dictionary import ID_COLUMN, display_name
from src.errors import ReportError
from src.loader import DEFAULT_DATA_PATH, load_students, prepare_students
from src.make_synthetic_data import generate_student_habits_dataset

logger = logging.getLogger(__name__)

REPORT_DIR = Path("reports")

# Numeric fields averaged in every group table.
SUMMARY_FIELDS: List[str] = [
    "exam_score",
    "study_hours_per_day",
    "social_media_hours",
    "netflix_hours",
    "sleep_hours",
    "attendance_percentage",
    "mental_health_rating",
]

# Raw categorical / boolean columns compared on mean exam score.
CATEGORY_BREAKDOWNS: List[str] = [
    "gender",
    "part_time_job",
    "diet_quality",
    "internet_quality",
    "parental_education_level",
    "extracurricular_participation",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Descriptive report of student habits vs exam performance.")
    parser.add_argument(
        "--data",
        type=str,
        default=str(DEFAULT_DATA_PATH),
        help="Path to the student habits CSV.",
    )
    parser.add_argument(
        "--out-dir",
        type=str,
        default=str(REPORT_DIR),
        help="Directory to write tables, figures and report.md into.",
    )
    parser.add_argument(
        "--synthetic",
        action="store_true",
        help="Generate a synthetic dataset instead of reading --data.",
    )
    parser.add_argument(
        "--n-students",
        type=int,
        default=1000,
        help="Number of synthetic records (only with --synthetic).",
    )
    parser.add_argument(
        "--random-state",
        type=int,
        default=42,
        help="Random seed for the synthetic dataset.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def build_data_schema(df: pd.DataFrame) -> Dict:
    """
    Create a simple schema artifact: column names, dtypes, and basic row counts.
    """
    return {
        "n_rows": int(df.shape[0]),
        "n_cols": int(df.shape[1]),
        "id_col": ID_COLUMN,
        "columns": [
            {
                "name": c,
                "dtype": str(df[c].dtype),
                "missing_rate": float(df[c].isna().mean()),
            }
            for c in df.columns
        ],
    }


def group_summaries(labelled: pd.DataFrame, fields: Sequence[str] = SUMMARY_FIELDS) -> Dict[str, List[GroupSummary]]:
    """Summaries for each derived label column, in label order."""
    return {name: summarize_by(labelled, name, fields) for name in LABELERS}


def _table_block(df: pd.DataFrame, float_format: str = "{:.2f}") -> str:
    return "```\n" + df.to_string(float_format=float_format.format) + "\n```"


def render_markdown(
    n_records: int,
    source: str,
    commentary: List[str],
    tables: Dict[str, pd.DataFrame],
    figures: Dict[str, str],
) -> str:
    lines = [
        "# Student habits and exam performance",
        "",
        f"Source: `{source}` ({n_records} students)",
        "",
        "## Findings",
        "",
    ]
    for paragraph in commentary:
        if paragraph:
            lines += [paragraph, ""]

    lines += ["## Tables", ""]
    for title, table in tables.items():
        lines += [f"### {title}", "", _table_block(table), ""]

    lines += ["## Figures", ""]
    for title, rel_path in figures.items():
        lines += [f"### {title}", "", f"![{title}]({rel_path})", ""]
    return "\n".join(lines)


def run_report(df: pd.DataFrame, out_dir: Path, source: str) -> Path:
    """
    Classify, aggregate and render a validated frame into ``out_dir``.

    Returns the path of the written report.md.
    """
    tables_dir = out_dir / "tables"
    figures_dir = out_dir / "figures"
    tables_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    # -----------------------------
    # 1) Classify
    # -----------------------------
    labelled = add_labels(df)
    labelled.to_csv(out_dir / "labelled.csv", index=False)

    # -----------------------------
    # 2) Aggregate
    # -----------------------------
    by_label = group_summaries(labelled)
    by_category = {c: category_means(labelled, c) for c in CATEGORY_BREAKDOWNS}
    corr = correlations(labelled, "exam_score")
    crosstab = crosstab_counts(labelled, "study_intensity", "performance_group")
    described = describe_numeric(labelled)

    tables: Dict[str, pd.DataFrame] = {}
    for name, summaries in by_label.items():
        frame = summary_frame(summaries, label_name=name)
        frame.to_csv(tables_dir / f"{name}_summary.csv", index=False)
        tables[f"By {display_name(name).lower()}"] = frame.set_index(name)
    for name, summaries in by_category.items():
        frame = summary_frame(summaries, label_name=name)
        frame.to_csv(tables_dir / f"{name}_exam_score.csv", index=False)
        tables[f"Exam score by {display_name(name).lower()}"] = frame.set_index(name)
    crosstab.to_csv(tables_dir / "study_intensity_x_performance_group.csv")
    tables["Study intensity × performance group"] = crosstab
    corr.to_frame().to_csv(tables_dir / "correlations.csv")
    tables["Correlation with exam score"] = corr.to_frame()
    described.to_csv(tables_dir / "describe.csv")
    tables["Numeric fields"] = described
    logger.info("Wrote %d tables to %s", len(tables), tables_dir)

    # -----------------------------
    # 3) Figures
    # -----------------------------
    figures: Dict[str, str] = {}

    def _keep(fig, title: str, filename: str) -> None:
        charts.close(fig)
        figures[title] = f"figures/{filename}"

    for name, summaries in by_label.items():
        filename = f"{name}_mean_exam_score.png"
        fig = charts.plot_group_bar(
            summaries,
            "exam_score",
            title=f"Mean exam score by {display_name(name).lower()}",
            xlabel=display_name(name),
            out_path=figures_dir / filename,
        )
        _keep(fig, f"Mean exam score by {display_name(name).lower()}", filename)

    fit = None
    try:
        fig, fit = charts.plot_scatter_fit(
            labelled, "study_hours_per_day", "exam_score", out_path=figures_dir / "study_hours_vs_exam_score.png"
        )
        _keep(fig, "Exam score vs. study hours", "study_hours_vs_exam_score.png")
    except ValueError as e:
        logger.warning("Skipping study hours scatter: %s", e)

    fig = charts.plot_box_by_group(
        labelled, "screen_time_level", "exam_score", out_path=figures_dir / "exam_score_by_screen_time.png"
    )
    _keep(fig, "Exam score by screen time level", "exam_score_by_screen_time.png")

    fig = charts.plot_density_by_group(
        labelled, "study_intensity", "exam_score", out_path=figures_dir / "exam_score_density_by_study.png"
    )
    _keep(fig, "Exam score distribution by study intensity", "exam_score_density_by_study.png")

    fig = charts.plot_correlation_bar(corr, out_path=figures_dir / "correlations.png")
    _keep(fig, "Correlation with exam score", "correlations.png")
    logger.info("Wrote %d figures to %s", len(figures), figures_dir)

    # -----------------------------
    # 4) Commentary + report
    # -----------------------------
    commentary = build_commentary(by_label, corr)
    if fit is not None:
        commentary.append(
            describe_linear_fit("study_hours_per_day", "exam_score", fit.slope, fit.intercept, fit.r_squared)
        )

    report_path = out_dir / "report.md"
    report_path.write_text(render_markdown(len(labelled), source, commentary, tables, figures), encoding="utf-8")
    logger.info("Wrote %s", report_path)
    return report_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    try:
        if args.synthetic:
            df = prepare_students(
                generate_student_habits_dataset(n_students=args.n_students, random_state=args.random_state)
            )
            source = f"synthetic (n={args.n_students}, seed={args.random_state})"
        else:
            df = load_students(args.data)
            source = args.data
        report_path = run_report(df, out_dir, source)
    except ReportError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    config = {
        "data_path": None if args.synthetic else str(args.data),
        "synthetic": bool(args.synthetic),
        "n_students": args.n_students if args.synthetic else int(len(df)),
        "random_state": args.random_state,
        "summary_fields": SUMMARY_FIELDS,
        "category_breakdowns": CATEGORY_BREAKDOWNS,
    }
    (out_dir / "config.json").write_text(json.dumps(config, indent=2))
    (out_dir / "data_schema.json").write_text(json.dumps(build_data_schema(df), indent=2))

    logger.info("Report complete: %s", report_path.resolve())
    return 0


if __name__ == "__main__":
    sys.exit(main())
