"""
src/loader.py

Purpose
-------
Reads the student habits CSV into a DataFrame and checks it against the fixed
schema before anything downstream touches it.

Loading fails fast: a missing column, a non-numeric value in a numeric
field, or a value outside its domain stops the run. Nothing is imputed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

import pandas as pd

from src.data_dictionary import (
    BOOLEAN_COLUMNS,
    CATEGORICAL_COLUMNS,
    COLUMNS,
    ID_COLUMN,
    NUMERIC_COLUMNS,
    NUMERIC_DOMAINS,
)
from src.errors import LoadError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("data/student_habits_performance.csv")

_BOOL_MAP = {"yes": True, "no": False, "true": True, "false": False, "1": True, "0": False}


def read_students_csv(source: Union[str, Path, IO]) -> pd.DataFrame:
    """
    Read the raw CSV from a path or an open file (e.g. a dashboard upload).

    ``keep_default_na`` is switched off because "None" is a real value of
    parental_education_level; only empty cells count as missing.

    Raises
    ------
    LoadError
        If the file does not exist or pandas cannot parse it.
    """
    if hasattr(source, "read"):
        name = getattr(source, "name", "upload")
    else:
        source = Path(source)
        name = source.name
        if not source.exists():
            raise LoadError(
                f"Data file not found at {source}. "
                f"Generate one first: python -m src.make_synthetic_data"
            )

    try:
        df = pd.read_csv(source, keep_default_na=False, na_values=[""], dtype={ID_COLUMN: str})
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise LoadError(f"Could not parse {name}: {e}") from e

    logger.info("Read %d rows, %d columns from %s", len(df), df.shape[1], name)
    return df


def prepare_students(df: pd.DataFrame) -> pd.DataFrame:
    """
    Check and type a raw frame so it matches the dataset schema.

    This function:
      1) Ensures every schema column is present (hard error if missing).
      2) Drops unexpected columns (logged).
      3) Parses numeric columns; any non-numeric or empty cell is an error.
      4) Maps Yes/No columns to bool.
      5) Checks numeric values against their domains.

    Parameters
    ----------
    df : pd.DataFrame
        Frame as read from CSV (or uploaded in the dashboard).

    Returns
    -------
    pd.DataFrame
        A new frame with exactly the schema columns, in file order.

    Raises
    ------
    LoadError
        Missing columns, empty data, unparseable or missing values.
    ValidationError
        A numeric value outside the domain of its field.
    """
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise LoadError(f"CSV is missing required columns: {missing}. Found: {list(df.columns)}")

    extra = [c for c in df.columns if c not in COLUMNS]
    if extra:
        logger.warning("Ignoring extra columns: %s", extra)

    if df.empty:
        raise LoadError("CSV contains a header but no records.")

    out = df[COLUMNS].copy()

    if out[ID_COLUMN].isna().any():
        raise LoadError(f"{ID_COLUMN} has {int(out[ID_COLUMN].isna().sum())} empty values.")
    out[ID_COLUMN] = out[ID_COLUMN].astype(str)

    for c in NUMERIC_COLUMNS:
        parsed = pd.to_numeric(out[c], errors="coerce")
        bad = parsed.isna()
        if bad.any():
            examples = out.loc[bad, c].head(3).tolist()
            raise LoadError(f"Column {c!r} has {int(bad.sum())} missing/non-numeric values, e.g. {examples}")
        out[c] = parsed.astype(float)

    for c in CATEGORICAL_COLUMNS:
        if out[c].isna().any():
            raise LoadError(f"Column {c!r} has {int(out[c].isna().sum())} empty values.")
        out[c] = out[c].astype(str).str.strip()

    for c in BOOLEAN_COLUMNS:
        mapped = out[c].astype(str).str.strip().str.lower().map(_BOOL_MAP)
        bad = mapped.isna()
        if bad.any():
            examples = out.loc[bad, c].head(3).tolist()
            raise LoadError(f"Column {c!r} must be Yes/No; found {examples}")
        out[c] = mapped.astype(bool)

    validate_domains(out)
    return out


def validate_domains(df: pd.DataFrame) -> None:
    """Raise ValidationError on the first numeric field with an out-of-domain value."""
    for c, (low, high, low_inclusive) in NUMERIC_DOMAINS.items():
        if c not in df.columns:
            continue
        values = df[c]
        too_low = values < low if low_inclusive else values <= low
        too_high = values > high if high is not None else pd.Series(False, index=values.index)
        bad = too_low | too_high
        if bad.any():
            first = bad.idxmax()
            who = df.at[first, ID_COLUMN] if ID_COLUMN in df.columns else first
            bound = f"[{low}, {high}]" if low_inclusive else f"({low}, {high if high is not None else 'inf'}]"
            raise ValidationError(
                f"{c}={values.at[first]} for {who} is outside {bound} "
                f"({int(bad.sum())} offending rows)"
            )


def load_students(path: Union[str, Path] = DEFAULT_DATA_PATH) -> pd.DataFrame:
    """Read and validate the dataset in one step."""
    df = prepare_students(read_students_csv(path))
    logger.info("Loaded %d student records", len(df))
    return df
