"""
src/make_synthetic_data.py

Creates a realistic-looking synthetic student habits dataset with the same
16-column schema as the public "student habits vs academic performance" file.
Useful for demos and for running the report without downloading anything.

Outputs:
  data/student_habits_performance.csv
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from src.data_dictionary import COLUMNS

logger = logging.getLogger(__name__)

DEFAULT_OUT_PATH = Path("data/student_habits_performance.csv")


def generate_student_habits_dataset(
    n_students: int = 1000,
    random_state: int = 42,
) -> pd.DataFrame:
    rng = np.random.default_rng(random_state)

    # --- Profile
    age = rng.integers(17, 25, size=n_students)
    gender = rng.choice(["Female", "Male", "Other"], size=n_students, p=[0.48, 0.48, 0.04])
    part_time_job = rng.choice(["Yes", "No"], size=n_students, p=[0.21, 0.79])
    parental_education_level = rng.choice(
        ["None", "High School", "Bachelor", "Master"],
        size=n_students,
        p=[0.09, 0.39, 0.35, 0.17],
    )
    internet_quality = rng.choice(["Poor", "Average", "Good"], size=n_students, p=[0.16, 0.39, 0.45])
    diet_quality = rng.choice(["Poor", "Fair", "Good"], size=n_students, p=[0.19, 0.44, 0.37])
    extracurricular_participation = rng.choice(["Yes", "No"], size=n_students, p=[0.32, 0.68])

    # --- Daily habits
    study_hours = np.clip(rng.normal(3.5, 1.5, size=n_students), 0, 8.3)
    social_media_hours = np.clip(rng.normal(2.5, 1.2, size=n_students), 0, 7.2)
    netflix_hours = np.clip(rng.normal(1.8, 1.1, size=n_students), 0, 5.4)
    attendance = np.clip(rng.normal(84, 9.4, size=n_students), 56, 100)
    sleep_hours = np.clip(rng.normal(6.5, 1.2, size=n_students), 3.2, 10)
    exercise_frequency = rng.integers(0, 8, size=n_students)
    mental_health_rating = rng.integers(1, 11, size=n_students)

    # --- Exam score with realistic relationships
    # More study, sleep, exercise and better mental health help; screen time hurts.
    diet_bonus = pd.Series(diet_quality).map({"Poor": -1.5, "Fair": 0.0, "Good": 1.0}).to_numpy()
    score = (
        35.0
        + 9.5 * study_hours
        - 2.4 * social_media_hours
        - 2.3 * netflix_hours
        + 0.12 * (attendance - 84)
        + 2.0 * (sleep_hours - 6.5)
        + 1.4 * exercise_frequency
        + 1.9 * mental_health_rating
        + diet_bonus
        + rng.normal(0, 5.5, size=n_students)  # noise so it's not too clean
    )
    exam_score = np.clip(score, 18.0, 100.0)

    df = pd.DataFrame(
        {
            "student_id": [f"S{1000+i}" for i in range(n_students)],
            "age": age,
            "gender": gender,
            "study_hours_per_day": np.round(study_hours, 1),
            "social_media_hours": np.round(social_media_hours, 1),
            "netflix_hours": np.round(netflix_hours, 1),
            "part_time_job": part_time_job,
            "attendance_percentage": np.round(attendance, 1),
            "sleep_hours": np.round(sleep_hours, 1),
            "diet_quality": diet_quality,
            "exercise_frequency": exercise_frequency,
            "parental_education_level": parental_education_level,
            "internet_quality": internet_quality,
            "mental_health_rating": mental_health_rating,
            "extracurricular_participation": extracurricular_participation,
            "exam_score": np.round(exam_score, 1),
        }
    )

    return df[COLUMNS]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    out_path = DEFAULT_OUT_PATH
    out_path.parent.mkdir(parents=True, exist_ok=True)

    df = generate_student_habits_dataset(n_students=1000, random_state=42)
    df.to_csv(out_path, index=False)

    # Quick quality checks
    logger.info("Wrote %d rows to %s", len(df), out_path)
    logger.info("Mean exam score: %.1f", df["exam_score"].mean())
    logger.info("Columns: %s", list(df.columns))


if __name__ == "__main__":
    main()
