import pandas as pd
import pytest

from src.data_dictionary import COLUMNS
from src.make_synthetic_data import generate_student_habits_dataset


def make_raw(rows):
    """Raw (as-read) frame from a list of partial dicts; unspecified fields get valid defaults."""
    base = {
        "age": 20,
        "gender": "Female",
        "study_hours_per_day": 3.0,
        "social_media_hours": 1.0,
        "netflix_hours": 1.0,
        "part_time_job": "No",
        "attendance_percentage": 90.0,
        "sleep_hours": 7.0,
        "diet_quality": "Fair",
        "exercise_frequency": 3,
        "parental_education_level": "Bachelor",
        "internet_quality": "Good",
        "mental_health_rating": 6,
        "extracurricular_participation": "Yes",
        "exam_score": 70.0,
    }
    records = []
    for i, r in enumerate(rows):
        rec = {"student_id": f"T{i:03d}", **base, **r}
        records.append(rec)
    return pd.DataFrame(records, columns=COLUMNS)


@pytest.fixture
def three_students():
    return make_raw(
        [
            {"study_hours_per_day": 1.0, "exam_score": 40.0},
            {"study_hours_per_day": 3.0, "exam_score": 65.0},
            {"study_hours_per_day": 5.0, "exam_score": 95.0},
        ]
    )


@pytest.fixture(scope="session")
def synthetic_raw():
    return generate_student_habits_dataset(n_students=300, random_state=7)


@pytest.fixture
def synthetic_csv(tmp_path, synthetic_raw):
    path = tmp_path / "students.csv"
    synthetic_raw.to_csv(path, index=False)
    return path
