"""
src/data_dictionary.py

Column -> description mapping used by the dashboard and the report, plus the
fixed schema of the student habits dataset (column order, field kinds and
the numeric domain each field must stay inside).
"""

from typing import Dict, List, Optional, Tuple

DATA_DICTIONARY = {
    "student_id": "Unique identifier for the student (opaque string).",
    "age": "Student age in years.",
    "gender": "Self-reported gender (Female, Male, Other).",
    "study_hours_per_day": "Average hours spent studying per day.",
    "social_media_hours": "Average hours per day on social media.",
    "netflix_hours": "Average hours per day watching streaming video.",
    "part_time_job": "Whether the student holds a part-time job.",
    "attendance_percentage": "Class attendance rate (0–100).",
    "sleep_hours": "Average hours of sleep per night.",
    "diet_quality": "Self-rated diet quality (Poor, Fair, Good).",
    "exercise_frequency": "Exercise sessions per week (0–7).",
    "parental_education_level": "Highest parental education (None, High School, Bachelor, Master).",
    "internet_quality": "Home internet quality (Poor, Average, Good).",
    "mental_health_rating": "Self-rated mental health (1 = poor, 10 = excellent).",
    "extracurricular_participation": "Whether the student takes part in extracurricular activities.",
    "exam_score": "Final exam score (0–100).",
    "study_intensity": "Derived: Light (<2h), Moderate (2–4h) or Intense (≥4h) daily study.",
    "screen_time_level": "Derived: Low, Moderate, High or Very High from social media + streaming hours.",
    "performance_group": "Derived: grade band of exam_score, from Fail (<50) to Outstanding (100).",
}

ID_COLUMN = "student_id"

# File order of the 16 raw columns.
COLUMNS: List[str] = [
    "student_id",
    "age",
    "gender",
    "study_hours_per_day",
    "social_media_hours",
    "netflix_hours",
    "part_time_job",
    "attendance_percentage",
    "sleep_hours",
    "diet_quality",
    "exercise_frequency",
    "parental_education_level",
    "internet_quality",
    "mental_health_rating",
    "extracurricular_participation",
    "exam_score",
]

NUMERIC_COLUMNS: List[str] = [
    "age",
    "study_hours_per_day",
    "social_media_hours",
    "netflix_hours",
    "attendance_percentage",
    "sleep_hours",
    "exercise_frequency",
    "mental_health_rating",
    "exam_score",
]

CATEGORICAL_COLUMNS: List[str] = [
    "gender",
    "diet_quality",
    "parental_education_level",
    "internet_quality",
]

BOOLEAN_COLUMNS: List[str] = [
    "part_time_job",
    "extracurricular_participation",
]

# (low, high, low_inclusive); high is always inclusive, None means unbounded.
NUMERIC_DOMAINS: Dict[str, Tuple[float, Optional[float], bool]] = {
    "age": (0.0, None, False),
    "study_hours_per_day": (0.0, 24.0, True),
    "social_media_hours": (0.0, 24.0, True),
    "netflix_hours": (0.0, 24.0, True),
    "attendance_percentage": (0.0, 100.0, True),
    "sleep_hours": (0.0, 24.0, True),
    "exercise_frequency": (0.0, 7.0, True),
    "mental_health_rating": (1.0, 10.0, True),
    "exam_score": (0.0, 100.0, True),
}

# Human-readable axis labels for charts and tables.
DISPLAY_NAMES = {
    "age": "Age",
    "study_hours_per_day": "Study hours / day",
    "social_media_hours": "Social media hours / day",
    "netflix_hours": "Streaming hours / day",
    "attendance_percentage": "Attendance (%)",
    "sleep_hours": "Sleep hours / night",
    "exercise_frequency": "Exercise sessions / week",
    "mental_health_rating": "Mental health rating",
    "exam_score": "Exam score",
    "study_intensity": "Study intensity",
    "screen_time_level": "Screen time level",
    "performance_group": "Performance group",
    "gender": "Gender",
    "diet_quality": "Diet quality",
    "parental_education_level": "Parental education",
    "internet_quality": "Internet quality",
    "part_time_job": "Part-time job",
    "extracurricular_participation": "Extracurricular participation",
}


def display_name(column: str) -> str:
    return DISPLAY_NAMES.get(column, column.replace("_", " ").capitalize())
