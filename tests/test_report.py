import json

import pandas as pd

from src.report import main

from conftest import make_raw


def test_report_from_csv(synthetic_csv, tmp_path):
    out_dir = tmp_path / "out"
    assert main(["--data", str(synthetic_csv), "--out-dir", str(out_dir)]) == 0

    report = (out_dir / "report.md").read_text(encoding="utf-8")
    assert report.startswith("# Student habits and exam performance")
    assert "By study intensity" in report
    assert "figures/study_hours_vs_exam_score.png" in report

    for name in ["study_intensity", "screen_time_level", "performance_group"]:
        table = pd.read_csv(out_dir / "tables" / f"{name}_summary.csv")
        assert table["count"].sum() == 300
    assert (out_dir / "figures" / "exam_score_by_screen_time.png").exists()
    assert (out_dir / "figures" / "exam_score_density_by_study.png").exists()

    labelled = pd.read_csv(out_dir / "labelled.csv", keep_default_na=False)
    assert {"study_intensity", "screen_time_level", "performance_group"} <= set(labelled.columns)

    config = json.loads((out_dir / "config.json").read_text())
    assert config["synthetic"] is False
    assert config["n_students"] == 300
    schema = json.loads((out_dir / "data_schema.json").read_text())
    assert schema["n_rows"] == 300


def test_report_synthetic(tmp_path):
    out_dir = tmp_path / "syn"
    assert main(["--synthetic", "--n-students", "120", "--out-dir", str(out_dir)]) == 0
    assert (out_dir / "report.md").exists()


def test_report_missing_file_exits_nonzero(tmp_path, caplog):
    code = main(["--data", str(tmp_path / "missing.csv"), "--out-dir", str(tmp_path / "o")])
    assert code == 1
    assert "LoadError" in caplog.text
    assert not (tmp_path / "o" / "report.md").exists()


def test_report_out_of_range_exits_nonzero(synthetic_raw, tmp_path, caplog):
    bad = synthetic_raw.copy()
    bad.loc[5, "exam_score"] = 140.0
    path = tmp_path / "bad.csv"
    bad.to_csv(path, index=False)

    assert main(["--data", str(path), "--out-dir", str(tmp_path / "o")]) == 1
    assert "ValidationError" in caplog.text


def test_report_without_study_hours_spread(tmp_path, caplog):
    path = tmp_path / "flat.csv"
    make_raw([{"exam_score": 40.0}, {"exam_score": 80.0}]).to_csv(path, index=False)
    out_dir = tmp_path / "flat"

    assert main(["--data", str(path), "--out-dir", str(out_dir)]) == 0
    report = (out_dir / "report.md").read_text(encoding="utf-8")
    assert "study_hours_vs_exam_score.png" not in report
    assert "straight-line fit" not in report
    assert not (out_dir / "figures" / "study_hours_vs_exam_score.png").exists()
    assert "Skipping study hours scatter" in caplog.text


def test_report_single_record(tmp_path):
    path = tmp_path / "one.csv"
    make_raw([{"exam_score": 72.0}]).to_csv(path, index=False)
    out_dir = tmp_path / "one"

    assert main(["--data", str(path), "--out-dir", str(out_dir)]) == 0
    table = pd.read_csv(out_dir / "tables" / "performance_group_summary.csv")
    assert table["performance_group"].tolist() == ["Good"]
    assert table["count"].tolist() == [1]
