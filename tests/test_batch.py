import json
from pathlib import Path

import pytest

from spendwise.batch import run_batch
from spendwise.core.errors import ValidationError

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "spending-data.json"


def test_run_batch_writes_reports(tmp_path):
    overview = run_batch(str(DATA_FILE), str(tmp_path))

    assert overview["total_people"] == 3
    assert overview["people_over_budget"] == 1
    assert sorted(p.name for p in tmp_path.glob("*.pdf")) == [
        "STU001_financial_report.pdf",
        "STU002_financial_report.pdf",
        "STU003_financial_report.pdf",
    ]
    assert len(list(tmp_path.glob("*_financial_report.json"))) == 3
    assert (tmp_path / "summary.csv").exists()
    assert (tmp_path / "categories.csv").exists()
    saved = json.loads((tmp_path / "cohort_summary.json").read_text(encoding="utf-8"))
    assert saved == overview


def test_run_batch_stops_on_invalid_dataset(tmp_path):
    data_file = tmp_path / "bad.json"
    data_file.write_text(json.dumps({"records": [{"id": "X", "name": "Y"}]}), encoding="utf-8")

    with pytest.raises(ValidationError):
        run_batch(str(data_file), str(tmp_path / "reports"))
    assert not (tmp_path / "reports").exists()
