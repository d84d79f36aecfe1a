"""
Batch job: analyze every person in a dataset file and write the reports.

Run with ``python -m spendwise.batch [data_file]``.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from spendwise.core.config import settings
from spendwise.utils.alerts import generate_alerts
from spendwise.utils.analyzer import SpendingAnalyzer
from spendwise.utils.cohort import cohort_overview
from spendwise.utils.exporter import (
    export_categories_csv,
    export_summary_csv,
    save_json_report,
    write_csv,
)
from spendwise.utils.loader import load_dataset_file
from spendwise.utils.pdf_report import save_person_report

logger = logging.getLogger(__name__)


def run_batch(data_file: Optional[str] = None, reports_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Load, analyze and report on every person in ``data_file``.

    A ValidationError from loading aborts the whole run.
    """
    data_file = data_file or settings.DATA_FILE
    out_dir = Path(reports_dir or settings.REPORTS_DIR)

    dataset = load_dataset_file(data_file)
    analyzer = SpendingAnalyzer()
    results = analyzer.analyze_all(dataset)

    for result in results:
        alerts = generate_alerts(result)
        if alerts:
            logger.info(f"{len(alerts)} alerts for {result.profile.id}")
        save_person_report(result, alerts, out_dir)
        save_json_report(result, out_dir)

    write_csv(export_summary_csv(results), out_dir / "summary.csv")
    write_csv(export_categories_csv(results), out_dir / "categories.csv")

    overview = cohort_overview(results).to_dict()
    (out_dir / "cohort_summary.json").write_text(json.dumps(overview, indent=2), encoding="utf-8")
    logger.info(f"Processed {len(results)} people, reports in {out_dir}")
    return overview


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_batch(sys.argv[1] if len(sys.argv) > 1 else None)
