import csv
import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence, Union

from spendwise.models.metrics import MetricsResult

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = [
    "Person ID",
    "Name",
    "Budget",
    "Total Spent",
    "Budget Utilization %",
    "Status",
    "Transactions Count",
    "Average Transaction",
    "Top Category",
    "Top Category Amount",
]


def export_summary_csv(results: Sequence[MetricsResult]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=SUMMARY_FIELDS, lineterminator="\n")
    writer.writeheader()
    for r in results:
        top = r.top_category
        writer.writerow({
            "Person ID": r.profile.id,
            "Name": r.profile.name,
            "Budget": f"{r.budget.allocated:.2f}",
            "Total Spent": f"{r.budget.spent:.2f}",
            "Budget Utilization %": f"{r.budget.utilization:.1f}",
            "Status": r.budget.status,
            "Transactions Count": r.spending.transaction_count,
            "Average Transaction": f"{r.spending.average:.2f}",
            "Top Category": top.name if top else "None",
            "Top Category Amount": f"{top.amount:.2f}" if top else 0,
        })
    return output.getvalue()


def export_categories_csv(results: Sequence[MetricsResult]) -> str:
    """One column per category seen in any result; people without it get 0."""
    categories: List[str] = []
    for r in results:
        for c in r.categories:
            if c.name not in categories:
                categories.append(c.name)

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=["Person ID", "Name", *categories], lineterminator="\n")
    writer.writeheader()
    for r in results:
        amounts: Dict[str, str] = {c.name: f"{c.amount:.2f}" for c in r.categories}
        row = {"Person ID": r.profile.id, "Name": r.profile.name}
        row.update({name: amounts.get(name, 0) for name in categories})
        writer.writerow(row)
    return output.getvalue()


def write_csv(content: str, path: Union[str, Path]) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info(f"CSV exported to: {target}")
    return target


def save_json_report(result: MetricsResult, reports_dir: Union[str, Path]) -> Path:
    """Write ``<id>_financial_report.json``: metadata plus the full analysis."""
    target_dir = Path(reports_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    report = {
        "metadata": {
            "id": result.profile.id,
            "generatedAt": datetime.utcnow().isoformat(),
            "version": "1.0",
        },
        **result.to_dict(),
    }
    path = target_dir / f"{result.profile.id}_financial_report.json"
    path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    logger.info(f"Report saved: {path}")
    return path
