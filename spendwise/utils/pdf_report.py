import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence, Union

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from spendwise.models.metrics import MetricsResult
from spendwise.utils.alerts import Alert
from spendwise.utils.summary import money, percent

logger = logging.getLogger(__name__)


def _latin1(text: str) -> str:
    # core fonts only cover Latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def _line(pdf: FPDF, text: str) -> None:
    pdf.cell(0, 8, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _heading(pdf: FPDF, text: str) -> None:
    pdf.ln(4)
    pdf.set_font("Helvetica", "B", 12)
    _line(pdf, text)
    pdf.set_font("Helvetica", "", 11)


def build_person_pdf(result: MetricsResult, alerts: Sequence[Alert] = ()) -> bytes:
    profile, budget, spending, timeline = result.profile, result.budget, result.spending, result.timeline

    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    _line(pdf, f"Financial Report - {profile.name}")

    pdf.set_font("Helvetica", "", 11)
    _line(pdf, f"ID: {profile.id}")
    _line(pdf, f"Period: {profile.period}")
    _line(pdf, f"Generated: {datetime.utcnow().strftime('%Y-%m-%d %H:%M')} UTC")

    _heading(pdf, "Budget:")
    _line(pdf, f"Budget Limit: {money(budget.allocated)}")
    _line(pdf, f"Spent: {money(budget.spent)} ({percent(budget.utilization)})")
    _line(pdf, f"Remaining: {money(budget.remaining)}")
    _line(pdf, f"Status: {budget.status}")

    _heading(pdf, "Spending Metrics:")
    _line(pdf, f"Transactions: {spending.transaction_count}")
    _line(pdf, f"Average per Transaction: {money(spending.average)}")
    _line(pdf, f"Daily Average: {money(spending.daily_average)}")

    _heading(pdf, "Categories:")
    if result.categories:
        for c in result.categories:
            _line(pdf, f"- {c.name}: {money(c.amount)} ({percent(c.percentage)}) - {c.transaction_count} transactions")
    else:
        _line(pdf, "None")

    _heading(pdf, "Timeline:")
    for label, day in (("Highest", timeline.highest_spending_day), ("Lowest", timeline.lowest_spending_day)):
        date = day.date.isoformat() if day.date is not None else "N/A"
        _line(pdf, f"{label} spending day: {date} ({money(day.amount)})")

    _heading(pdf, "Alerts:")
    if alerts:
        for alert in alerts:
            _line(pdf, f"[{alert.type}] {alert.message}")
            _line(pdf, f"    Action: {alert.action}")
    else:
        _line(pdf, "None")

    return bytes(pdf.output())


def save_person_report(
    result: MetricsResult,
    alerts: Sequence[Alert],
    reports_dir: Union[str, Path],
) -> Path:
    target_dir = Path(reports_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / f"{result.profile.id}_financial_report.pdf"
    path.write_bytes(build_person_pdf(result, alerts))
    logger.info(f"Report saved: {path}")
    return path
