from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from spendwise.core.config import settings
from spendwise.models.metrics import MetricsResult

CRITICAL = "CRITICAL"
WARNING = "WARNING"
CAUTION = "CAUTION"
INFO = "INFO"


@dataclass(frozen=True)
class Alert:
    """A budget warning with a suggested action."""

    type: str
    message: str
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def generate_alerts(
    result: MetricsResult,
    high_frequency: Optional[int] = None,
    large_average_ratio: Optional[float] = None,
    concentration_pct: Optional[float] = None,
) -> List[Alert]:
    """
    Apply the budget alert rules to one analysis result.

    Only the most severe utilization alert is raised. Thresholds default to
    the values in settings.
    """
    if high_frequency is None:
        high_frequency = settings.HIGH_FREQUENCY_TRANSACTIONS
    if large_average_ratio is None:
        large_average_ratio = settings.LARGE_AVERAGE_RATIO
    if concentration_pct is None:
        concentration_pct = settings.CATEGORY_CONCENTRATION_PCT

    budget, spending = result.budget, result.spending
    alerts: List[Alert] = []

    if budget.utilization > 100:
        alerts.append(Alert(
            type=CRITICAL,
            message=f"Over budget by ${abs(budget.remaining):.2f}",
            action="Immediate spending reduction required",
        ))
    elif budget.utilization > 90:
        alerts.append(Alert(
            type=WARNING,
            message=f"Approaching budget limit ({budget.utilization}% used)",
            action="Monitor remaining spending carefully",
        ))
    elif budget.utilization > 75:
        alerts.append(Alert(
            type=CAUTION,
            message=f"Budget 75% utilized with {budget.utilization}% spent",
            action="Consider reducing discretionary spending",
        ))

    for category in result.categories:
        if category.percentage > Decimal(str(concentration_pct)):
            alerts.append(Alert(
                type=INFO,
                message=f"{category.name} represents {category.percentage}% of total spending",
                action=f"Consider diversifying expenses or reducing {category.name.lower()} costs",
            ))

    if spending.transaction_count > high_frequency:
        alerts.append(Alert(
            type=INFO,
            message=f"High transaction frequency: {spending.transaction_count} transactions",
            action="Consider consolidating purchases to reduce impulse spending",
        ))

    if spending.average > budget.allocated * Decimal(str(large_average_ratio)):
        alerts.append(Alert(
            type=CAUTION,
            message=f"Average transaction size is high: ${spending.average:.2f}",
            action="Review large purchases and consider if they align with priorities",
        ))

    return alerts
