from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class ProfileInfo:
    id: str
    name: str
    period: str
    budget: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "period": self.period,
            "budget": _plain(self.budget),
        }


@dataclass(frozen=True)
class SpendingMetrics:
    total: Decimal
    average: Decimal
    transaction_count: int
    daily_average: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": _plain(self.total),
            "average": _plain(self.average),
            "transactionCount": self.transaction_count,
            "dailyAverage": _plain(self.daily_average),
        }


@dataclass(frozen=True)
class BudgetAnalysis:
    allocated: Decimal
    spent: Decimal
    remaining: Decimal
    utilization: Decimal
    status: str
    is_over_budget: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allocated": _plain(self.allocated),
            "spent": _plain(self.spent),
            "remaining": _plain(self.remaining),
            "utilization": _plain(self.utilization),
            "status": self.status,
            "isOverBudget": self.is_over_budget,
        }


@dataclass(frozen=True)
class CategorySummary:
    """Spending aggregated for a single category."""

    name: str
    amount: Decimal
    transaction_count: int
    percentage: Decimal
    average_per_transaction: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "amount": _plain(self.amount),
            "transactionCount": self.transaction_count,
            "percentage": _plain(self.percentage),
            "averagePerTransaction": _plain(self.average_per_transaction),
        }


@dataclass(frozen=True)
class SpendingDay:
    date: Optional[dt.date]
    amount: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {"date": _plain(self.date), "amount": _plain(self.amount)}


# Placeholder for the highest/lowest day when nothing was spent
EMPTY_DAY = SpendingDay(date=None, amount=Decimal("0"))


@dataclass(frozen=True)
class TimelineAnalysis:
    daily_spending: Tuple[SpendingDay, ...] = ()
    highest_spending_day: SpendingDay = EMPTY_DAY
    lowest_spending_day: SpendingDay = EMPTY_DAY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dailySpending": [day.to_dict() for day in self.daily_spending],
            "highestSpendingDay": self.highest_spending_day.to_dict(),
            "lowestSpendingDay": self.lowest_spending_day.to_dict(),
        }


@dataclass(frozen=True)
class MetricsResult:
    """
    Derived metrics for one person at one analysis call.

    Instances are never updated; run the analyzer again to refresh.
    """

    profile: ProfileInfo
    spending: SpendingMetrics
    budget: BudgetAnalysis
    categories: Tuple[CategorySummary, ...] = field(default_factory=tuple)
    timeline: TimelineAnalysis = field(default_factory=TimelineAnalysis)

    @property
    def top_category(self) -> Optional[CategorySummary]:
        return self.categories[0] if self.categories else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "spending": self.spending.to_dict(),
            "budget": self.budget.to_dict(),
            "categories": [category.to_dict() for category in self.categories],
            "timeline": self.timeline.to_dict(),
        }
