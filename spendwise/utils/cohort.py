from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from spendwise.models.metrics import MetricsResult
from spendwise.utils.analyzer import round_money, round_percent


@dataclass(frozen=True)
class CohortRow:
    id: str
    name: str
    budget_utilization: Decimal
    total_spent: Decimal
    status: str
    top_category: str


@dataclass(frozen=True)
class CohortOverview:
    """Group-level view over many people's results."""

    total_people: int
    average_budget_utilization: Decimal
    people_over_budget: int
    total_spending: Decimal
    people: List[CohortRow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["average_budget_utilization"] = float(self.average_budget_utilization)
        data["total_spending"] = float(self.total_spending)
        for row in data["people"]:
            row["budget_utilization"] = float(row["budget_utilization"])
            row["total_spent"] = float(row["total_spent"])
        return data


def cohort_overview(results: Sequence[MetricsResult]) -> CohortOverview:
    rows = [
        CohortRow(
            id=r.profile.id,
            name=r.profile.name,
            budget_utilization=r.budget.utilization,
            total_spent=r.budget.spent,
            status=r.budget.status,
            top_category=r.top_category.name if r.top_category else "None",
        )
        for r in results
    ]
    if rows:
        average = round_percent(sum((row.budget_utilization for row in rows), Decimal("0")) / len(rows))
    else:
        average = Decimal("0")

    return CohortOverview(
        total_people=len(rows),
        average_budget_utilization=average,
        people_over_budget=sum(1 for r in results if r.budget.is_over_budget),
        total_spending=round_money(sum((row.total_spent for row in rows), Decimal("0"))),
        people=rows,
    )
