from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from spendwise.core.errors import NotFoundError
from spendwise.models.dataset import Dataset, PersonRecord, Transaction
from spendwise.models.metrics import (
    BudgetAnalysis,
    CategorySummary,
    MetricsResult,
    ProfileInfo,
    SpendingDay,
    SpendingMetrics,
    TimelineAnalysis,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# (upper bound inclusive, status); anything above the last bound is over budget
BUDGET_BANDS = (
    (Decimal("50"), "Conservative"),
    (Decimal("75"), "Moderate"),
    (Decimal("90"), "High"),
    (Decimal("100"), "Near Limit"),
)
OVER_BUDGET = "Over Budget"


def round_money(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def round_percent(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator == 0:
        return ZERO
    return numerator / denominator


class SpendingAnalyzer:
    """
    Stateless metrics engine. Every method derives its numbers from the
    transactions it is handed, so one instance can serve any number of
    datasets, including concurrently.

    All rounding is ROUND_HALF_UP and happens once, on exact sums.
    """

    def total_spent(self, transactions: Iterable[Transaction]) -> Decimal:
        return sum((t.amount for t in transactions), ZERO)

    def spending_metrics(self, transactions: Sequence[Transaction]) -> SpendingMetrics:
        if not transactions:
            return SpendingMetrics(total=ZERO, average=ZERO, transaction_count=0, daily_average=ZERO)

        total = self.total_spent(transactions)
        unique_days = len({t.date for t in transactions})
        return SpendingMetrics(
            total=round_money(total),
            average=round_money(_ratio(total, Decimal(len(transactions)))),
            transaction_count=len(transactions),
            daily_average=round_money(_ratio(total, Decimal(unique_days))),
        )

    @staticmethod
    def budget_status(utilization: Decimal) -> str:
        for upper, status in BUDGET_BANDS:
            if utilization <= upper:
                return status
        return OVER_BUDGET

    def budget_analysis(self, transactions: Sequence[Transaction], budget: Decimal) -> BudgetAnalysis:
        spent = self.total_spent(transactions)
        utilization = _ratio(spent, budget) * HUNDRED
        return BudgetAnalysis(
            allocated=budget,
            spent=round_money(spent),
            remaining=round_money(budget - spent),
            utilization=round_percent(utilization),
            status=self.budget_status(utilization),
            is_over_budget=spent > budget,
        )

    def category_breakdown(self, transactions: Sequence[Transaction]) -> List[CategorySummary]:
        """
        Group spending by category, highest amount first.

        Categories with equal amounts keep the order in which they first
        appear in ``transactions``; the first entry is what reports present
        as the top category.
        """
        totals: Dict[str, Decimal] = {}
        counts: Dict[str, int] = {}
        for t in transactions:
            totals[t.category] = totals.get(t.category, ZERO) + t.amount
            counts[t.category] = counts.get(t.category, 0) + 1

        grand_total = sum(totals.values(), ZERO)
        categories = [
            CategorySummary(
                name=category,
                amount=round_money(amount),
                transaction_count=counts[category],
                percentage=round_percent(_ratio(amount, grand_total) * HUNDRED),
                average_per_transaction=round_money(amount / counts[category]),
            )
            for category, amount in totals.items()
        ]
        # stable sort: ties keep first-seen order
        return sorted(categories, key=lambda c: c.amount, reverse=True)

    def spending_timeline(self, transactions: Sequence[Transaction]) -> TimelineAnalysis:
        daily: Dict = {}
        for t in transactions:
            daily[t.date] = daily.get(t.date, ZERO) + t.amount

        days = tuple(
            SpendingDay(date=day, amount=round_money(amount))
            for day, amount in sorted(daily.items(), key=lambda item: item[0])
        )
        if not days:
            return TimelineAnalysis()

        highest = lowest = days[0]
        for day in days[1:]:
            if day.amount > highest.amount:
                highest = day
            if day.amount < lowest.amount:
                lowest = day
        return TimelineAnalysis(daily_spending=days, highest_spending_day=highest, lowest_spending_day=lowest)

    def analyze_record(self, record: PersonRecord) -> MetricsResult:
        transactions = record.transactions
        return MetricsResult(
            profile=ProfileInfo(
                id=record.id,
                name=record.name,
                period=record.period,
                budget=record.budget_limit,
            ),
            spending=self.spending_metrics(transactions),
            budget=self.budget_analysis(transactions, record.budget_limit),
            categories=tuple(self.category_breakdown(transactions)),
            timeline=self.spending_timeline(transactions),
        )

    def analyze_person(self, dataset: Dataset, person_id: str) -> MetricsResult:
        return self.analyze_record(dataset.get(person_id))

    def analyze_all(
        self,
        dataset: Dataset,
        person_ids: Optional[Iterable[str]] = None,
    ) -> List[MetricsResult]:
        """
        Analyze several people, skipping ids the dataset does not contain.
        """
        ids = dataset.person_ids() if person_ids is None else list(person_ids)
        results: List[MetricsResult] = []
        for person_id in ids:
            try:
                results.append(self.analyze_person(dataset, person_id))
            except NotFoundError as e:
                logger.warning(f"Skipping analysis: {e}")
        logger.info(f"Analyzed {len(results)} of {len(ids)} requested people")
        return results
