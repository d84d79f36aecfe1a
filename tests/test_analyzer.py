import datetime as dt
from decimal import Decimal

import pytest

from spendwise.core.errors import NotFoundError
from spendwise.models.dataset import Dataset, PersonRecord, Transaction
from spendwise.utils.analyzer import SpendingAnalyzer
from spendwise.utils.loader import build_dataset


def tx(date, category, amount):
    return Transaction(date=date, category=category, amount=Decimal(str(amount)))


sample_transactions = (
    tx("2024-09-01", "Food", 120),
    tx("2024-09-02", "Food", 80),
    tx("2024-09-02", "Books", 60),
    tx("2024-09-03", "Entertainment", 40),
)

sample_record = PersonRecord(
    id="STU001",
    name="Ana Lima",
    period="Fall 2024",
    budget_limit=Decimal("400"),
    transactions=sample_transactions,
)

empty_record = PersonRecord(id="STU002", name="Ben Ode", period="Fall 2024", budget_limit=Decimal("0"))


def test_end_to_end_scenario():
    result = SpendingAnalyzer().analyze_record(sample_record)

    assert result.spending.total == Decimal("300.00")
    assert result.spending.average == Decimal("75.00")
    assert result.spending.transaction_count == 4
    assert result.spending.daily_average == Decimal("100.00")
    assert result.budget.utilization == Decimal("75.0")
    assert result.budget.status == "Moderate"
    assert result.budget.remaining == Decimal("100.00")
    assert result.budget.is_over_budget is False

    top = result.top_category
    assert top.name == "Food"
    assert top.amount == Decimal("200.00")
    assert top.percentage == Decimal("66.7")
    assert top.transaction_count == 2
    assert top.average_per_transaction == Decimal("100.00")


def test_total_is_rounded_once():
    analyzer = SpendingAnalyzer()
    # rounding each term first would give 0.00 + 0.00 + 0.00
    transactions = [tx("2024-01-01", "Food", "0.004") for _ in range(3)]
    assert analyzer.spending_metrics(transactions).total == Decimal("0.01")


def test_rounding_is_half_up():
    analyzer = SpendingAnalyzer()
    metrics = analyzer.spending_metrics([tx("2024-01-01", "Food", "2.345")])
    assert metrics.total == Decimal("2.35")


def test_zero_transactions_default_to_zero():
    result = SpendingAnalyzer().analyze_record(empty_record)

    assert result.spending.total == 0
    assert result.spending.average == 0
    assert result.spending.daily_average == 0
    assert result.spending.transaction_count == 0
    assert result.budget.utilization == 0
    assert result.budget.status == "Conservative"
    assert result.categories == ()
    assert result.top_category is None
    assert result.timeline.daily_spending == ()
    assert result.timeline.highest_spending_day.date is None
    assert result.timeline.highest_spending_day.amount == 0
    assert result.timeline.lowest_spending_day.date is None
    assert result.timeline.lowest_spending_day.amount == 0


@pytest.mark.parametrize(
    "spent, status",
    [
        (50, "Conservative"),
        (75, "Moderate"),
        (90, "High"),
        (100, "Near Limit"),
        (101, "Over Budget"),
    ],
)
def test_budget_status_boundaries(spent, status):
    budget = SpendingAnalyzer().budget_analysis([tx("2024-01-01", "Food", spent)], Decimal("100"))
    assert budget.status == status
    assert budget.is_over_budget is (spent > 100)


def test_over_budget_has_negative_remaining():
    budget = SpendingAnalyzer().budget_analysis([tx("2024-01-01", "Rent", "101")], Decimal("100"))
    assert budget.remaining == Decimal("-1.00")
    assert budget.utilization == Decimal("101.0")


def test_zero_budget_does_not_divide_by_zero():
    budget = SpendingAnalyzer().budget_analysis([tx("2024-01-01", "Food", "10")], Decimal("0"))
    assert budget.utilization == 0
    assert budget.is_over_budget is True


def test_category_percentages_sum_to_hundred():
    transactions = [
        tx("2024-01-01", "Food", "10"),
        tx("2024-01-01", "Books", "10"),
        tx("2024-01-02", "Travel", "10"),
    ]
    categories = SpendingAnalyzer().category_breakdown(transactions)
    total = sum(c.percentage for c in categories)
    assert abs(total - Decimal("100")) <= Decimal("0.1") * len(categories)


def test_category_ranking_keeps_first_seen_order_on_ties():
    transactions = [
        tx("2024-01-01", "Books", "30"),
        tx("2024-01-01", "Food", "50"),
        tx("2024-01-02", "Coffee", "20"),
        tx("2024-01-03", "Coffee", "30"),
    ]
    names = [c.name for c in SpendingAnalyzer().category_breakdown(transactions)]
    # Food 50, Books 30, Coffee 50: Food was seen before Coffee
    assert names == ["Food", "Coffee", "Books"]


def test_timeline_reduction():
    transactions = [
        tx("2024-01-02", "Food", "40"),
        tx("2024-01-01", "Food", "10"),
        tx("2024-01-02", "Books", "5"),
    ]
    timeline = SpendingAnalyzer().spending_timeline(transactions)

    assert [(d.date, d.amount) for d in timeline.daily_spending] == [
        (dt.date(2024, 1, 1), Decimal("10.00")),
        (dt.date(2024, 1, 2), Decimal("45.00")),
    ]
    assert timeline.highest_spending_day.date == dt.date(2024, 1, 2)
    assert timeline.highest_spending_day.amount == Decimal("45.00")
    assert timeline.lowest_spending_day.date == dt.date(2024, 1, 1)
    assert timeline.lowest_spending_day.amount == Decimal("10.00")


def test_timeline_ties_keep_earliest_day():
    transactions = [tx("2024-03-02", "Food", "5"), tx("2024-03-01", "Food", "5")]
    timeline = SpendingAnalyzer().spending_timeline(transactions)
    assert timeline.highest_spending_day.date == dt.date(2024, 3, 1)
    assert timeline.lowest_spending_day.date == dt.date(2024, 3, 1)


def test_analyze_person_unknown_id():
    dataset = Dataset(records=(sample_record,))
    with pytest.raises(NotFoundError) as info:
        SpendingAnalyzer().analyze_person(dataset, "STU999")
    assert info.value.person_id == "STU999"
    assert "STU999" in str(info.value)


def test_analyze_all_skips_unknown_ids():
    dataset = Dataset(records=(sample_record, empty_record))
    results = SpendingAnalyzer().analyze_all(dataset, ["STU002", "STU999", "STU001"])
    assert [r.profile.id for r in results] == ["STU002", "STU001"]


def test_analysis_from_json_payload():
    dataset = build_dataset({
        "records": [{
            "id": "STU003",
            "name": "Cleo",
            "period": "Spring 2025",
            "budgetLimit": 200,
            "transactions": [
                {"date": "2025-02-01", "category": "Food", "amount": 12.1},
                {"date": "2025-02-01", "category": "Food", "amount": 0.2},
            ],
        }]
    })
    result = SpendingAnalyzer().analyze_person(dataset, "STU003")
    assert result.spending.total == Decimal("12.30")
    assert result.budget.utilization == Decimal("6.2")


def test_result_to_dict_is_json_friendly():
    data = SpendingAnalyzer().analyze_record(sample_record).to_dict()
    assert data["spending"]["total"] == 300.0
    assert data["budget"]["isOverBudget"] is False
    assert data["categories"][0]["name"] == "Food"
    assert data["timeline"]["highestSpendingDay"] == {"date": "2024-09-02", "amount": 140.0}
