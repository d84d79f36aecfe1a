"""
Plain-text summary of a MetricsResult.

The text is handed as-is to a narrative-generation service; nothing in this
package parses it back.
"""

from decimal import Decimal

from spendwise.models.metrics import MetricsResult, SpendingDay

CATEGORY_SEPARATOR = ", "


def money(value: Decimal) -> str:
    return f"${value:.2f}"


def percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def _day(day: SpendingDay) -> str:
    date = day.date.isoformat() if day.date is not None else "N/A"
    return f"{date} ({money(day.amount)})"


def render_summary(result: MetricsResult) -> str:
    profile, budget, spending = result.profile, result.budget, result.spending
    category_text = CATEGORY_SEPARATOR.join(
        f"{c.name}: {money(c.amount)} ({percent(c.percentage)})" for c in result.categories
    ) or "None"

    lines = [
        "PROFILE:",
        f"Name: {profile.name}",
        f"ID: {profile.id}",
        f"Period: {profile.period}",
        "",
        "BUDGET ANALYSIS:",
        f"Budget Limit: {money(budget.allocated)}",
        f"Total Spent: {money(budget.spent)}",
        f"Budget Utilization: {percent(budget.utilization)}",
        f"Status: {budget.status}",
        f"Remaining Budget: {money(budget.remaining)}",
        "",
        "SPENDING PATTERNS:",
        f"Total Transactions: {spending.transaction_count}",
        f"Average Transaction: {money(spending.average)}",
        f"Daily Average Spending: {money(spending.daily_average)}",
        "",
        "CATEGORY BREAKDOWN:",
        category_text,
        "",
        "SPENDING TIMELINE:",
        f"Highest spending day: {_day(result.timeline.highest_spending_day)}",
        f"Lowest spending day: {_day(result.timeline.lowest_spending_day)}",
    ]
    return "\n".join(lines)
