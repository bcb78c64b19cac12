"""Tests for chart and headline aggregations."""

from datetime import date
from decimal import Decimal

from cashbook.domain.aggregation import (
    compute_summary,
    expense_totals_by_description,
    monthly_balance,
    monthly_costs,
)
from cashbook.domain.entities import EntryKind, EntryStatus, MonthKey
from conftest import make_entry


def test_monthly_costs_scenario(scenario_entries):
    rows = monthly_costs(scenario_entries)

    assert len(rows) == 1
    assert rows[0].month == MonthKey(2025, 1)
    assert rows[0].fixed_cost == Decimal("100")
    assert rows[0].variable_cost == Decimal("50")
    assert rows[0].total == Decimal("150")


def test_monthly_balance_scenario(scenario_entries):
    rows = monthly_balance(scenario_entries)

    assert [row.month.label for row in rows] == ["2025-01", "2025-02"]
    assert (rows[0].income, rows[0].expense, rows[0].net) == (0, 150, -150)
    assert (rows[1].income, rows[1].expense, rows[1].net) == (500, 0, 500)


def test_months_are_sorted_across_years():
    entries = [
        make_entry("a", date(2025, 2, 1)),
        make_entry("b", date(2024, 12, 1)),
        make_entry("c", date(2025, 1, 1)),
    ]

    assert [row.month for row in monthly_costs(entries)] == [
        MonthKey(2024, 12),
        MonthKey(2025, 1),
        MonthKey(2025, 2),
    ]


def test_monthly_costs_totals_match_dated_expenses():
    entries = [
        make_entry("a", date(2025, 1, 1), category="FixedCost", amount="10.10"),
        make_entry("b", date(2025, 1, 2), category="VariableCost", amount="20.20"),
        make_entry("c", date(2025, 3, 3), category="FixedCost", amount="0.10"),
        make_entry("d", None, category="FixedCost", amount="99.00"),
        make_entry("e", date(2025, 3, 3), category="Income", kind=EntryKind.INCOME, amount="7"),
    ]

    total = sum((row.fixed_cost + row.variable_cost for row in monthly_costs(entries)), Decimal(0))

    assert total == Decimal("30.40")


def test_monthly_balance_drops_undated_entries():
    # Known data loss: undated entries belong to no month.
    entries = [make_entry("a", None, amount="40"), make_entry("b", date(2025, 1, 1), amount="5")]

    rows = monthly_balance(entries)

    assert len(rows) == 1
    assert rows[0].expense == Decimal("5")


def test_sums_do_not_drift():
    entries = [make_entry(str(i), date(2025, 1, 1), amount="0.10") for i in range(3)]
    assert monthly_balance(entries)[0].expense == Decimal("0.30")


def test_expense_totals_group_by_description():
    entries = [
        make_entry("a", description="Rent", amount="100", category="FixedCost"),
        make_entry("b", description="Market", amount="30", category="VariableCost"),
        make_entry("c", description="Market", amount="70", category="FixedCost"),
        make_entry("d", description="Salary", kind=EntryKind.INCOME, amount="900"),
    ]

    rows = expense_totals_by_description(entries)

    assert [(r.description, r.value, r.count) for r in rows] == [
        ("Rent", Decimal("100"), 1),
        ("Market", Decimal("100"), 2),
    ]
    assert rows[0].share == Decimal("0.5")


def test_expense_totals_ranked():
    entries = [
        make_entry("a", description="Small", amount="1"),
        make_entry("b", description="Big", amount="10"),
    ]

    rows = expense_totals_by_description(entries, ranked=True)

    assert [r.description for r in rows] == ["Big", "Small"]


def test_expense_totals_empty():
    assert expense_totals_by_description([]) == []


def test_compute_summary():
    entries = [
        make_entry("a", amount="100", status=EntryStatus.OPEN),
        make_entry("b", amount="50", status=EntryStatus.CLOSED),
        make_entry("c", amount="60", status=EntryStatus.CLOSED),
        make_entry("d", kind=EntryKind.INCOME, category="Income", amount="500"),
    ]

    summary = compute_summary(entries)

    assert summary.total_income == Decimal("500")
    assert summary.total_expense == Decimal("210")
    assert summary.balance == Decimal("290")
    assert summary.open_count == 1
    assert summary.closed_count == 2


def test_compute_summary_empty():
    summary = compute_summary([])
    assert summary.balance == 0
    assert summary.open_count == 0
