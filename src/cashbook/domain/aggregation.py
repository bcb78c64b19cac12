"""Aggregations behind the headline cards and the charts.

All functions are pure and take the entry collection explicitly. Sums are
accumulated as ``Decimal`` so currency totals never drift.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

from cashbook.domain.entities import (
    DescriptionTotal,
    Entry,
    EntryKind,
    EntryStatus,
    FIXED_COST,
    MonthKey,
    MonthlyBalanceRow,
    MonthlyCostRow,
    Summary,
    VARIABLE_COST,
)

ZERO = Decimal("0.00")


def group_entries_by_month(entries: Iterable[Entry]) -> dict[MonthKey, list[Entry]]:
    """Group dated entries by (year, month). Undated entries are dropped."""
    grouped: dict[MonthKey, list[Entry]] = defaultdict(list)

    for entry in entries:
        if entry.due_date is None:
            continue
        grouped[MonthKey.from_date(entry.due_date)].append(entry)

    return dict(grouped)


def sum_amounts(entries: Iterable[Entry]) -> Decimal:
    return sum((entry.amount for entry in entries), ZERO)


def monthly_costs(entries: Sequence[Entry]) -> list[MonthlyCostRow]:
    """Monthly expense totals split into fixed and variable cost.

    Only dated expense entries count. Expenses in any other category add
    to neither column.
    """
    expenses = [entry for entry in entries if entry.kind is EntryKind.EXPENSE]
    rows = []

    for month, month_entries in sorted(group_entries_by_month(expenses).items()):
        fixed = sum_amounts(e for e in month_entries if e.category == FIXED_COST)
        variable = sum_amounts(
            e for e in month_entries if e.category == VARIABLE_COST
        )
        rows.append(
            MonthlyCostRow(
                month=month,
                fixed_cost=fixed,
                variable_cost=variable,
                total=fixed + variable,
            )
        )

    return rows


def monthly_balance(entries: Sequence[Entry]) -> list[MonthlyBalanceRow]:
    """Monthly income against expense.

    Entries without a due date are not part of any month and are left out.
    """
    rows = []

    for month, month_entries in sorted(group_entries_by_month(entries).items()):
        income = sum_amounts(e for e in month_entries if e.kind is EntryKind.INCOME)
        expense = sum_amounts(
            e for e in month_entries if e.kind is EntryKind.EXPENSE
        )
        rows.append(
            MonthlyBalanceRow(
                month=month, income=income, expense=expense, net=income - expense
            )
        )

    return rows


def expense_totals_by_description(
    entries: Sequence[Entry], ranked: bool = False
) -> list[DescriptionTotal]:
    """Expense totals grouped by entry description.

    Groups appear in first-seen order unless ``ranked`` is set, in which
    case they are ordered by value, highest first.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}

    for entry in entries:
        if entry.kind is not EntryKind.EXPENSE:
            continue
        totals[entry.description] = totals.get(entry.description, ZERO) + entry.amount
        counts[entry.description] = counts.get(entry.description, 0) + 1

    grand_total = sum(totals.values(), ZERO)
    results = [
        DescriptionTotal(
            description=description,
            value=value,
            count=counts[description],
            share=value / grand_total if grand_total else Decimal(0),
        )
        for description, value in totals.items()
    ]

    if ranked:
        results.sort(key=lambda row: row.value, reverse=True)
    return results


def compute_summary(entries: Sequence[Entry]) -> Summary:
    """Headline totals for the whole collection.

    Open and closed counts cover expense entries (bills to pay).
    """
    income = sum_amounts(e for e in entries if e.kind is EntryKind.INCOME)
    expenses = [e for e in entries if e.kind is EntryKind.EXPENSE]
    expense = sum_amounts(expenses)

    return Summary(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        open_count=sum(1 for e in expenses if e.status is EntryStatus.OPEN),
        closed_count=sum(1 for e in expenses if e.status is EntryStatus.CLOSED),
    )
