"""Ledger aggregation - reduces a transaction list to summary totals"""

from decimal import Decimal
from typing import Dict, Iterable, List, Protocol

from budget_planner.domain.models import Totals, VendorTotal
from budget_planner.utils.money import Number, ZERO, to_finite_decimal


class HasAmount(Protocol):
    amount: Number


class HasVendorAmount(HasAmount, Protocol):
    vendor: str


def aggregate(transactions: Iterable[HasAmount]) -> Totals:
    """
    Sum a ledger into income, expense and net.

    - income: sum of amounts strictly greater than zero
    - expense: sum of amounts strictly less than zero (kept negative)
    - net: income + expense

    Order of the input does not matter. Zero amounts are ignored, and so are
    amounts that are NaN, infinite or not numbers at all; rejecting those is
    the job of whatever built the transaction. Empty input gives
    Totals(0, 0, 0).
    """
    income = ZERO
    expense = ZERO

    for txn in transactions:
        amount = to_finite_decimal(txn.amount)
        if amount is None:
            continue
        if amount > 0:
            income += amount
        elif amount < 0:
            expense += amount

    return Totals(income=income, expense=expense, net=income + expense)


def combine_totals(first: Totals, second: Totals) -> Totals:
    """Field-wise sum of two Totals, so aggregate(a + b) == combine_totals(aggregate(a), aggregate(b))"""
    return Totals(
        income=first.income + second.income,
        expense=first.expense + second.expense,
        net=first.net + second.net,
    )


def vendor_breakdown(transactions: Iterable[HasVendorAmount]) -> List[VendorTotal]:
    """
    Net amount and entry count per vendor, in order of first appearance.

    Unusable amounts count as entries but add nothing, like zero.
    """
    amounts: Dict[str, Decimal] = {}
    counts: Dict[str, int] = {}

    for txn in transactions:
        amount = to_finite_decimal(txn.amount)
        amounts[txn.vendor] = amounts.get(txn.vendor, ZERO) + (ZERO if amount is None else amount)
        counts[txn.vendor] = counts.get(txn.vendor, 0) + 1

    return [
        VendorTotal(vendor=vendor, amount=amount, count=counts[vendor])
        for vendor, amount in amounts.items()
    ]
