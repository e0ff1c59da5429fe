"""Fixed-ratio budget planner - core business logic for monthly allocations"""

from decimal import Decimal

from budget_planner.domain.models import Plan
from budget_planner.utils.money import Number, to_decimal

# Share of monthly income offered to each bucket before capping
DEBT_PAYMENT_RATIO = Decimal("0.30")
SAVINGS_RATIO = Decimal("0.20")


def recommend(income: Number, debt: Number, savings_goal: Number) -> Plan:
    """
    Split monthly income into debt payment, savings and remaining expenses.

    Policy:
    - Debt payment: up to 30% of income, never more than the debt owed
    - Savings: up to 20% of income, never more than the savings goal
    - Expenses: whatever income is left after both allocations

    Accepts any numeric input, including zero and negative values; rejecting
    meaningless profiles is left to the request schemas.

    Example:
        recommend(2000, 10000, 5000) -> Plan(600, 400, 1000)
    """
    income = to_decimal(income)
    debt = to_decimal(debt)
    savings_goal = to_decimal(savings_goal)

    debt_payment = min(debt, income * DEBT_PAYMENT_RATIO)
    savings = min(savings_goal, income * SAVINGS_RATIO)
    expenses = income - (debt_payment + savings)

    return Plan(debt_payment=debt_payment, savings=savings, expenses=expenses)
