"""Debt payoff horizon derived from a recommended plan"""

import math

from budget_planner.domain.models import PayoffHorizon, PayoffStatus, Plan
from budget_planner.utils.money import Number, to_decimal


def payoff_horizon(debt: Number, plan: Plan) -> PayoffHorizon:
    """
    Estimate months to clear the debt at the plan's monthly payment.

    - No debt: debt_free, 0 months
    - Debt but no positive payment: not_achievable, months is None
    - Otherwise: on_track, ceil(debt / debt_payment) months
    """
    debt = to_decimal(debt)
    payment = to_decimal(plan.debt_payment)

    if debt <= 0:
        return PayoffHorizon(status=PayoffStatus.DEBT_FREE, months=0)

    if payment <= 0:
        return PayoffHorizon(status=PayoffStatus.NOT_ACHIEVABLE, months=None)

    return PayoffHorizon(status=PayoffStatus.ON_TRACK, months=math.ceil(debt / payment))
