"""Prometheus metrics for ledger activity, plan outcomes and request latency"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

# Ledger metrics
transactions_recorded_counter = Counter(
    "budget_transactions_recorded_total",
    "Transactions appended to the ledger",
    ["direction"],  # income | expense | zero
)

# Planner metrics
plan_recommendation_counter = Counter(
    "budget_plan_recommendations_total",
    "Plans recommended",
    ["payoff_status"],  # debt_free | on_track | not_achievable
)

profile_upsert_counter = Counter(
    "budget_profile_upserts_total",
    "Financial profiles saved",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_direction(amount: Decimal) -> str:
    if amount > 0:
        return "income"
    elif amount < 0:
        return "expense"
    return "zero"


def record_transaction(amount: Decimal) -> None:
    """Count a ledger insert by its direction"""
    transactions_recorded_counter.labels(direction=amount_direction(amount)).inc()


def record_plan(payoff_status: str) -> None:
    """Count a recommendation by payoff outcome"""
    plan_recommendation_counter.labels(payoff_status=payoff_status).inc()
