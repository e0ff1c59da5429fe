"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """Ledger entry; positive amount is income, negative is expense"""

    id: str
    vendor: str
    amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class FinancialProfile:
    """Declared monthly income, outstanding debt and savings target"""

    income: Decimal
    debt: Decimal
    savings_goal: Decimal


@dataclass(frozen=True)
class Totals:
    """Summary of a ledger"""

    income: Decimal
    expense: Decimal  # sum of negative amounts, stays <= 0
    net: Decimal


@dataclass(frozen=True)
class VendorTotal:
    """Net amount booked against one vendor label"""

    vendor: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class Plan:
    """Recommended monthly allocation of income"""

    debt_payment: Decimal
    savings: Decimal
    expenses: Decimal


class PayoffStatus(str, Enum):
    DEBT_FREE = "debt_free"
    ON_TRACK = "on_track"
    NOT_ACHIEVABLE = "not_achievable"


@dataclass(frozen=True)
class PayoffHorizon:
    """Months until debt is gone at the planned payment; months is None when it never is"""

    status: PayoffStatus
    months: Optional[int]
