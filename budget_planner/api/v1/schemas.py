"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from budget_planner.domain.models import PayoffStatus

# Matches Numeric(12, 2) in the store
AMOUNT_DIGITS = 12
AMOUNT_PLACES = 2


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str = Field(..., min_length=1, description="User identifier")
    vendor: str = Field(..., min_length=1, description="Display label for the counterparty")
    amount: Decimal = Field(
        ...,
        max_digits=AMOUNT_DIGITS,
        decimal_places=AMOUNT_PLACES,
        allow_inf_nan=False,
        description="Positive for income, negative for expense",
    )


class TransactionSchema(BaseModel):
    """Single ledger entry"""

    id: str
    vendor: str
    amount: Decimal
    created_at: datetime


class TotalsSchema(BaseModel):
    income: Decimal
    expense: Decimal
    net: Decimal


class VendorTotalSchema(BaseModel):
    vendor: str
    amount: Decimal
    count: int


class LedgerResponse(BaseModel):
    """Response for GET /v1/transactions"""

    user_id: str
    transactions: List[TransactionSchema]
    totals: TotalsSchema
    by_vendor: List[VendorTotalSchema]


class TotalsResponse(BaseModel):
    """Response for GET /v1/totals"""

    user_id: str
    totals: TotalsSchema


class ProfileFields(BaseModel):
    income: Decimal = Field(
        ..., ge=0, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES, description="Monthly income"
    )
    debt: Decimal = Field(
        ..., ge=0, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES, description="Total outstanding debt"
    )
    savings_goal: Decimal = Field(
        ..., ge=0, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES, description="Target savings amount"
    )


class ProfileUpsert(ProfileFields):
    """Request body for PUT /v1/profile"""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str = Field(..., min_length=1, description="User identifier")


class ProfileResponse(ProfileFields):
    """Response for GET/PUT /v1/profile"""

    user_id: str


class PlanPreviewRequest(ProfileFields):
    """Request body for POST /v1/plan/preview"""

    pass


class PlanSchema(BaseModel):
    debt_payment: Decimal
    savings: Decimal
    expenses: Decimal


class PayoffSchema(BaseModel):
    status: PayoffStatus
    months: Optional[int] = None


class PlanResponse(BaseModel):
    """Response for GET /v1/plan and POST /v1/plan/preview"""

    user_id: Optional[str] = None
    plan: PlanSchema
    payoff: PayoffSchema
