"""POST/GET /v1/transactions - Ledger entries and dashboard totals"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budget_planner.api.v1.schemas import (
    LedgerResponse,
    TotalsResponse,
    TotalsSchema,
    TransactionCreate,
    TransactionSchema,
    VendorTotalSchema,
)
from budget_planner.api.dependencies import get_request_id
from budget_planner.config import settings
from budget_planner.domain.aggregation import aggregate, vendor_breakdown
from budget_planner.domain.exceptions import StoreError
from budget_planner.domain.models import Totals, Transaction
from budget_planner.infrastructure.database.session import get_db
from budget_planner.infrastructure.database.repositories import TransactionRepository
from budget_planner.infrastructure.observability.logging import log_transaction_recorded
from budget_planner.infrastructure.observability.metrics import amount_direction, record_transaction

router = APIRouter()


def _transaction_schema(txn: Transaction) -> TransactionSchema:
    return TransactionSchema(id=txn.id, vendor=txn.vendor, amount=txn.amount, created_at=txn.created_at)


def _totals_schema(totals: Totals) -> TotalsSchema:
    return TotalsSchema(income=totals.income, expense=totals.expense, net=totals.net)


@router.post("/transactions", response_model=TransactionSchema, status_code=201)
def create_transaction(
    request_body: TransactionCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Append a transaction to the user's ledger.

    Amount sign decides the direction: positive is income, negative is expense.
    Malformed input is rejected by the request schema before anything is stored.
    """
    request_id = get_request_id(request)

    try:
        txn = TransactionRepository(db).insert(
            user_id=request_body.user_id,
            vendor=request_body.vendor,
            amount=request_body.amount,
        )
        db.commit()
    except (StoreError, SQLAlchemyError) as e:
        db.rollback()
        logging.error(f"Ledger store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger store unavailable")

    record_transaction(txn.amount)
    log_transaction_recorded(request_id, request_body.user_id, txn.id, amount_direction(txn.amount))

    return _transaction_schema(txn)


@router.get("/transactions", response_model=LedgerResponse)
def get_ledger(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Dashboard view of a user's ledger.

    Returns:
        Transactions most recent first, totals over the full ledger and
        per-vendor sums for the spending chart
    """
    request_id = get_request_id(request)

    try:
        transactions = TransactionRepository(db).list_by_user(user_id)
    except StoreError as e:
        logging.error(f"Ledger store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger store unavailable")

    # Totals cover every entry; only the listing is truncated
    return LedgerResponse(
        user_id=user_id,
        transactions=[_transaction_schema(t) for t in transactions[: settings.ledger_page_size]],
        totals=_totals_schema(aggregate(transactions)),
        by_vendor=[
            VendorTotalSchema(vendor=v.vendor, amount=v.amount, count=v.count)
            for v in vendor_breakdown(transactions)
        ],
    )


@router.get("/totals", response_model=TotalsResponse)
def get_totals(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Income, expense and net for the user's full ledger"""
    request_id = get_request_id(request)

    try:
        transactions = TransactionRepository(db).list_by_user(user_id)
    except StoreError as e:
        logging.error(f"Ledger store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger store unavailable")

    return TotalsResponse(user_id=user_id, totals=_totals_schema(aggregate(transactions)))
