"""Data access layer for the ledger and profile stores"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from budget_planner.infrastructure.database.models import FinancialProfileRecord, LedgerTransaction
from budget_planner.domain.exceptions import StoreError
from budget_planner.domain.models import FinancialProfile, Transaction


def to_domain_transaction(row: LedgerTransaction) -> Transaction:
    return Transaction(
        id=str(row.id),
        vendor=row.vendor,
        amount=Decimal(row.amount),
        created_at=row.created_at,
    )


class TransactionRepository:
    """Ledger store: append-only transactions keyed by user"""

    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        user_id: str,
        vendor: str,
        amount: Decimal,
        created_at: Optional[datetime] = None,
    ) -> Transaction:
        """Append a transaction for the user and return it with its assigned id"""
        row = LedgerTransaction(user_id=user_id, vendor=vendor, amount=amount)
        if created_at is not None:
            row.created_at = created_at

        try:
            self.db.add(row)
            self.db.flush()  # Get ID without committing
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to insert transaction: {e}") from e

        return to_domain_transaction(row)

    def list_by_user(self, user_id: str) -> List[Transaction]:
        """Fetch the full ledger for a user, most recent first"""
        query = (
            self.db.query(LedgerTransaction)
            .filter(LedgerTransaction.user_id == user_id)
            .order_by(LedgerTransaction.created_at.desc())
        )

        try:
            return [to_domain_transaction(row) for row in query.all()]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list transactions: {e}") from e


class ProfileRepository:
    """Profile store: at most one financial profile per user"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[FinancialProfile]:
        """Fetch the user's profile, or None if never saved"""
        try:
            record = self.db.get(FinancialProfileRecord, user_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load profile: {e}") from e

        if record is None:
            return None

        return FinancialProfile(
            income=Decimal(record.income),
            debt=Decimal(record.debt),
            savings_goal=Decimal(record.savings_goal),
        )

    def upsert(self, user_id: str, income: Decimal, debt: Decimal, savings_goal: Decimal) -> None:
        """Create or fully overwrite the user's profile"""
        try:
            record = self.db.get(FinancialProfileRecord, user_id)
            if record is None:
                record = FinancialProfileRecord(user_id=user_id)
                self.db.add(record)

            # Every field is replaced, never merged with the previous profile
            record.income = income
            record.debt = debt
            record.savings_goal = savings_goal
            self.db.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to save profile: {e}") from e
