"""SQLAlchemy ORM models for the ledger and profile stores"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Numeric, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import Uuid

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LedgerTransaction(Base):
    """Single ledger entry owned by a user; never updated after insert"""

    __tablename__ = "transactions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    vendor = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)


class FinancialProfileRecord(Base):
    """Latest financial profile for a user, overwritten on every save"""

    __tablename__ = "financial_profile"

    user_id = Column(Text, primary_key=True)
    income = Column(Numeric(12, 2), nullable=False)
    debt = Column(Numeric(12, 2), nullable=False)
    savings_goal = Column(Numeric(12, 2), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
