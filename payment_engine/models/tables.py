"""SQLAlchemy models for the account stores."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountRecord(Base):
    """
    Persistent form of an account.

    The allowed payment schemes are stored as the integer value of the
    ``AllowedPaymentSchemes`` flag so any combination round-trips in a
    single column.
    """

    __tablename__ = "accounts"

    account_number = Column(String(34), primary_key=True)
    balance = Column(Numeric(18, 2), nullable=False, default=0)
    status = Column(String(30), nullable=False, default="live")
    allowed_payment_schemes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
