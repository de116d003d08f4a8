"""Domain entities: the debtor account and the inbound payment request."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from payment_engine.models.enums import AccountStatus, AllowedPaymentSchemes, FailureReason


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Account:
    """
    A debtor's financial record.

    Only the approved-payment path mutates ``balance``; everything else is
    assigned when the account is created by a store.
    """

    account_number: str
    balance: Decimal = Decimal("0")
    status: AccountStatus = AccountStatus.LIVE
    allowed_payment_schemes: AllowedPaymentSchemes = AllowedPaymentSchemes.NONE

    def allows(self, flag: AllowedPaymentSchemes) -> bool:
        return flag in self.allowed_payment_schemes

    def debit(self, amount: Decimal) -> None:
        """Decrement the balance. Eligibility is the caller's concern."""
        self.balance -= amount


@dataclass
class PaymentRequest:
    """
    Inbound transfer instruction.

    Fields are deliberately loose: a request may carry missing or invalid
    values, and it is the payment service that decides whether it is valid.
    """

    debtor_account_number: Optional[str]
    amount: Any
    payment_scheme: Any
    creditor_account_number: Optional[str] = None
    payment_date: datetime = field(default_factory=_utcnow)


@dataclass
class MakePaymentResult:
    """Outcome of a payment evaluation."""

    success: bool
    failure_reason: Optional[FailureReason] = None

    @classmethod
    def failed(cls, reason: FailureReason) -> "MakePaymentResult":
        return cls(success=False, failure_reason=reason)
