"""
Scheme eligibility rules with categorized decline reasons.

Given a loaded account and a validated request, decide whether the debit
may go ahead on the requested scheme:

  - Bacs:            scheme allowed on the account. Nothing else.
  - FasterPayments:  scheme allowed, and balance covers the amount.
  - Chaps:           scheme allowed, and the account is Live.

Bacs has no balance check, so an allowed Bacs debit can take the balance
below zero. Pinned by tests.

Each check returns a structured result so the service can report the decline
reason without raising.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from payment_engine.models.account import Account
from payment_engine.models.enums import (
    AccountStatus,
    AllowedPaymentSchemes,
    FailureReason,
    PaymentScheme,
)


@dataclass
class EligibilityResult:
    """Result of an eligibility check."""

    eligible: bool
    failure_reason: Optional[FailureReason] = None
    message: str = ""


def check_scheme_eligibility(
    account: Account,
    payment_scheme: PaymentScheme,
    amount: Decimal,
) -> EligibilityResult:
    """
    Check whether ``account`` may send ``amount`` via ``payment_scheme``.

    Args:
        account: The debtor account, as currently stored.
        payment_scheme: Scheme requested for the payment.
        amount: Positive amount to debit.

    Returns:
        EligibilityResult indicating pass/fail with categorized reason.
    """
    if not isinstance(payment_scheme, PaymentScheme):
        return EligibilityResult(
            eligible=False,
            failure_reason=FailureReason.INVALID_REQUEST,
            message=f"Unknown payment scheme: {payment_scheme}",
        )

    if not account.allows(AllowedPaymentSchemes.for_scheme(payment_scheme)):
        return EligibilityResult(
            eligible=False,
            failure_reason=FailureReason.SCHEME_NOT_ALLOWED,
            message=f"Account {account.account_number} does not allow {payment_scheme.value}",
        )

    if payment_scheme == PaymentScheme.FASTER_PAYMENTS and account.balance < amount:
        return EligibilityResult(
            eligible=False,
            failure_reason=FailureReason.INSUFFICIENT_FUNDS,
            message=f"Balance {account.balance} is below requested amount {amount}",
        )

    if payment_scheme == PaymentScheme.CHAPS and account.status != AccountStatus.LIVE:
        return EligibilityResult(
            eligible=False,
            failure_reason=FailureReason.ACCOUNT_NOT_LIVE,
            message=f"Account status is {account.status.value}",
        )

    return EligibilityResult(eligible=True)
