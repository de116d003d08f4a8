"""
Payment endpoints.

POST /payments                   — Evaluate a payment and debit the debtor if eligible.
GET  /accounts/{account_number}  — Current state of an account in the active store.

payment_scheme accepts "bacs", "faster_payments" or "chaps", matched ignoring case,
spaces and underscores ("FasterPayments" works). Amounts are decimal strings or
numbers with at most two decimal places.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from payment_engine.api.dependencies import get_account_store_provider, get_payment_service
from payment_engine.engine.payment_service import PaymentService
from payment_engine.models.account import PaymentRequest
from payment_engine.models.enums import AllowedPaymentSchemes
from payment_engine.stores.base import AccountStoreProvider

router = APIRouter(tags=["payments"])


class PaymentBody(BaseModel):
    # Debtor, amount and scheme are loose: malformed values are declined by the service, not
    # rejected with a 422. payment_date, when given, must be a valid timestamp.
    creditor_account_number: Optional[str] = None
    debtor_account_number: Optional[str] = None
    amount: Optional[Any] = None
    payment_date: Optional[datetime] = None
    payment_scheme: Optional[str] = None


class PaymentResponse(BaseModel):
    success: bool
    failure_reason: Optional[str] = None


class AccountDetail(BaseModel):
    account_number: str
    balance: Decimal
    status: str
    allowed_payment_schemes: list[str]
    store: str


def _scheme_names(flags: AllowedPaymentSchemes) -> list[str]:
    return [flag.name.lower() for flag in AllowedPaymentSchemes if flag.value and flag in flags]


@router.post("/payments", response_model=PaymentResponse)
def make_payment(body: PaymentBody, service: PaymentService = Depends(get_payment_service)):
    """
    Evaluate a payment request.

    Always answers 200: a declined payment is a normal outcome, reported as
    ``success=false`` with the reason.
    """
    request = PaymentRequest(
        creditor_account_number=body.creditor_account_number,
        debtor_account_number=body.debtor_account_number,
        amount=body.amount,
        payment_scheme=body.payment_scheme,
    )
    if body.payment_date is not None:
        request.payment_date = body.payment_date

    result = service.make_payment(request)
    return PaymentResponse(
        success=result.success,
        failure_reason=result.failure_reason.value if result.failure_reason else None,
    )


@router.get("/accounts/{account_number}", response_model=AccountDetail)
def get_account(
    account_number: str,
    provider: AccountStoreProvider = Depends(get_account_store_provider),
):
    store = provider.acquire()
    account = store.get(account_number)
    if account is None:
        raise HTTPException(status_code=404, detail=f"Account not found: {account_number}")
    return AccountDetail(
        account_number=account.account_number,
        balance=account.balance,
        status=account.status.value,
        allowed_payment_schemes=_scheme_names(account.allowed_payment_schemes),
        store=store.name,
    )
