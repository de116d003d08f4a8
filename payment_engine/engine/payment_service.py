"""
Payment service: the single place where a debit is decided and applied.

The flow for each request:

  1. Shape validation (debtor, amount, scheme). Nothing is loaded on failure.
  2. Account resolution: acquire one store from the provider, read the debtor.
  3. Scheme eligibility (allowed schemes, balance, status).
  4. Debit and write back through the same store.

Every decline collapses to ``success=False``; ``failure_reason`` says which
rule tripped. Declines never write. Exceptions from the store itself are not
caught and reach the caller.
"""

import logging

from payment_engine.engine.eligibility import check_scheme_eligibility
from payment_engine.engine.validation import validate_request
from payment_engine.models.account import MakePaymentResult, PaymentRequest
from payment_engine.models.enums import FailureReason
from payment_engine.stores.base import AccountStoreProvider

logger = logging.getLogger("payment_engine.payment_service")


class PaymentService:
    def __init__(self, store_provider: AccountStoreProvider):
        self._store_provider = store_provider

    def make_payment(self, request: PaymentRequest) -> MakePaymentResult:
        """
        Evaluate a payment request and, if eligible, debit the debtor account.

        Args:
            request: The inbound payment instruction. May be malformed.

        Returns:
            MakePaymentResult with ``success`` and, on decline, the reason.
        """
        validated, problems = validate_request(request)
        if validated is None:
            logger.info(
                "Payment declined: reason=%s debtor=%s | %s",
                FailureReason.INVALID_REQUEST.value,
                request.debtor_account_number or "-",
                problems,
            )
            return MakePaymentResult.failed(FailureReason.INVALID_REQUEST)

        debtor = validated.debtor_account_number
        store = self._store_provider.acquire()

        account = store.get(debtor)
        if account is None:
            logger.info(
                "Payment declined: reason=%s debtor=%s store=%s",
                FailureReason.ACCOUNT_NOT_FOUND.value,
                debtor,
                store.name,
            )
            return MakePaymentResult.failed(FailureReason.ACCOUNT_NOT_FOUND)

        eligibility = check_scheme_eligibility(account, validated.payment_scheme, validated.amount)
        if not eligibility.eligible:
            logger.info(
                "Payment declined: reason=%s debtor=%s scheme=%s | %s",
                eligibility.failure_reason.value,
                debtor,
                validated.payment_scheme.value,
                eligibility.message,
            )
            return MakePaymentResult.failed(eligibility.failure_reason)

        balance_before = account.balance
        account.debit(validated.amount)
        store.update(account)

        logger.info(
            "Payment approved: debtor=%s scheme=%s amount=%s balance %s -> %s",
            debtor,
            validated.payment_scheme.value,
            validated.amount,
            balance_before,
            account.balance,
        )
        return MakePaymentResult(success=True)
