"""Tests for scheme eligibility rules."""

from decimal import Decimal

from conftest import make_account

from payment_engine.engine.eligibility import check_scheme_eligibility
from payment_engine.models.enums import (
    AccountStatus,
    AllowedPaymentSchemes,
    FailureReason,
    PaymentScheme,
)

ALL_SCHEMES = (
    AllowedPaymentSchemes.BACS | AllowedPaymentSchemes.FASTER_PAYMENTS | AllowedPaymentSchemes.CHAPS
)


class TestBacs:
    def test_allowed(self):
        account = make_account(schemes=AllowedPaymentSchemes.BACS)
        result = check_scheme_eligibility(account, PaymentScheme.BACS, Decimal("10"))
        assert result.eligible is True

    def test_not_allowed(self):
        account = make_account(schemes=AllowedPaymentSchemes.FASTER_PAYMENTS | AllowedPaymentSchemes.CHAPS)
        result = check_scheme_eligibility(account, PaymentScheme.BACS, Decimal("10"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.SCHEME_NOT_ALLOWED

    def test_ignores_balance(self):
        """Bacs has no funds check: an empty account may still send."""
        account = make_account(balance="0", schemes=AllowedPaymentSchemes.BACS)
        result = check_scheme_eligibility(account, PaymentScheme.BACS, Decimal("10"))
        assert result.eligible is True

    def test_ignores_status(self):
        for status in AccountStatus:
            account = make_account(status=status, schemes=AllowedPaymentSchemes.BACS)
            result = check_scheme_eligibility(account, PaymentScheme.BACS, Decimal("10"))
            assert result.eligible is True, f"Expected Bacs eligible for {status}"


class TestFasterPayments:
    def test_sufficient_balance(self):
        account = make_account(balance="100", schemes=AllowedPaymentSchemes.FASTER_PAYMENTS)
        result = check_scheme_eligibility(account, PaymentScheme.FASTER_PAYMENTS, Decimal("25"))
        assert result.eligible is True

    def test_balance_equal_to_amount(self):
        account = make_account(balance="50", schemes=AllowedPaymentSchemes.FASTER_PAYMENTS)
        result = check_scheme_eligibility(account, PaymentScheme.FASTER_PAYMENTS, Decimal("50"))
        assert result.eligible is True

    def test_insufficient_balance(self):
        account = make_account(balance="49.99", schemes=AllowedPaymentSchemes.FASTER_PAYMENTS)
        result = check_scheme_eligibility(account, PaymentScheme.FASTER_PAYMENTS, Decimal("50"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.INSUFFICIENT_FUNDS

    def test_not_allowed(self):
        account = make_account(balance="1000", schemes=AllowedPaymentSchemes.BACS)
        result = check_scheme_eligibility(account, PaymentScheme.FASTER_PAYMENTS, Decimal("1"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.SCHEME_NOT_ALLOWED

    def test_ignores_status(self):
        account = make_account(
            balance="100",
            status=AccountStatus.DISABLED,
            schemes=AllowedPaymentSchemes.FASTER_PAYMENTS,
        )
        result = check_scheme_eligibility(account, PaymentScheme.FASTER_PAYMENTS, Decimal("10"))
        assert result.eligible is True


class TestChaps:
    def test_live_account(self):
        account = make_account(schemes=AllowedPaymentSchemes.CHAPS)
        result = check_scheme_eligibility(account, PaymentScheme.CHAPS, Decimal("50"))
        assert result.eligible is True

    def test_disabled_account(self):
        account = make_account(status=AccountStatus.DISABLED, schemes=AllowedPaymentSchemes.CHAPS)
        result = check_scheme_eligibility(account, PaymentScheme.CHAPS, Decimal("10"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.ACCOUNT_NOT_LIVE

    def test_inbound_payments_only_account(self):
        account = make_account(status=AccountStatus.INBOUND_PAYMENTS_ONLY, schemes=ALL_SCHEMES)
        result = check_scheme_eligibility(account, PaymentScheme.CHAPS, Decimal("10"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.ACCOUNT_NOT_LIVE

    def test_ignores_balance(self):
        account = make_account(balance="0", schemes=AllowedPaymentSchemes.CHAPS)
        result = check_scheme_eligibility(account, PaymentScheme.CHAPS, Decimal("10"))
        assert result.eligible is True


class TestAllowedSchemes:
    def test_no_schemes_allowed(self):
        account = make_account(schemes=AllowedPaymentSchemes.NONE)
        for scheme in PaymentScheme:
            result = check_scheme_eligibility(account, scheme, Decimal("1"))
            assert result.failure_reason == FailureReason.SCHEME_NOT_ALLOWED, scheme

    def test_combined_flags_allow_each_member(self):
        account = make_account(balance="100", schemes=ALL_SCHEMES)
        for scheme in PaymentScheme:
            result = check_scheme_eligibility(account, scheme, Decimal("1"))
            assert result.eligible is True, scheme

    def test_unknown_scheme_is_not_eligible(self):
        account = make_account(schemes=ALL_SCHEMES)
        result = check_scheme_eligibility(account, "swift", Decimal("1"))
        assert not result.eligible
        assert result.failure_reason == FailureReason.INVALID_REQUEST


class TestPriorityOrder:
    def test_scheme_checked_before_status(self):
        """A disabled account without CHAPS reports the missing scheme, not the status."""
        account = make_account(status=AccountStatus.DISABLED, schemes=AllowedPaymentSchemes.BACS)
        result = check_scheme_eligibility(account, PaymentScheme.CHAPS, Decimal("10"))
        assert result.failure_reason == FailureReason.SCHEME_NOT_ALLOWED
