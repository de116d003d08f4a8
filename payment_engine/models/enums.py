"""Enumerations for the payment engine domain model."""

from enum import Enum, Flag, auto


class PaymentScheme(str, Enum):
    """Payment rails a debit can be sent through."""

    BACS = "bacs"
    FASTER_PAYMENTS = "faster_payments"
    CHAPS = "chaps"


class AllowedPaymentSchemes(Flag):
    """
    Schemes an account is permitted to send payments through.

    A bit set, not a single choice: an account may allow any combination
    of schemes, including none.
    """

    NONE = 0
    BACS = auto()
    FASTER_PAYMENTS = auto()
    CHAPS = auto()

    @classmethod
    def for_scheme(cls, scheme: PaymentScheme) -> "AllowedPaymentSchemes":
        return _SCHEME_FLAGS[scheme]


_SCHEME_FLAGS = {
    PaymentScheme.BACS: AllowedPaymentSchemes.BACS,
    PaymentScheme.FASTER_PAYMENTS: AllowedPaymentSchemes.FASTER_PAYMENTS,
    PaymentScheme.CHAPS: AllowedPaymentSchemes.CHAPS,
}


class AccountStatus(str, Enum):
    """Lifecycle states for an account."""

    LIVE = "live"
    DISABLED = "disabled"
    INBOUND_PAYMENTS_ONLY = "inbound_payments_only"


class FailureReason(str, Enum):
    """Categorized reasons for declining a payment."""

    INVALID_REQUEST = "invalid_request"
    ACCOUNT_NOT_FOUND = "account_not_found"
    SCHEME_NOT_ALLOWED = "scheme_not_allowed"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_NOT_LIVE = "account_not_live"
