from payment_engine.models.account import Account, MakePaymentResult, PaymentRequest
from payment_engine.models.enums import (
    AccountStatus,
    AllowedPaymentSchemes,
    FailureReason,
    PaymentScheme,
)
from payment_engine.models.tables import AccountRecord, Base

__all__ = [
    "Account",
    "AccountRecord",
    "AccountStatus",
    "AllowedPaymentSchemes",
    "Base",
    "FailureReason",
    "MakePaymentResult",
    "PaymentRequest",
    "PaymentScheme",
]
