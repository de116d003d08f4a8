"""
Request shape validation.

Mirrors the field rules of a payment request: a debtor account is required,
the amount must be a whole number of pence and at least one penny, and the
scheme must be one we know (matched by name, ignoring case, spaces and
underscores). The request object itself stays permissive; validation happens here so the
service can turn a bad request into a declined payment instead of an
exception.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from payment_engine.models.account import PaymentRequest
from payment_engine.models.enums import PaymentScheme

MINIMUM_AMOUNT = Decimal("0.01")
# Account balances are stored to the penny
AMOUNT_DECIMAL_PLACES = 2

_SCHEMES_BY_KEY = {scheme.value.replace("_", ""): scheme for scheme in PaymentScheme}


class ValidatedPaymentRequest(BaseModel):
    """The fields the service relies on, once they have passed validation."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    debtor_account_number: str = Field(min_length=1)
    amount: Decimal = Field(ge=MINIMUM_AMOUNT, decimal_places=AMOUNT_DECIMAL_PLACES, allow_inf_nan=False)
    payment_scheme: PaymentScheme

    @field_validator("payment_scheme", mode="before")
    @classmethod
    def _scheme_by_name(cls, value: Any) -> Any:
        # "FasterPayments", "Faster Payments" and "faster_payments" all name the same scheme
        if isinstance(value, str) and not isinstance(value, PaymentScheme):
            key = value.replace("_", "").replace(" ", "").lower()
            return _SCHEMES_BY_KEY.get(key, value)
        return value

    @field_validator("debtor_account_number")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("debtor account number must not be blank")
        return value


def validate_request(request: PaymentRequest) -> tuple[Optional[ValidatedPaymentRequest], str]:
    """
    Validate a payment request.

    Returns:
        (validated, "") when the request is well formed, otherwise
        (None, message) describing every violated rule.
    """
    try:
        return ValidatedPaymentRequest.model_validate(request), ""
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        return None, problems
