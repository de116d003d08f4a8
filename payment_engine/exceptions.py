"""Exceptions for infrastructure faults.

Business declines are never raised; they are reported through
``MakePaymentResult.failure_reason``.
"""


class PaymentEngineError(Exception):
    """Base exception for the payment engine."""


class AccountAlreadyExistsError(PaymentEngineError):
    """Raised when adding an account whose number is already taken."""

    def __init__(self, account_number: str, store: str):
        super().__init__(f"Account {account_number} already exists in the {store} store")
        self.account_number = account_number
        self.store = store


class AccountNotFoundError(PaymentEngineError):
    """Raised when a store is asked to update an account it does not hold."""

    def __init__(self, account_number: str, store: str):
        super().__init__(f"Account {account_number} not found in the {store} store")
        self.account_number = account_number
        self.store = store
