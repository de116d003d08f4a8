"""
Abstract account store interfaces.

The payment service only ever talks to these two contracts. Concrete
backends (SQL primary/backup, in-memory) and the choice between them live
behind them, so the service can be exercised with substitute stores.
"""

from abc import ABC, abstractmethod
from typing import Optional

from payment_engine.models.account import Account


class AccountStore(ABC):
    """Read/write access to a single account by number."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Store identifier (e.g. 'primary', 'backup')."""
        ...

    @abstractmethod
    def get(self, account_number: str) -> Optional[Account]:
        """
        Load an account.

        Returns:
            The account, or None if no account has that number. A missing
            account is a normal outcome and must not raise.
        """
        ...

    @abstractmethod
    def update(self, account: Account) -> None:
        """Persist the current state of an existing account."""
        ...


class AccountStoreProvider(ABC):
    """Selects the account store that backs a payment evaluation."""

    @abstractmethod
    def acquire(self) -> AccountStore:
        """
        Return the store to use for one evaluation.

        Callers acquire once per evaluation and reuse the handle for both
        the read and the write.
        """
        ...
