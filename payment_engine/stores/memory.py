"""Dict-backed account store for tests and local experiments."""

import copy
from typing import Optional

from payment_engine.exceptions import AccountAlreadyExistsError
from payment_engine.models.account import Account
from payment_engine.stores.base import AccountStore


class InMemoryAccountStore(AccountStore):
    """
    Keeps accounts in a dict keyed by account number.

    ``get`` hands out copies, so an account fetched but never passed to
    ``update`` leaves the stored state untouched, as with a real database.
    """

    def __init__(self, accounts: Optional[list[Account]] = None, name: str = "memory"):
        self._name = name
        self._accounts: dict[str, Account] = {}
        for account in accounts or []:
            self.add(account)

    @property
    def name(self) -> str:
        return self._name

    def add(self, account: Account) -> None:
        if account.account_number in self._accounts:
            raise AccountAlreadyExistsError(account.account_number, self._name)
        self._accounts[account.account_number] = copy.deepcopy(account)

    def get(self, account_number: str) -> Optional[Account]:
        account = self._accounts.get(account_number)
        return copy.deepcopy(account) if account is not None else None

    def update(self, account: Account) -> None:
        self._accounts[account.account_number] = copy.deepcopy(account)
