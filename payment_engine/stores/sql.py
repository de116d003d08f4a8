"""SQLAlchemy-backed account store, used for both the primary and backup databases."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from payment_engine.exceptions import AccountAlreadyExistsError, AccountNotFoundError
from payment_engine.models.account import Account
from payment_engine.models.enums import AccountStatus, AllowedPaymentSchemes
from payment_engine.models.tables import AccountRecord
from payment_engine.stores.base import AccountStore

logger = logging.getLogger("payment_engine.stores.sql")


def _to_account(record: AccountRecord) -> Account:
    return Account(
        account_number=record.account_number,
        balance=Decimal(record.balance),
        status=AccountStatus(record.status),
        allowed_payment_schemes=AllowedPaymentSchemes(record.allowed_payment_schemes),
    )


class SqlAccountStore(AccountStore):
    """
    Account store over one database.

    Each call runs in its own short-lived session and commits on write;
    there is no transaction spanning a get and the following update.
    """

    def __init__(self, session_factory: sessionmaker[Session], name: str):
        self._session_factory = session_factory
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get(self, account_number: str) -> Optional[Account]:
        with self._session_factory() as session:
            record = session.get(AccountRecord, account_number)
            if record is None:
                return None
            return _to_account(record)

    def update(self, account: Account) -> None:
        with self._session_factory() as session:
            record = session.get(AccountRecord, account.account_number)
            if record is None:
                raise AccountNotFoundError(account.account_number, self._name)
            record.balance = account.balance
            record.status = account.status.value
            record.allowed_payment_schemes = account.allowed_payment_schemes.value
            session.commit()

        logger.debug(
            "%s store: account %s updated, balance=%s",
            self._name,
            account.account_number,
            account.balance,
        )

    def add(self, account: Account) -> None:
        """Create a new account. Used by seeding; payments never create accounts."""
        with self._session_factory() as session:
            if session.get(AccountRecord, account.account_number) is not None:
                raise AccountAlreadyExistsError(account.account_number, self._name)
            session.add(
                AccountRecord(
                    account_number=account.account_number,
                    balance=account.balance,
                    status=account.status.value,
                    allowed_payment_schemes=account.allowed_payment_schemes.value,
                )
            )
            session.commit()
