"""Shared test fixtures."""

from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from payment_engine.api.dependencies import get_account_store_provider
from payment_engine.main import app
from payment_engine.models.account import Account
from payment_engine.models.enums import AccountStatus, AllowedPaymentSchemes
from payment_engine.models.tables import Base
from payment_engine.stores.base import AccountStore, AccountStoreProvider
from payment_engine.stores.memory import InMemoryAccountStore


class RecordingAccountStore(InMemoryAccountStore):
    """In-memory store that remembers every call made to it."""

    def __init__(self, accounts: Optional[list[Account]] = None, name: str = "recording"):
        super().__init__(accounts, name=name)
        self.get_calls: list[str] = []
        self.update_calls: list[Account] = []

    def get(self, account_number: str) -> Optional[Account]:
        self.get_calls.append(account_number)
        return super().get(account_number)

    def update(self, account: Account) -> None:
        self.update_calls.append(account)
        super().update(account)


class StaticProvider(AccountStoreProvider):
    """Always hands out the same store and counts acquisitions."""

    def __init__(self, store: AccountStore):
        self.store = store
        self.acquire_count = 0

    def acquire(self) -> AccountStore:
        self.acquire_count += 1
        return self.store


def make_account(
    account_number: str = "D-001",
    balance: str = "100.00",
    status: AccountStatus = AccountStatus.LIVE,
    schemes: AllowedPaymentSchemes = AllowedPaymentSchemes.NONE,
) -> Account:
    return Account(
        account_number=account_number,
        balance=Decimal(balance),
        status=status,
        allowed_payment_schemes=schemes,
    )


@pytest.fixture
def store() -> RecordingAccountStore:
    return RecordingAccountStore()


@pytest.fixture
def provider(store: RecordingAccountStore) -> StaticProvider:
    return StaticProvider(store)


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def client(provider: StaticProvider):
    """API client wired to the recording in-memory store."""
    app.dependency_overrides[get_account_store_provider] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()
