from payment_engine.stores.base import AccountStore, AccountStoreProvider
from payment_engine.stores.memory import InMemoryAccountStore
from payment_engine.stores.provider import ConfiguredAccountStoreProvider

__all__ = [
    "AccountStore",
    "AccountStoreProvider",
    "ConfiguredAccountStoreProvider",
    "InMemoryAccountStore",
]
