"""
Account store selection.

Every evaluation asks the provider for a store. The configured
``data_store_type`` decides which one: "backup" (any case) routes to the
backup database, anything else to the primary. The setting is read on each
``acquire`` so a config change takes effect without rebuilding the service.
"""

import logging

from payment_engine.config import Settings
from payment_engine.stores.base import AccountStore, AccountStoreProvider

logger = logging.getLogger("payment_engine.stores.provider")


class ConfiguredAccountStoreProvider(AccountStoreProvider):
    """Chooses between a primary and a backup store from settings."""

    def __init__(self, settings: Settings, primary: AccountStore, backup: AccountStore):
        self._settings = settings
        self._primary = primary
        self._backup = backup

    def acquire(self) -> AccountStore:
        store = self._backup if self._settings.use_backup_store else self._primary
        logger.debug(
            "Using %s account store (data_store_type=%s)",
            store.name,
            self._settings.data_store_type,
        )
        return store


def build_default_provider() -> ConfiguredAccountStoreProvider:
    """Wire the SQL primary and backup stores from the application settings."""
    from payment_engine.config import settings
    from payment_engine.database import BackupSession, PrimarySession
    from payment_engine.stores.sql import SqlAccountStore

    return ConfiguredAccountStoreProvider(
        settings=settings,
        primary=SqlAccountStore(PrimarySession, name="primary"),
        backup=SqlAccountStore(BackupSession, name="backup"),
    )
