"""
Seed both account databases with sample accounts.

Creates one account per interesting combination of status and allowed
schemes, including edge cases: an account with no schemes at all, a zero
balance Bacs account, and a CHAPS account that is disabled.

The same accounts are written to the primary and the backup store, so
switching DATA_STORE_TYPE does not change what the demo sees.

Run:
    python -m seed.seed_data
"""

import logging
from decimal import Decimal

from payment_engine.database import BackupSession, PrimarySession, init_db
from payment_engine.exceptions import AccountAlreadyExistsError
from payment_engine.models.account import Account
from payment_engine.models.enums import AccountStatus, AllowedPaymentSchemes
from payment_engine.stores.sql import SqlAccountStore

logger = logging.getLogger("payment_engine.seed")

ALL_SCHEMES = (
    AllowedPaymentSchemes.BACS | AllowedPaymentSchemes.FASTER_PAYMENTS | AllowedPaymentSchemes.CHAPS
)

ACCOUNTS = [
    # Live accounts, one per scheme
    {"account_number": "ACC-001", "balance": "1000.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.BACS},
    {"account_number": "ACC-002", "balance": "250.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.FASTER_PAYMENTS},
    {"account_number": "ACC-003", "balance": "50000.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.CHAPS},

    # Everything allowed
    {"account_number": "ACC-010", "balance": "5000.00", "status": AccountStatus.LIVE, "schemes": ALL_SCHEMES},

    # Restricted accounts
    {"account_number": "ACC-020", "balance": "100.00", "status": AccountStatus.DISABLED, "schemes": AllowedPaymentSchemes.CHAPS},
    {"account_number": "ACC-021", "balance": "750.00", "status": AccountStatus.INBOUND_PAYMENTS_ONLY, "schemes": ALL_SCHEMES},

    # Edge cases
    {"account_number": "ACC-030", "balance": "0.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.BACS},
    {"account_number": "ACC-031", "balance": "50.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.FASTER_PAYMENTS},
    {"account_number": "ACC-032", "balance": "300.00", "status": AccountStatus.LIVE, "schemes": AllowedPaymentSchemes.NONE},
]


def seed() -> None:
    init_db()

    stores = [
        SqlAccountStore(PrimarySession, name="primary"),
        SqlAccountStore(BackupSession, name="backup"),
    ]
    for store in stores:
        created = 0
        for row in ACCOUNTS:
            account = Account(
                account_number=row["account_number"],
                balance=Decimal(row["balance"]),
                status=row["status"],
                allowed_payment_schemes=row["schemes"],
            )
            try:
                store.add(account)
                created += 1
            except AccountAlreadyExistsError:
                logger.info("Skipping %s in %s store: already exists", account.account_number, store.name)
        print(f"Seeded {created} accounts into the {store.name} store ({len(ACCOUNTS) - created} already present)")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
