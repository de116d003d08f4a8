"""FastAPI dependencies shared by the routers."""

from functools import lru_cache

from fastapi import Depends

from payment_engine.engine.payment_service import PaymentService
from payment_engine.stores.base import AccountStoreProvider
from payment_engine.stores.provider import build_default_provider


@lru_cache
def get_account_store_provider() -> AccountStoreProvider:
    return build_default_provider()


def get_payment_service(
    provider: AccountStoreProvider = Depends(get_account_store_provider),
) -> PaymentService:
    return PaymentService(provider)
