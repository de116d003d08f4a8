"""Liveness endpoint."""

from fastapi import APIRouter

from payment_engine.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {
        "status": "ok",
        "data_store": "backup" if settings.use_backup_store else "primary",
    }
