"""
Payment Engine — scheme-aware debit evaluation API.

Decides whether a payment may be debited from an account under the Bacs,
Faster Payments or CHAPS rules, and applies the debit when it may.

Start the server:
    uvicorn payment_engine.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from payment_engine.api.health import router as health_router
from payment_engine.api.payments import router as payments_router
from payment_engine.config import settings
from payment_engine.database import init_db

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize both account databases on startup."""
    init_db()
    yield


app = FastAPI(
    title="Payment Engine",
    description=(
        "Evaluates debits against per-scheme eligibility rules (Bacs, Faster Payments, CHAPS) "
        "and applies them to the debtor account through a primary or backup account store."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(payments_router, prefix="/api")
