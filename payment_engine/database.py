"""Database engines and session factories for the primary and backup stores."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from payment_engine.config import settings
from payment_engine.models.tables import Base

primary_engine = create_engine(settings.database_url, echo=False)
backup_engine = create_engine(settings.backup_database_url, echo=False)

PrimarySession = sessionmaker(primary_engine, expire_on_commit=False)
BackupSession = sessionmaker(backup_engine, expire_on_commit=False)


def init_db() -> None:
    """Create all tables on both stores. Safe to call multiple times (CREATE IF NOT EXISTS)."""
    for engine in (primary_engine, backup_engine):
        Base.metadata.create_all(engine)
