"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings

BACKUP_DATA_STORE = "backup"


class Settings(BaseSettings):
    database_url: str = "sqlite:///./payment_engine.db"
    backup_database_url: str = "sqlite:///./payment_engine_backup.db"
    data_store_type: str = "primary"  # "backup" switches every payment to the backup store
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def use_backup_store(self) -> bool:
        return self.data_store_type.strip().lower() == BACKUP_DATA_STORE


settings = Settings()
