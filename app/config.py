from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Business Dashboard"
    ENVIRONMENT: str = "local"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./data.sqlite"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # HTTP
    # ==============================
    CORS_ORIGINS: str = "*"

    # ==============================
    # Reporting
    # ==============================
    REVENUE_SERIES_DEFAULT_MONTHS: int = 6
    REVENUE_SERIES_MAX_MONTHS: int = 36

    # ==============================
    # Transactions
    # ==============================
    TRANSACTIONS_DEFAULT_LIMIT: int = 100
    TRANSACTIONS_MAX_LIMIT: int = 1000
    EXPORT_FILENAME: str = "transactions.csv"

    @property
    def cors_origin_list(self) -> list[str]:
        return [entry.strip() for entry in self.CORS_ORIGINS.split(",") if entry.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
