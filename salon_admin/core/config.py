"""
Application configuration.
Values come from environment variables or a local .env file. The store
backend is chosen here so the same core runs against a SQL database, a
key-value JSON file, or another instance of this API.
"""
from pydantic_settings import BaseSettings

STORE_BACKENDS = ("sql", "kv", "remote")


class Settings(BaseSettings):
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Persistence
    STORE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite+aiosqlite:///./salon.db"
    KV_STORE_PATH: str = "./salon_store.json"

    # Remote backend (another salon-admin API, e.g. https://host/api/v1)
    REMOTE_API_URL: str = ""
    REMOTE_TIMEOUT_SECONDS: float = 10.0

    # Salon
    SALON_NAME: str = "Beauty Salon"
    SEED_ON_STARTUP: bool = False
    UPCOMING_LIMIT: int = 10

    class Config:
        env_file = ".env"


settings = Settings()

if settings.STORE_BACKEND not in STORE_BACKENDS:
    raise ValueError(
        f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, "
        f"got '{settings.STORE_BACKEND}'"
    )

if settings.STORE_BACKEND == "remote" and not settings.REMOTE_API_URL:
    raise ValueError(
        "STORE_BACKEND=remote requires REMOTE_API_URL "
        "(base URL of the remote API, e.g. https://salon.example.com/api/v1)"
    )
