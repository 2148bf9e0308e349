import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Database
    DB_USER: str = os.getenv("POSTGRES_USER", "postgres")
    DB_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")
    DB_HOST: str = os.getenv("POSTGRES_HOST", "localhost")  # In Docker, this will be 'postgres'
    DB_PORT: str = os.getenv("POSTGRES_PORT", "5433")
    DB_NAME: str = os.getenv("POSTGRES_DB", "orders")

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
    )
    # Empty string disables schema qualification (SQLite has no schemas)
    DB_SCHEMA: str | None = os.getenv("ORDER_DB_SCHEMA", "order_schema") or None
    DB_ECHO: bool = _as_bool(os.getenv("DB_ECHO", "false"))

    # API
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")

    # Observability
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "order_service")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    TRACING_ENABLED: bool = _as_bool(os.getenv("TRACING_ENABLED", "true"))
    OTLP_ENDPOINT: str = os.getenv("OTLP_ENDPOINT", "http://localhost:4317")


settings = Settings()
