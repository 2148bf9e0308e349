from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from sqlalchemy import text
from shared.config.database import engine, Base
from shared.config.settings import settings
from shared.observability import setup_observability
from .error_handlers import register_error_handlers
from .router import router, public_router
from .models import Order  # Import to register with Base

logger = structlog.get_logger(__name__)


async def create_tables():
    async with engine.begin() as conn:
        # Schemas are a PostgreSQL concept; SQLite runs unqualified
        if settings.DB_SCHEMA and conn.dialect.name == "postgresql":
            await conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{settings.DB_SCHEMA}"'))
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("order_service_started", tables=sorted(Base.metadata.tables.keys()))

    yield

    await engine.dispose()
    logger.info("order_service_stopped")


order_app = FastAPI(title="Order Service", version="1.0.0", lifespan=lifespan)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, settings.SERVICE_NAME)

register_error_handlers(order_app)

order_app.include_router(public_router)
order_app.include_router(router, prefix=settings.API_PREFIX)
