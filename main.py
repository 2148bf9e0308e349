"""ASGI entrypoint: ``uvicorn main:app``.

Tables (and the PostgreSQL schema) are created by the order app's lifespan.
"""
from services.order_service.main import order_app

app = order_app
