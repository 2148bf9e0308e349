from datetime import datetime, timezone
from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import orders_created_total, order_status_updates_total
from .errors import OrderNotFoundError, OrderValidationError
from .models import Order, OrderStatus
from .repository import OrderRepository
from .schemas import OrderCreate, OrderPage, OrderResponse
from .validation import validate_create_order

logger = structlog.get_logger(__name__)


def build_order(
    data: OrderCreate,
    status: Optional[OrderStatus] = None,
    created_at: Optional[datetime] = None,
) -> Order:
    """Build a new, unsaved Order from a validated create request.

    This is the only place defaults are filled in: ``status`` falls back to
    PENDING and ``created_at`` to the current UTC time, each only when the
    caller did not supply one.
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc)
    elif created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    else:
        created_at = created_at.astimezone(timezone.utc)

    return Order(
        customer_id=data.customer_id,
        product_id=data.product_id,
        quantity=data.quantity,
        status=status or OrderStatus.PENDING,
        created_at=created_at,
    )


def to_response(order: Order) -> OrderResponse:
    return OrderResponse.model_validate(order)


class OrderService:
    @staticmethod
    async def create_order(
        db: AsyncSession,
        data: OrderCreate,
        status: Optional[OrderStatus] = None,
        created_at: Optional[datetime] = None,
    ) -> OrderResponse:
        errors = validate_create_order(data)
        if errors:
            raise OrderValidationError({e.field: e.message for e in errors})

        order = await OrderRepository.insert(db, build_order(data, status, created_at))
        orders_created_total.inc()
        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            product_id=order.product_id,
            quantity=order.quantity,
        )
        return to_response(order)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int) -> OrderResponse:
        order = await OrderRepository.fetch(db, order_id)
        if not order:
            raise OrderNotFoundError(order_id)
        return to_response(order)

    @staticmethod
    async def list_orders(db: AsyncSession, page: int, size: int) -> OrderPage:
        orders, total = await OrderRepository.list_page(db, page, size)
        return OrderPage.build([to_response(o) for o in orders], total, page, size)

    @staticmethod
    async def update_status(
        db: AsyncSession, order_id: int, status: OrderStatus
    ) -> OrderResponse:
        previous = {}

        def apply(order: Order) -> None:
            # Any status may follow any other; no transition rules
            previous["status"] = order.status
            order.status = status

        order = await OrderRepository.update(db, order_id, apply)
        if not order:
            raise OrderNotFoundError(order_id)

        order_status_updates_total.labels(status=status.value).inc()
        logger.info(
            "order_status_updated",
            order_id=order_id,
            from_status=previous["status"].value,
            to_status=status.value,
        )
        return to_response(order)
