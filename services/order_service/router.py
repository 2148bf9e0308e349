from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .schemas import OrderCreate, OrderPage, OrderResponse
from .service import OrderService
from .validation import INT32_MAX, INT64_MAX, INT64_MIN, parse_order_status

router = APIRouter(prefix="/orders", tags=["orders"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

# Ids outside BIGINT range can never exist; reject them before the database sees them
OrderId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}


@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(order: OrderCreate, db: AsyncSession = Depends(get_db)):
    return await OrderService.create_order(db, order)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: OrderId, db: AsyncSession = Depends(get_db)):
    return await OrderService.get_order(db, order_id)

@router.get("", response_model=OrderPage)
async def list_orders(
    page: int = Query(default=0, ge=0, le=INT32_MAX),
    size: int = Query(default=10, ge=1, le=INT32_MAX),
    db: AsyncSession = Depends(get_db)
):
    return await OrderService.list_orders(db, page, size)

# status is parsed by hand so "missing" and "not a member" stay distinct errors
@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: OrderId,
    status: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    new_status = parse_order_status(status)
    return await OrderService.update_status(db, order_id, new_status)
