from typing import Callable, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from .models import Order


class OrderRepository:
    @staticmethod
    async def insert(db: AsyncSession, order: Order) -> Order:
        # The database assigns the id (identity / autoincrement)
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def fetch(db: AsyncSession, order_id: int) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_page(db: AsyncSession, page: int, size: int) -> Tuple[List[Order], int]:
        total = (await db.execute(select(func.count()).select_from(Order))).scalar_one()
        result = await db.execute(
            select(Order).order_by(Order.id).offset(page * size).limit(size)
        )
        return list(result.scalars().all()), total

    @staticmethod
    async def update(
        db: AsyncSession, order_id: int, mutator: Callable[[Order], None]
    ) -> Optional[Order]:
        # Row lock serializes concurrent writers to the same order
        # (ignored by SQLite, which already serializes writes)
        result = await db.execute(
            select(Order).where(Order.id == order_id).with_for_update()
        )
        order = result.scalars().first()

        if not order:
            await db.rollback()
            return None

        mutator(order)

        await db.commit()
        await db.refresh(order)
        return order
