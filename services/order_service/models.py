import enum

from sqlalchemy import BigInteger, CheckConstraint, Column, DateTime, Enum, Integer, String
from shared.config.database import Base
from shared.config.settings import settings


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class Order(Base):
    __tablename__ = "orders"
    # Separate schema to keep the service's tables isolated (None on SQLite)
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_orders_quantity_positive"),
        {"schema": settings.DB_SCHEMA},
    )

    # BIGINT identity; SQLite only autoincrements a plain INTEGER primary key
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    customer_id = Column(String, nullable=False)
    product_id = Column(BigInteger, nullable=False)
    quantity = Column(Integer, nullable=False)
    # Stored by member name, not ordinal
    status = Column(
        Enum(OrderStatus, name="order_status", native_enum=False, length=16),
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Order id={self.id} customer_id={self.customer_id!r} status={self.status}>"
