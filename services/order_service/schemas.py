from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from .models import OrderStatus


class CamelModel(BaseModel):
    # Python attributes stay snake_case; the wire format is camelCase
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OrderCreate(CamelModel):
    # Untyped on purpose: presence, JSON type and range are all checked by
    # validate_create_order so every bad field is reported in one response
    customer_id: Any = None
    product_id: Any = None
    quantity: Any = None


class OrderResponse(CamelModel):
    id: int
    customer_id: str
    product_id: int
    quantity: int
    status: OrderStatus
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_serializer("created_at")
    def serialize_created_at(self, v: datetime) -> str:
        return v.isoformat().replace("+00:00", "Z")


class OrderPage(CamelModel):
    content: List[OrderResponse]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def build(cls, content: List[OrderResponse], total: int, page: int, size: int) -> "OrderPage":
        total_pages = (total + size - 1) // size
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            number=page,
            size=size,
            number_of_elements=len(content),
            first=page == 0,
            last=page + 1 >= total_pages,
            empty=not content,
        )
