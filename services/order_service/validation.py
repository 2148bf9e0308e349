from typing import Any, List, NamedTuple, Optional

from .errors import InvalidEnumValueError, MissingParameterError
from .models import OrderStatus
from .schemas import OrderCreate

# Column ranges: ids are BIGINT, quantity is INTEGER
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
INT32_MAX = 2 ** 31 - 1


class FieldError(NamedTuple):
    field: str
    message: str


def _is_int(value: Any) -> bool:
    # JSON true/false arrive as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def validate_create_order(data: OrderCreate) -> List[FieldError]:
    """Check a create request before any Order is built.

    Every field is checked here, type included, so one response lists every
    offending field. Field names are reported in their wire (camelCase) form.
    """
    errors: List[FieldError] = []

    if data.customer_id is not None and not isinstance(data.customer_id, str):
        errors.append(FieldError("customerId", "must be a string"))
    elif data.customer_id is None or not data.customer_id.strip():
        errors.append(FieldError("customerId", "must not be blank"))

    if data.product_id is None:
        errors.append(FieldError("productId", "must not be null"))
    elif not _is_int(data.product_id):
        errors.append(FieldError("productId", "must be an integer"))
    elif not INT64_MIN <= data.product_id <= INT64_MAX:
        errors.append(
            FieldError("productId", f"must be between {INT64_MIN} and {INT64_MAX}")
        )

    if data.quantity is None:
        errors.append(FieldError("quantity", "must not be null"))
    elif not _is_int(data.quantity):
        errors.append(FieldError("quantity", "must be an integer"))
    elif data.quantity < 1:
        errors.append(FieldError("quantity", "must be greater than or equal to 1"))
    elif data.quantity > INT32_MAX:
        errors.append(FieldError("quantity", f"must be less than or equal to {INT32_MAX}"))

    return errors


def parse_order_status(value: Optional[str], param: str = "status") -> OrderStatus:
    """Exact, case-sensitive match against the OrderStatus member names."""
    if value is None or value == "":
        raise MissingParameterError(param, OrderStatus.__name__)
    try:
        return OrderStatus[value]
    except KeyError:
        raise InvalidEnumValueError(param, value, OrderStatus) from None
