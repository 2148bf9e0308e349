"""Error kinds raised by the order service.

None of these know about HTTP; the status code for each kind lives in
``error_handlers.ERROR_STATUS_CODES``.
"""
import enum
from typing import Dict, Iterable, Type


class OrderServiceError(Exception):
    """Base for every error the order API turns into a structured response."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OrderValidationError(OrderServiceError):
    """One or more request fields failed validation."""

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__("Validation failed")
        self.field_errors = field_errors


class MissingParameterError(OrderServiceError):
    def __init__(self, name: str, type_name: str):
        super().__init__(
            f"Required request parameter '{name}' for method parameter type "
            f"{type_name} is not present"
        )
        self.name = name


class InvalidEnumValueError(OrderServiceError):
    def __init__(self, name: str, value: str, enum_cls: Type[enum.Enum]):
        allowed: Iterable[str] = (member.name for member in enum_cls)
        super().__init__(
            f"Failed to convert value '{value}' of parameter '{name}' to required type "
            f"{enum_cls.__name__}; expected one of: {', '.join(allowed)}"
        )
        self.name = name
        self.value = value


class OrderNotFoundError(OrderServiceError):
    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id
