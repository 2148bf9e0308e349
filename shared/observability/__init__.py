from .setup import setup_observability
from .metrics import (
    orders_created_total,
    order_status_updates_total,
    order_errors_total
)
