from prometheus_client import Counter

# Business Metrics
orders_created_total = Counter(
    "orders_created_total",
    "Total orders created"
)

order_status_updates_total = Counter(
    "order_status_updates_total",
    "Total order status updates applied",
    ["status"] # Labels: 'PENDING', 'CONFIRMED', 'CANCELLED'
)

order_errors_total = Counter(
    "order_errors_total",
    "Requests rejected by the order API",
    ["kind"] # Labels: error kind, e.g. 'OrderNotFoundError', 'Unexpected'
)
