from prometheus_client import Counter, Histogram


class OrderResult:
    CREATED = 'created'
    INSUFFICIENT_STOCK = 'insufficient_stock'
    NOT_FOUND = 'not_found'
    FAILED = 'failed'


class TicketingMetrics:
    """
    Order placement metrics

    Tracks how order transactions end and how many stock units they consume.
    Ticket ids are not used as labels to keep series cardinality bounded.
    """

    def __init__(self):
        # ========== Order Transaction Metrics ==========
        self.order_requests = Counter(
            'order_requests_total',
            'Total order placement attempts',
            ['result'],  # result: created/insufficient_stock/not_found/failed
        )

        self.tickets_sold = Counter(
            'tickets_sold_total',
            'Stock units consumed by committed orders',
        )

        self.order_transaction_duration = Histogram(
            'order_transaction_duration_seconds',
            'Order transaction processing time',
            ['result'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 3.0, 5.0],
        )

        # ========== Identity Metrics ==========
        self.auth_failures = Counter(
            'auth_failures_total',
            'Rejected requests at the auth gate',
            ['reason'],  # reason: unauthorized/forbidden
        )

    def record_order(self, *, result: str, quantity: int, duration: float) -> None:
        self.order_requests.labels(result=result).inc()
        self.order_transaction_duration.labels(result=result).observe(duration)
        if result == OrderResult.CREATED:
            self.tickets_sold.inc(quantity)

    def record_auth_failure(self, *, reason: str) -> None:
        self.auth_failures.labels(reason=reason).inc()


# Global metrics instance
metrics = TicketingMetrics()
