from prometheus_client import Counter, Histogram


class MarketplaceMetrics:
    """
    Marketplace business metrics, exposed at /metrics

    Tracks reservation outcomes, negotiation transitions, chat traffic
    and realtime feed health.
    """

    def __init__(self) -> None:
        # ========== Booking / Inventory ==========
        self.reservation_requests = Counter(
            'ticket_reservation_requests_total',
            'Ticket reservation attempts',
            ['result'],  # success/insufficient/sold_out/not_found/invalid
        )

        self.reservation_duration = Histogram(
            'ticket_reservation_duration_seconds',
            'Atomic reservation duration',
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0],
        )

        self.tickets_reserved = Counter(
            'tickets_reserved_total', 'Ticket units reserved by successful bookings'
        )

        # ========== Request Negotiation ==========
        self.show_request_transitions = Counter(
            'show_request_transitions_total',
            'Show request status transitions',
            ['status'],  # pending/accepted/rejected
        )

        # ========== Messaging ==========
        self.messages_sent = Counter('chat_messages_sent_total', 'Chat messages persisted')

        # ========== Realtime Feed ==========
        self.broadcast_dropped = Counter(
            'broadcast_events_dropped_total',
            'Events dropped because a subscriber buffer was full',
            ['event_type'],
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, result: str, duration: float, quantity: int = 0) -> None:
        self.reservation_requests.labels(result=result).inc()
        self.reservation_duration.observe(duration)
        if quantity:
            self.tickets_reserved.inc(quantity)


# Global metrics instance
metrics = MarketplaceMetrics()
