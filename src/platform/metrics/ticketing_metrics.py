from collections.abc import Iterator
from contextlib import contextmanager
import time

from prometheus_client import Counter, Gauge, Histogram

from src.platform.exception.exceptions import CustomBaseError


class TicketingMetrics:
    """
    Ledger Core Metrics Collector

    Tracks every ledger operation (accepted or rejected) plus the
    business counters the organizer dashboard reads.
    """

    def __init__(self) -> None:
        # ========== Operation Metrics ==========
        self.ledger_operations = Counter(
            'ledger_operations_total',
            'Total ledger operations',
            ['operation', 'result'],  # result: ok / error code
        )

        self.transactions_committed = Counter(
            'ledger_transactions_committed_total',
            'Ledger transactions committed under the serial transaction lock',
        )

        self.ledger_operation_duration = Histogram(
            'ledger_operation_duration_seconds',
            'Ledger operation duration (including lock wait)',
            ['operation'],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        # ========== Business Metrics ==========
        self.events_created = Counter('events_created_total', 'Total events created')

        self.events_cancelled = Counter('events_cancelled_total', 'Total events cancelled')

        self.tickets_sold = Counter(
            'tickets_sold_total', 'Total tickets sold through the registry', ['event_id']
        )

        self.ticket_transfers = Counter('ticket_transfers_total', 'Total ticket transfers')

        self.tickets_available = Gauge(
            'tickets_available', 'Remaining capacity per event', ['event_id']
        )

        self.notification_subscribers = Gauge(
            'notification_subscribers', 'Open notification stream subscribers'
        )

    # ========== Helper Methods ==========

    def record_operation(self, *, operation: str, result: str, duration: float) -> None:
        self.ledger_operations.labels(operation=operation, result=result).inc()
        self.ledger_operation_duration.labels(operation=operation).observe(duration)

    @contextmanager
    def track_operation(self, *, operation: str) -> Iterator[None]:
        """Time one ledger operation and count it under its outcome (ok or error code)."""
        start = time.perf_counter()
        result = 'ok'
        try:
            yield
        except CustomBaseError as e:
            result = e.error_code
            raise
        except Exception:
            result = 'internal_error'
            raise
        finally:
            self.record_operation(
                operation=operation, result=result, duration=time.perf_counter() - start
            )

    def record_purchase(self, *, event_id: int, quantity: int, tickets_available: int) -> None:
        self.tickets_sold.labels(event_id=str(event_id)).inc(quantity)
        self.tickets_available.labels(event_id=str(event_id)).set(tickets_available)

    def record_event_created(self, *, event_id: int, max_tickets: int) -> None:
        self.events_created.inc()
        self.tickets_available.labels(event_id=str(event_id)).set(max_tickets)

    def record_event_cancelled(self, *, event_id: int) -> None:
        self.events_cancelled.inc()
        self.tickets_available.labels(event_id=str(event_id)).set(0)


# Global metrics instance
metrics = TicketingMetrics()
