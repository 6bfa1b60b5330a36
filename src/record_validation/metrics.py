"""
Prometheus Metrics — validation adapter observability.

Exposes counters and a histogram for:
- Validation outcomes (valid / invalid / invalid_input / engine_error)
- Message sources (custom / default / unknown_field)
- Validation latency

Usage
-----
    from src.record_validation.metrics import record_outcome, timed_validation

    with timed_validation():
        messages = validate(record)

    record_outcome("invalid")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# One increment per validate() call, labelled by how it ended.
VALIDATIONS: Counter = Counter(
    "record_validations_total",
    "Record validations by outcome",
    ["outcome"],
)

# One increment per resolved message, labelled by where the text came from.
MESSAGES_RESOLVED: Counter = Counter(
    "record_validation_messages_total",
    "Resolved validation messages by source (custom / default / unknown_field)",
    ["source"],
)

# Validation latency (seconds), including message resolution.
VALIDATION_LATENCY: Histogram = Histogram(
    "record_validation_seconds",
    "Time spent validating one record in seconds",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_outcome(outcome: str) -> None:
    """Increment the validation counter for *outcome*."""
    VALIDATIONS.labels(outcome=outcome).inc()


def record_message_source(source: str) -> None:
    """Increment the resolved-message counter for *source*."""
    MESSAGES_RESOLVED.labels(source=source).inc()


@contextmanager
def timed_validation() -> Generator[None, None, None]:
    """Context manager that records validation latency."""
    with VALIDATION_LATENCY.time():
        yield
