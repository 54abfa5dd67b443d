"""
Prometheus Metrics — validation engine observability.

Exposes counters and a histogram for:
- Rules evaluated, by rule type
- Composite outcomes (passed / failed / critical)
- Evaluation pass latency

Recording is skipped when VALIDATOR_METRICS_ENABLED is false; the metric
objects themselves are always registered.

Usage
-----
    from fluentval.engine.metrics import record_outcome, timed_evaluation

    with timed_evaluation():
        ok = validator.is_valid()

    record_outcome("critical")
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from fluentval.config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Every rule.evaluate() call made by a Validator, labelled by rule type.
RULES_EVALUATED: Counter = Counter(
    "fluentval_rules_evaluated_total",
    "Total rule evaluations performed by validators",
    ["rule_type"],
)

# Composite outcome of each evaluation pass.
VALIDATION_OUTCOMES: Counter = Counter(
    "fluentval_validation_outcomes_total",
    "Validator outcomes by kind (passed / failed / critical)",
    ["outcome"],
)

# Wall time of a full evaluation pass (seconds).
EVALUATION_LATENCY: Histogram = Histogram(
    "fluentval_evaluation_seconds",
    "Time spent in a validator evaluation pass in seconds",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_rule_evaluated(rule_type: str) -> None:
    """Increment the rule evaluation counter for *rule_type*."""
    if settings.VALIDATOR_METRICS_ENABLED:
        RULES_EVALUATED.labels(rule_type=rule_type).inc()


def record_outcome(outcome: str) -> None:
    """Increment the outcome counter for *outcome*."""
    if settings.VALIDATOR_METRICS_ENABLED:
        VALIDATION_OUTCOMES.labels(outcome=outcome).inc()


@contextmanager
def timed_evaluation() -> Generator[None, None, None]:
    """
    Context manager that records evaluation pass latency.

    Usage::

        with timed_evaluation():
            validator.is_valid()
    """
    if not settings.VALIDATOR_METRICS_ENABLED:
        yield
        return
    with EVALUATION_LATENCY.time():
        yield
