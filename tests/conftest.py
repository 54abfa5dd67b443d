"""
Shared test fixtures for the validation engine test suite.
"""
from typing import Optional

import pytest

from fluentval.models.validation import ValidationResult


class CountingRule:
    """Rule returning a fixed outcome and counting evaluate() calls."""

    def __init__(self, valid: bool = True, message: Optional[str] = None, critical: bool = False):
        self.valid = valid
        self.message = message
        self.critical = critical
        self.calls = 0

    def evaluate(self) -> ValidationResult:
        self.calls += 1
        if self.valid:
            return ValidationResult.success()
        return ValidationResult.failure(self.message, critical=self.critical)


# ==========================================================================
# Rule factories
# ==========================================================================

@pytest.fixture
def passing_rule():
    def _make():
        return CountingRule(valid=True)
    return _make


@pytest.fixture
def failing_rule():
    def _make(message: str = "rule failed", critical: bool = False):
        return CountingRule(valid=False, message=message, critical=critical)
    return _make


# ==========================================================================
# Metrics
# ==========================================================================

@pytest.fixture
def metrics_enabled(monkeypatch):
    from fluentval.config import settings
    monkeypatch.setattr(settings, "VALIDATOR_METRICS_ENABLED", True)


@pytest.fixture
def metrics_disabled(monkeypatch):
    from fluentval.config import settings
    monkeypatch.setattr(settings, "VALIDATOR_METRICS_ENABLED", False)


# ==========================================================================
# JSON documents
# ==========================================================================

@pytest.fixture
def order_schema():
    return {
        "type": "object",
        "additionalProperties": False,
        "required": ["order_id", "quantity"],
        "properties": {
            "order_id": {"type": "string", "minLength": 1},
            "quantity": {"type": "integer", "minimum": 1},
        },
    }


@pytest.fixture
def valid_order():
    return {"order_id": "ORD-001", "quantity": 3}
