"""
ValidationRule — the capability every concrete rule implements.

A rule closes over the subject it was built with and reports on it through
a single ``evaluate()`` call. Ordinary failure is returned as a failing
ValidationResult, never raised. There is no default implementation.
"""
from typing import Any, Protocol, runtime_checkable

from fluentval.models.validation import ValidationResult


@runtime_checkable
class ValidationRule(Protocol):
    """Anything with a side-effect-free ``evaluate() -> ValidationResult``."""

    def evaluate(self) -> ValidationResult:
        ...


def is_rule(obj: Any) -> bool:
    """True when *obj* exposes a callable ``evaluate``."""
    return obj is not None and callable(getattr(obj, "evaluate", None))


def rule_type_name(rule: Any) -> str:
    return type(rule).__name__
