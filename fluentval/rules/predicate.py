"""
PredicateRule: adapts a zero-argument callable into a rule.
"""
from typing import Callable

from fluentval.models.validation import ValidationResult


class PredicateRule:
    def __init__(self, check: Callable[[], bool], message: str, critical: bool = False) -> None:
        if not message:
            raise ValueError("PredicateRule requires a failure message")
        self.check = check
        self.message = message
        self.critical = critical

    def evaluate(self) -> ValidationResult:
        if self.check():
            return ValidationResult.success()
        return ValidationResult.failure(self.message, critical=self.critical)
