"""
NonEmptyRule: the reference rule every concrete rule is modelled on.
"""
from typing import Optional

from fluentval.config.constants import EMPTY_VALUE_MESSAGE
from fluentval.models.validation import ValidationResult


class NonEmptyRule:
    """Critical failure when the held string is None or empty."""

    def __init__(self, value: Optional[str], field_name: Optional[str] = None) -> None:
        self.value = value
        self.field_name = field_name

    def evaluate(self) -> ValidationResult:
        if self.value is None or self.value == "":
            label = self.field_name if self.field_name is not None else "value"
            return ValidationResult.failure(EMPTY_VALUE_MESSAGE.format(field=label), critical=True)
        return ValidationResult.success()
