"""
RangeRule: inclusive numeric bounds check.

Non-numeric values, NaN and infinities always fail.
"""
from typing import Any, Optional

import numpy as np

from fluentval.config.constants import (
    ABOVE_MAXIMUM_MESSAGE,
    BELOW_MINIMUM_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
)
from fluentval.models.validation import ValidationResult


class RangeRule:
    def __init__(
        self,
        value: Any,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        critical: bool = False,
    ) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.critical = critical

    def evaluate(self) -> ValidationResult:
        # bools excluded
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, np.number)):
            return ValidationResult.failure(NOT_A_NUMBER_MESSAGE.format(value=self.value), self.critical)
        # ints are always finite and may overflow a float
        if isinstance(self.value, (float, np.floating)) and not np.isfinite(self.value):
            return ValidationResult.failure(NOT_A_NUMBER_MESSAGE.format(value=self.value), self.critical)

        if self.minimum is not None and self.value < self.minimum:
            return ValidationResult.failure(
                BELOW_MINIMUM_MESSAGE.format(value=self.value, minimum=self.minimum),
                self.critical,
            )
        if self.maximum is not None and self.value > self.maximum:
            return ValidationResult.failure(
                ABOVE_MAXIMUM_MESSAGE.format(value=self.value, maximum=self.maximum),
                self.critical,
            )
        return ValidationResult.success()
