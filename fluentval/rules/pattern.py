"""
PatternRule: regex full-match check on a string value.
"""
import re
from typing import Optional, Pattern, Union

from fluentval.config.constants import MAX_MESSAGE_VALUE_CHARS, PATTERN_MISMATCH_MESSAGE
from fluentval.models.validation import ValidationResult


class PatternRule:
    def __init__(
        self,
        value: Optional[str],
        pattern: Union[str, Pattern[str]],
        critical: bool = False,
    ) -> None:
        self.value = value
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.critical = critical

    def evaluate(self) -> ValidationResult:
        if isinstance(self.value, str) and self.pattern.fullmatch(self.value):
            return ValidationResult.success()
        shown = str(self.value)[:MAX_MESSAGE_VALUE_CHARS]
        return ValidationResult.failure(
            PATTERN_MISMATCH_MESSAGE.format(value=shown, pattern=self.pattern.pattern),
            critical=self.critical,
        )
