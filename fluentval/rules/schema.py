"""
SchemaRule: JSON Schema conformance of a decoded document.
"""
from jsonschema import ValidationError, validate

from fluentval.config.constants import SCHEMA_VIOLATION_MESSAGE
from fluentval.models.validation import ValidationResult


class SchemaRule:
    """
    Checks *instance* against *schema* with jsonschema.

    Only the first schema error is reported. An invalid *schema* itself
    raises (SchemaError), since that is a programming error, not a
    validation miss.
    """

    def __init__(self, instance, schema: dict, critical: bool = False) -> None:
        self.instance = instance
        self.schema = schema
        self.critical = critical

    def evaluate(self) -> ValidationResult:
        try:
            validate(instance=self.instance, schema=self.schema)
        except ValidationError as e:
            return ValidationResult.failure(
                SCHEMA_VIOLATION_MESSAGE.format(detail=e.message),
                critical=self.critical,
            )
        return ValidationResult.success()
