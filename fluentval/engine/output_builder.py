"""
Output builder — exports a Validator outcome as a plain dict.
"""
import logging

from fluentval.engine.rule import rule_type_name
from fluentval.engine.validator import Validator
from fluentval.models.report import ValidationReport

logger = logging.getLogger(__name__)


def build_validation_report(validator: Validator) -> dict:
    """
    Evaluate *validator* (if not already evaluated) and build its report.

    Returns:
        Dict with ``valid``, ``error_message``, ``critical``, ``rule_count``
        and ``rules`` (rule type names in insertion order).
    """
    validator.is_valid()
    result = validator.result
    report = ValidationReport(
        valid=result.is_valid,
        error_message=result.error_message,
        critical=result.is_critical,
        rule_count=len(validator),
        rules=[rule_type_name(rule) for rule in validator.rules],
    )
    logger.debug("Built validation report: valid=%s rules=%d", report.valid, report.rule_count)
    return report.model_dump()
