"""
Validator — fluent rule builder and fail-fast evaluator.

Rules are accumulated in insertion order through chained ``add_rule*``
calls, then evaluated once by ``is_valid()``:

    1. Each rule's ``evaluate()`` runs in order
    2. The first failing result stops the pass and becomes the outcome
    3. If none fails, a fresh success becomes the outcome
    4. The outcome is cached; later reads never re-run a rule

Additions after the outcome is cached follow the post-evaluation policy:
``"forbid"`` raises ValidatorSealedError, ``"invalidate"`` drops the cache.
"""
import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from fluentval.config import settings
from fluentval.config.constants import (
    OUTCOME_CRITICAL,
    OUTCOME_FAILED,
    OUTCOME_PASSED,
    POLICY_FORBID,
    POST_EVALUATION_POLICIES,
)
from fluentval.engine.metrics import record_outcome, record_rule_evaluated, timed_evaluation
from fluentval.engine.rule import ValidationRule, is_rule, rule_type_name
from fluentval.models.validation import ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValidatorError(Exception):
    """Base class for Validator misuse."""


class ValidatorNotEvaluatedError(ValidatorError):
    """Outcome accessor called before is_valid() has run."""


class ValidatorSealedError(ValidatorError):
    """Rule added after evaluation under the "forbid" policy."""


class ValidatorCycleError(ValidatorError):
    """Validator reached itself while evaluating (directly or via nesting)."""


class Validator:
    """
    Ordered collection of rules evaluated as one composite check.

    A Validator also satisfies the ValidationRule capability through
    :meth:`evaluate`, so validators can be nested inside each other.
    """

    def __init__(self, post_evaluation_policy: Optional[str] = None) -> None:
        policy = post_evaluation_policy or settings.VALIDATOR_POST_EVALUATION_POLICY
        if policy not in POST_EVALUATION_POLICIES:
            raise ValueError(
                f"Unknown post-evaluation policy '{policy}', "
                f"expected one of {sorted(POST_EVALUATION_POLICIES)}"
            )
        self.post_evaluation_policy = policy
        self._rules: List[ValidationRule] = []
        self._cached_result: Optional[ValidationResult] = None
        self._evaluating = False

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        state = "evaluated" if self.evaluated else "building"
        return f"Validator(rules={len(self._rules)}, state={state})"

    @property
    def rules(self) -> Tuple[ValidationRule, ...]:
        return tuple(self._rules)

    @property
    def result(self) -> Optional[ValidationResult]:
        """The cached outcome, or None while still building."""
        return self._cached_result

    @property
    def evaluated(self) -> bool:
        return self._cached_result is not None

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_rule(self, rule: ValidationRule) -> "Validator":
        """Append *rule* to the end of the sequence."""
        if not is_rule(rule):
            raise TypeError(f"{rule!r} does not implement evaluate()")
        self._append(rule)
        return self

    def add_rule_when(
        self,
        predicate: Optional[Callable[[], bool]] = None,
        rule: Optional[ValidationRule] = None,
    ) -> "Validator":
        """
        Append *rule* only if ``predicate()`` returns exactly ``True``.

        The predicate is called now, not at evaluation time. Without a
        predicate this is the same as :meth:`add_rule`.
        """
        if rule is None:
            raise TypeError("add_rule_when() requires a rule")
        if predicate is None or predicate() is True:
            return self.add_rule(rule)
        logger.debug("Predicate rejected %s, rule discarded", rule_type_name(rule))
        return self

    def add_rule_for_each(
        self,
        items: Optional[Iterable[T]],
        rule_factory: Callable[[T], Any],
    ) -> "Validator":
        """
        Append one rule per element of *items*, built by *rule_factory*.

        Factory results that are not rules (e.g. ``None``) are skipped.
        Empty or missing *items* is a no-op.
        """
        if items is None:
            return self
        for item in items:
            candidate = rule_factory(item)
            if is_rule(candidate):
                self._append(candidate)
            else:
                logger.debug("Factory produced no rule for %r, skipped", item)
        return self

    def _append(self, rule: ValidationRule) -> None:
        if self._cached_result is not None:
            if self.post_evaluation_policy == POLICY_FORBID:
                raise ValidatorSealedError(
                    f"Cannot add {rule_type_name(rule)}: validator already evaluated"
                )
            logger.debug("Rule added after evaluation, cached result dropped")
            self._cached_result = None
        self._rules.append(rule)
        logger.debug("Added rule #%d: %s", len(self._rules), rule_type_name(rule))

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Run the rules once (fail-fast) and report whether all passed."""
        if self._cached_result is None:
            if self._evaluating:
                raise ValidatorCycleError("validator contains itself and cannot be evaluated")
            self._evaluating = True
            try:
                self._cached_result = self._run()
            finally:
                self._evaluating = False
        return self._cached_result.is_valid

    def evaluate(self) -> ValidationResult:
        """Composite outcome, so a Validator can be used as a rule."""
        self.is_valid()
        return self._cached_result

    def get_error_message(self) -> Optional[str]:
        """Message of the first failing rule; None when all rules passed."""
        return self._require_result().error_message

    def has_critical_errors(self) -> bool:
        return self._require_result().is_critical

    def _require_result(self) -> ValidationResult:
        if self._cached_result is None:
            raise ValidatorNotEvaluatedError("call is_valid() before reading the outcome")
        return self._cached_result

    def _run(self) -> ValidationResult:
        with timed_evaluation():
            for position, rule in enumerate(self._rules, start=1):
                result = rule.evaluate()
                record_rule_evaluated(rule_type_name(rule))
                if not isinstance(result, ValidationResult):
                    raise TypeError(
                        f"{rule_type_name(rule)}.evaluate() returned "
                        f"{type(result).__name__}, expected ValidationResult"
                    )
                if result.is_valid:
                    continue

                skipped = len(self._rules) - position
                if result.is_critical:
                    record_outcome(OUTCOME_CRITICAL)
                    logger.warning(
                        "Critical failure at rule #%d (%s): %s",
                        position, rule_type_name(rule), result.error_message,
                    )
                else:
                    record_outcome(OUTCOME_FAILED)
                    logger.info(
                        "Validation failed at rule #%d (%s): %s",
                        position, rule_type_name(rule), result.error_message,
                    )
                logger.debug("Short-circuit: %d rule(s) not evaluated", skipped)
                return result

        record_outcome(OUTCOME_PASSED)
        logger.debug("All %d rule(s) passed", len(self._rules))
        return ValidationResult.success()
