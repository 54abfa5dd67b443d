"""
Constants used across the validation engine.
"""
from typing import Set

# =============================================================================
# Post-evaluation policies
# =============================================================================
POLICY_FORBID: str = "forbid"
POLICY_INVALIDATE: str = "invalidate"

POST_EVALUATION_POLICIES: Set[str] = {POLICY_FORBID, POLICY_INVALIDATE}

# =============================================================================
# Outcome labels (metrics, logs, reports)
# =============================================================================
OUTCOME_PASSED: str = "passed"
OUTCOME_FAILED: str = "failed"
OUTCOME_CRITICAL: str = "critical"

# =============================================================================
# Example rule messages
# =============================================================================
EMPTY_VALUE_MESSAGE: str = "Value for '{field}' must not be empty"
PATTERN_MISMATCH_MESSAGE: str = "Value '{value}' does not match pattern '{pattern}'"
NOT_A_NUMBER_MESSAGE: str = "Value '{value}' is not a finite number"
BELOW_MINIMUM_MESSAGE: str = "Value {value} is below minimum {minimum}"
ABOVE_MAXIMUM_MESSAGE: str = "Value {value} is above maximum {maximum}"
SCHEMA_VIOLATION_MESSAGE: str = "Schema violation: {detail}"

# Long subject values are cut in messages.
MAX_MESSAGE_VALUE_CHARS: int = 50
