"""
Typed Pydantic model for the exported validation report.

The engine itself works on ValidationResult dataclasses; this model is the
boundary shape handed to callers that serialise the outcome.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ValidationReport(BaseModel):
    """Composite outcome of one Validator, plus the rules it held."""

    valid: bool
    error_message: Optional[str] = Field(None, description="Message of the first failing rule, if any.")
    critical: bool = Field(False, description="True when the first failing rule was critical.")
    rule_count: int = Field(..., ge=0)
    rules: List[str] = Field(default_factory=list, description="Rule type names in insertion order.")

    @model_validator(mode="after")
    def check_outcome_consistency(self) -> "ValidationReport":
        if self.valid and (self.error_message or self.critical):
            raise ValueError("a valid report cannot carry an error message or a critical flag")
        if not self.valid and not self.error_message:
            raise ValueError("an invalid report requires an error message")
        if self.rule_count != len(self.rules):
            raise ValueError("rule_count must match the number of listed rules")
        return self
