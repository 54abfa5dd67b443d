"""
ValidationResult — outcome of evaluating one rule (or a whole Validator).
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Immutable outcome of a single evaluation.

    A passing result never carries a message and is never critical.
    A failing result always carries a non-empty message; ``is_critical``
    marks it as more severe than an ordinary miss.

    Use :meth:`success` and :meth:`failure` rather than the raw constructor.
    """

    is_valid: bool
    error_message: Optional[str] = None
    is_critical: bool = False

    def __post_init__(self) -> None:
        if self.is_valid:
            if self.error_message:
                raise ValueError("a passing result cannot carry an error message")
            if self.is_critical:
                raise ValueError("a passing result cannot be critical")
        elif not self.error_message:
            raise ValueError("a failing result requires a non-empty error message")

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, message: str, critical: bool = False) -> "ValidationResult":
        return cls(is_valid=False, error_message=message, is_critical=critical)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_message": self.error_message,
            "is_critical": self.is_critical,
        }
