"""Validation utilities for Bracket Schedule.

This module provides reusable score validation with consistent error handling.
Both the schedule controller and the ledgers use it, so a score is checked
the same way before it is sent and when it is received.
"""

import math
import re
from typing import Any, Optional, Tuple

from bracketschedule.exceptions import ScoreValidationException

NOT_A_NUMBER_MESSAGE = "Scores must be numbers"
NEGATIVE_MESSAGE = "Scores must be non-negative integers"
TIE_MESSAGE = "No ties allowed"
MISSING_GAME_MESSAGE = "Missing gameId"
TOO_LARGE_MESSAGE = "Scores must be at most 9223372036854775807"

# Largest value an SQLite INTEGER column holds
MAX_SCORE = 2**63 - 1


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Raw Input ==========


def sanitize_digits(raw: Optional[str]) -> str:
    """Strip everything but digits from a score box.

    Example:
        >>> sanitize_digits(" 1a2 ")
        '12'
    """
    return re.sub(r"[^\d]", "", raw or "")


# ========== Score Validation ==========


def validate_score(value: Any) -> ValidationResult:
    """Validate a single score.

    Accepts ints, integral floats and digit strings. Booleans are rejected.

    Returns:
        ValidationResult whose sanitized_value is the score as an int
    """
    if value is None or isinstance(value, bool):
        return ValidationResult(is_valid=False, error_message=NOT_A_NUMBER_MESSAGE)

    if isinstance(value, str):
        value = value.strip()
        try:
            value = float(value)
        except ValueError:
            return ValidationResult(
                is_valid=False, error_message=NOT_A_NUMBER_MESSAGE
            )

    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return ValidationResult(is_valid=False, error_message=NOT_A_NUMBER_MESSAGE)

    if value < 0 or (isinstance(value, float) and not value.is_integer()):
        return ValidationResult(is_valid=False, error_message=NEGATIVE_MESSAGE)

    if value > MAX_SCORE:
        return ValidationResult(is_valid=False, error_message=TOO_LARGE_MESSAGE)

    return ValidationResult(is_valid=True, sanitized_value=int(value))


def validate_score_pair(a: Any, b: Any) -> ValidationResult:
    """Validate both sides of a result.

    Returns:
        ValidationResult whose sanitized_value is an ``(a, b)`` tuple of ints
    """
    result_a = validate_score(a)
    if not result_a:
        return result_a
    result_b = validate_score(b)
    if not result_b:
        return result_b

    if result_a.sanitized_value == result_b.sanitized_value:
        return ValidationResult(is_valid=False, error_message=TIE_MESSAGE)

    return ValidationResult(
        is_valid=True,
        sanitized_value=(result_a.sanitized_value, result_b.sanitized_value),
    )


def validate_score_pair_strict(a: Any, b: Any) -> Tuple[int, int]:
    """Validate a result and raise if it is not acceptable.

    Raises:
        ScoreValidationException: If either score is invalid or they are tied
    """
    result = validate_score_pair(a, b)
    if not result.is_valid:
        raise ScoreValidationException(result.error_message)
    return result.sanitized_value


__all__ = [
    "ValidationResult",
    "sanitize_digits",
    "validate_score",
    "validate_score_pair",
    "validate_score_pair_strict",
    "NOT_A_NUMBER_MESSAGE",
    "NEGATIVE_MESSAGE",
    "TIE_MESSAGE",
    "MISSING_GAME_MESSAGE",
]
