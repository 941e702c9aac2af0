# shrinkcheck/errors.py
"""
shrinkcheck Error Types

Error Hierarchy:
────────────────
┌─────────────────────────────────────────────────────────────────────┐
│  ShrinkcheckError (base)                                            │
│  ├── ConfigurationError          - invalid caller parameters        │
│  │   ├── InvalidParameterError     - bad combinator or leaf arg     │
│  │   ├── InvalidBiasFrequencyError - bias frequency below 2         │
│  │   ├── InvalidWeightError        - non-positive choice weight     │
│  │   └── EmptyChoiceError          - weighted choice over nothing   │
│  └── PredicateExhaustedError     - bounded filter gave up           │
└─────────────────────────────────────────────────────────────────────┘

Exceptions raised by user callbacks (mappers, predicates, chain functions)
are never wrapped in these types; they reach the caller of ``generate``
unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "ShrinkcheckError",
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidBiasFrequencyError",
    "InvalidWeightError",
    "EmptyChoiceError",
    "PredicateExhaustedError",
]


class ShrinkcheckError(Exception):
    """
    Base exception for all shrinkcheck errors.

    Carries the plain message plus an optional hint telling the caller how
    to fix the problem.
    """

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def with_hint(self, hint: str) -> "ShrinkcheckError":
        """Add a hint to this error."""
        self.hint = hint
        return self

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


# ───────────────────────────────────────────────────────────────────────────────
# CONFIGURATION ERRORS
# ───────────────────────────────────────────────────────────────────────────────

class ConfigurationError(ShrinkcheckError):
    """A combinator or helper was given parameters it cannot work with."""


class InvalidParameterError(ConfigurationError):
    """A combinator or leaf argument is out of its accepted domain."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        super().__init__(f"{name} must be {expected}, got {value!r}")
        self.name = name
        self.value = value


class InvalidBiasFrequencyError(ConfigurationError):
    """``with_bias`` called with a frequency that would lock generation."""

    def __init__(self, frequency: Any) -> None:
        super().__init__(
            f"bias frequency must be an integer >= 2, got {frequency!r}",
            hint="the biased branch is taken one time over frequency",
        )
        self.frequency = frequency


class InvalidWeightError(ConfigurationError):
    """A weighted entry carries a weight that is not a positive integer."""

    def __init__(self, weight: Any, index: int, label: str = "") -> None:
        where = f" in {label}" if label else ""
        super().__init__(
            f"weight at index {index}{where} must be a positive integer, got {weight!r}"
        )
        self.weight = weight
        self.index = index
        self.label = label


class EmptyChoiceError(ConfigurationError):
    """A weighted choice was requested over zero producers."""

    def __init__(self, label: str = "") -> None:
        name = label or "weighted choice"
        super().__init__(
            f"{name} expects at least one arbitrary",
            hint="pass one or more arbitraries to choose from",
        )
        self.label = label


# ───────────────────────────────────────────────────────────────────────────────
# GENERATION ERRORS
# ───────────────────────────────────────────────────────────────────────────────

class PredicateExhaustedError(ShrinkcheckError):
    """A bounded ``filter`` rejected every value it was allowed to draw."""

    def __init__(self, attempts: int, last_value: Optional[Any] = None) -> None:
        super().__init__(
            f"predicate rejected {attempts} generated values in a row",
            hint="relax the predicate or generate closer to the wanted values",
        )
        self.attempts = attempts
        self.last_value = last_value
