"""Tagged success/failure values returned by the validated statistics."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

HIGH_PRECISION = np.longdouble
HighPrecisionFloat = np.longdouble


class StatErrorKind(enum.Enum):
    """Reasons a validated statistic can fail."""

    SHAPE_MISMATCH = "shape_mismatch"
    EMPTY_INPUT = "empty_input"
    INSUFFICIENT_DATA = "insufficient_data"
    NEGATIVE_RADICAND = "negative_radicand"
    DEGENERATE_VARIANCE = "degenerate_variance"
    NEGATIVE_TOTAL = "negative_total"


class StatisticsError(ValueError):
    """Raised by :meth:`StatResult.unwrap` when the result is a failure."""

    def __init__(self, kind: StatErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class StatResult:
    """Outcome of a validated statistic: a value or a diagnostic.

    Exactly one of ``value`` and ``error`` is set. ``kind`` classifies a
    failure and is ``None`` on success. Diagnostic text is meant for logs;
    callers should branch on :attr:`ok` or :attr:`kind`, never on ``error``.

    Note:
        Truthiness follows success, so ``if not result:`` reads the same way
        as a check on an optional value.
    """

    value: Optional[HighPrecisionFloat] = None
    error: Optional[str] = None
    kind: Optional[StatErrorKind] = field(default=None)

    @classmethod
    def success(cls, value) -> "StatResult":
        return cls(value=HIGH_PRECISION(value))

    @classmethod
    def failure(cls, kind: StatErrorKind, message: str) -> "StatResult":
        return cls(error=str(message), kind=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> HighPrecisionFloat:
        """Return the value, raising :class:`StatisticsError` on failure."""
        if not self.ok:
            raise StatisticsError(self.kind, self.error)
        return self.value

    def value_or(self, default):
        return self.value if self.ok else default

    def as_float(self) -> float:
        """Narrow the extended-precision value to a Python float.

        Raises:
            StatisticsError: If the result is a failure.
        """
        return float(self.unwrap())
