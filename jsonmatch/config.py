"""Settings that control how two JSON values are compared."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class CompareMode(enum.Enum):
    """Whether the expected value must be contained in, or equal to, the actual one."""

    INCLUSIVE = "inclusive"
    STRICT = "strict"


class NumericMode(enum.Enum):
    """How numbers of different kinds (integer, float) are compared."""

    STRICT = "strict"
    ASSUME_FLOAT = "assume_float"


class ArraySortingMode(enum.Enum):
    """Whether the order of array items matters."""

    CONSIDER = "consider"
    IGNORE = "ignore"


@dataclass(frozen=True)
class FloatCompareMode:
    """How floats are compared: exactly, or within an epsilon."""

    epsilon: float | None = None

    @classmethod
    def exact(cls) -> FloatCompareMode:
        """Floats are equal only when identical."""
        return cls(None)

    @classmethod
    def within(cls, epsilon: float) -> FloatCompareMode:
        """Floats are equal when they differ by at most ``epsilon``."""
        return cls(float(epsilon))

    @property
    def is_exact(self) -> bool:
        return self.epsilon is None


@dataclass(frozen=True)
class Config:
    """Comparison configuration; the ``with_*`` methods return modified copies."""

    compare_mode: CompareMode
    numeric_mode: NumericMode = NumericMode.STRICT
    float_compare_mode: FloatCompareMode = field(default_factory=FloatCompareMode.exact)
    array_sorting_mode: ArraySortingMode = ArraySortingMode.CONSIDER

    def with_numeric_mode(self, numeric_mode: NumericMode) -> Config:
        return replace(self, numeric_mode=numeric_mode)

    def with_compare_mode(self, compare_mode: CompareMode) -> Config:
        return replace(self, compare_mode=compare_mode)

    def with_float_compare_mode(self, float_compare_mode: FloatCompareMode) -> Config:
        return replace(self, float_compare_mode=float_compare_mode)

    def consider_array_sorting(self, consider: bool) -> Config:
        """Return a copy that considers or ignores array item order.

        Raises ValueError when asked to consider ordering under strict comparison.
        """
        if consider:
            if self.compare_mode is CompareMode.STRICT:
                raise ValueError(
                    "strict comparison does not allow array ordering to be ignored"
                )
            return replace(self, array_sorting_mode=ArraySortingMode.CONSIDER)
        return replace(self, array_sorting_mode=ArraySortingMode.IGNORE)