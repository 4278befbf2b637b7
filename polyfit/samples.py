"""
Sample storage shared by the fitter, the normal-equations builder and the
statistics helpers.

Three representations are supported and x and y must use the same one:

PLAIN     list/tuple of real numbers, stored as Python floats
FLOAT32   numpy array of dtype float32
FLOAT64   numpy array of dtype float64

Scalar arithmetic always happens in Python floats; values are rounded to the
storage precision only when written into a vector or matrix created here.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import NDArray

from polyfit.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

FloatArray = NDArray[np.floating[Any]]
Vector = Union[list[float], FloatArray]
Matrix = list[Any]          # rows are list[float] or 1-D views of one buffer


class SampleKind(Enum):
    PLAIN = "plain"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> Optional[np.dtype]:
        return None if self is SampleKind.PLAIN else np.dtype(self.value)

    @classmethod
    def of(cls, values: Any) -> "SampleKind":
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ConfigurationError(
                    f"numpy samples must be one-dimensional, got shape {values.shape}")
            if values.dtype == np.float32:
                return cls.FLOAT32
            if values.dtype == np.float64:
                return cls.FLOAT64
            raise ConfigurationError(
                f"numpy samples must be float32 or float64, got {values.dtype}")
        if isinstance(values, (list, tuple)):
            return cls.PLAIN
        raise ConfigurationError(
            f"samples must be lists, tuples or numpy arrays, got {type(values).__name__}")


def new_vector(kind: SampleKind, length: int) -> Vector:
    if kind is SampleKind.PLAIN:
        return [0.0] * length
    return np.zeros(length, dtype=kind.dtype)


def new_matrix(kind: SampleKind, rows: int, cols: int) -> Matrix:
    """Zero matrix as a list of rows.

    numpy storage is one contiguous buffer sliced into row views, so swapping
    two rows only swaps list entries.
    """
    if kind is SampleKind.PLAIN:
        return [[0.0] * cols for _ in range(rows)]
    buffer = np.zeros((rows, cols), dtype=kind.dtype)
    return [buffer[r] for r in range(rows)]


def _plain_values(values: Sequence[Any], name: str) -> tuple[float, ...]:
    for v in values:
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ConfigurationError(f"{name} must contain only real numbers, got {v!r}")
    return tuple(float(v) for v in values)


def _frozen_copy(values: FloatArray) -> FloatArray:
    frozen = values.copy()
    frozen.setflags(write=False)
    return frozen


@dataclass(frozen=True, slots=True)
class SampleSet:
    """Validated, immutable (x, y) pairs."""

    kind: SampleKind
    x: Union[tuple[float, ...], FloatArray]
    y: Union[tuple[float, ...], FloatArray]

    @classmethod
    def from_sequences(cls, x: Any, y: Any) -> "SampleSet":
        x_kind = SampleKind.of(x)
        y_kind = SampleKind.of(y)
        if x_kind is not y_kind:
            raise ConfigurationError(
                f"x and y must share one representation, got {x_kind.name} and {y_kind.name}")
        if len(x) != len(y):
            raise ConfigurationError(
                f"x and y must have the same length, got {len(x)} and {len(y)}")
        if len(x) == 0:
            raise ConfigurationError("x and y must not be empty")

        if x_kind is SampleKind.PLAIN:
            return cls(x_kind, _plain_values(x, "x"), _plain_values(y, "y"))
        return cls(x_kind, _frozen_copy(x), _frozen_copy(y))

    def __len__(self) -> int:
        return len(self.x)

    def pairs(self) -> list[tuple[float, float]]:
        """Samples as Python float pairs, in index order."""
        if self.kind is SampleKind.PLAIN:
            return list(zip(self.x, self.y))
        return list(zip(self.x.tolist(), self.y.tolist()))
