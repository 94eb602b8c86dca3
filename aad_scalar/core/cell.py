# aad_scalar/core/cell.py
from __future__ import annotations
import numpy as np
from typing import Any

# Scalar dtype used for every value and gradient in the engine
DTYPE = np.float64

_NUMERIC = (int, float, np.integer, np.floating)


def as_scalar(x: Any) -> np.float64:
    """Convert a plain real number to the engine dtype; reject anything else."""
    # bool is an int subclass but never a meaningful input value
    if isinstance(x, bool) or not isinstance(x, _NUMERIC):
        raise TypeError(
            f"only real numeric scalars (int, float, numpy scalar) are accepted, "
            f"but got {type(x)}"
        )
    return DTYPE(x)


class Cell:
    """
    Mutable value/gradient pair; the unit of state written by propagation.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value. Set once at creation.
    grad : np.float64
        Reverse-mode adjoint (gradient accumulator). Starts at 0.0 and is
        only ever accumulated into.
    """
    __slots__ = ("value", "grad")

    def __init__(self, value: Any):
        self.value = as_scalar(value)
        self.grad = DTYPE(0.0)

    def accumulate(self, seed) -> None:
        self.grad = self.grad + DTYPE(seed)

    def __repr__(self):
        return f"Cell(value={float(self.value)!r}, grad={float(self.grad)!r})"
