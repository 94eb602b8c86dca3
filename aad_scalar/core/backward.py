# aad_scalar/core/backward.py
from __future__ import annotations
from abc import ABC, abstractmethod


class Backward(ABC):
    """
    Differentiable capability shared by every node kind.

    The concrete kinds are fixed: ``Var`` (leaf), ``Sum`` and ``Product``.
    Each caches its forward value at construction; only the gradient
    changes afterwards, and only through ``propagate``.
    """
    __slots__ = ()

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    @abstractmethod
    def value(self):
        """Cached forward value."""

    @abstractmethod
    def grad(self):
        """Gradient accumulated so far (0.0 before any backward pass)."""

    @abstractmethod
    def propagate(self, seed) -> None:
        """Accumulate ``seed`` here and push the chain-rule share to operands."""

    # Operator overloading; plain numbers are wrapped as constant leaves.
    # Unsupported operand types fall through to Python's TypeError.
    def __add__(self, other):
        from ..ops.arithmetic import add, _is_operand
        return add(self, other) if _is_operand(other) else NotImplemented

    def __radd__(self, other):
        from ..ops.arithmetic import add, _is_operand
        return add(other, self) if _is_operand(other) else NotImplemented

    def __mul__(self, other):
        from ..ops.arithmetic import mul, _is_operand
        return mul(self, other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other):
        from ..ops.arithmetic import mul, _is_operand
        return mul(other, self) if _is_operand(other) else NotImplemented
