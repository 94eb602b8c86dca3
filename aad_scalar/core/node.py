# aad_scalar/core/node.py
from __future__ import annotations
from abc import abstractmethod
from typing import Tuple, Union

from .backward import Backward
from .cell import Cell
from .var import Var


class _Composite(Backward):
    """
    Binary expression node.

    Attributes
    ----------
    var : Var
        Private leaf caching this node's forward value and accumulated
        gradient, so the node is differentiable like a leaf one level up.
    left, right : Operand
        Operand handles, held by reference. They may be the same object
        (``a + a``) or shared with other sub-expressions.
    """
    __slots__ = ("var", "left", "right")

    op_tag = ""

    def __init__(self, left: "Operand", right: "Operand"):
        for operand in (left, right):
            if not isinstance(operand, Backward):
                raise TypeError(
                    f"{type(self).__name__} operands must be Var, Sum or Product, "
                    f"but got {type(operand)}"
                )
        self.left = left
        self.right = right
        self.var = Var._from_cell(Cell(self._forward(left.value(), right.value())))

    @staticmethod
    @abstractmethod
    def _forward(a, b):
        """Forward value of the node from its operand values."""

    @abstractmethod
    def _shares(self, seed) -> Tuple[object, object]:
        """Chain-rule contributions (to left, to right) of an incoming seed."""

    def value(self):
        return self.var.value()

    def grad(self):
        return self.var.grad()

    def propagate(self, seed) -> None:
        # Explicit work stack of (node, seed) pairs; expression depth is not
        # bounded by the interpreter recursion limit.
        stack = [(self, seed)]
        while stack:
            node, g = stack.pop()
            if isinstance(node, _Composite):
                node.var.propagate(g)
                left_share, right_share = node._shares(g)
                stack.append((node.right, right_share))
                stack.append((node.left, left_share))
            else:
                node.propagate(g)

    def __repr__(self):
        return (f"{type(self).__name__}({float(self.value())!r}, "
                f"grad={float(self.grad())!r})")


class Sum(_Composite):
    """left + right; both local partials are 1."""
    __slots__ = ()

    op_tag = "add"

    @staticmethod
    def _forward(a, b):
        return a + b

    def _shares(self, seed):
        return seed, seed


class Product(_Composite):
    """left * right; d/dleft = right, d/dright = left."""
    __slots__ = ()

    op_tag = "mul"

    @staticmethod
    def _forward(a, b):
        return a * b

    def _shares(self, seed):
        # Both scaling factors are read before anything below is touched
        lv = self.left.value()
        rv = self.right.value()
        return rv * seed, lv * seed


# Closed set of operand kinds a composite accepts
Operand = Union[Var, Sum, Product]
