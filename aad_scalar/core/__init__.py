# aad_scalar/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Cell        : Mutable value/gradient pair written by propagation.
    Backward    : Differentiable capability (value, grad, propagate).
    Var, var    : Leaf variable handle and its shorthand constructor.
    Sum         : Composite node left + right.
    Product     : Composite node left * right.
    Operand     : Closed union of node kinds accepted as operands.
    backward    : Run a reverse pass from one or more outputs.
    grad, grads : Convenience: derivative(s) of a function at a point.
    value       : Convenience: numeric value of a node.
"""

from .cell import Cell
from .backward import Backward
from .var import Var, var
from .node import Sum, Product, Operand
from .engine import backward
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Cell",
    "Backward",
    "Var",
    "var",
    "Sum",
    "Product",
    "Operand",
    "backward",
    "grad",
    "grads",
    "grads_list",
    "value",
]
