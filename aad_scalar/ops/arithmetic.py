# aad_scalar/ops/arithmetic.py
import numpy as np

from ..core.backward import Backward
from ..core.var import Var
from ..core.node import Sum, Product

_CONSTANTS = (int, float, np.integer, np.floating)


def _is_operand(x) -> bool:
    """True for differentiable nodes and plain real numbers."""
    return isinstance(x, Backward) or (
        isinstance(x, _CONSTANTS) and not isinstance(x, bool)
    )


def _as_var(x):
    """Ensure x is a node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Backward) else Var(x)


def add(x, y) -> Sum:
    """Sum node over x and y. Nodes are passed by reference, never copied."""
    return Sum(_as_var(x), _as_var(y))


def mul(x, y) -> Product:
    """Product node over x and y."""
    return Product(_as_var(x), _as_var(y))
