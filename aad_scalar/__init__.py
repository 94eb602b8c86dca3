# aad_scalar/__init__.py
# Scalar reverse-mode Automatic Adjoint Differentiation

from .core.cell import Cell
from .core.backward import Backward
from .core.var import Var, var
from .core.node import Sum, Product, Operand
from .core.engine import backward
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import iter_nodes, leaves, graph_summary

# Ensure the functional operators are importable from the top level
from .ops import add, mul

__all__ = [
    # Core
    'Cell',
    'Backward',
    'Var',
    'var',
    'Sum',
    'Product',
    'Operand',
    # Engine
    'backward',
    'grad',
    'grads',
    'grads_list',
    'value',
    # Graph inspection
    'iter_nodes',
    'leaves',
    'graph_summary',
    # Builders
    'add',
    'mul',
]

__version__ = "0.1.0"
