# aad_scalar/core/seeds.py

#-----------------------------------------------------------------------------
# Function-style entry points. Each call wraps its inputs in new leaves, so
# every call differentiates a graph of its own and nothing carries over.
#-----------------------------------------------------------------------------
from __future__ import annotations
import numbers
from typing import Any, Callable, Dict, Iterable, List
import numpy as np

from .backward import Backward
from .var import Var
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a node; pass through plain numbers unchanged."""
    return x.value() if isinstance(x, Backward) else x


def _output(y: Any, fname: str):
    """Return y if it is a node; None for a constant (plain number) output."""
    if isinstance(y, Backward):
        return y
    # Real scalars only (bool excluded); arrays are not a scalar output
    if isinstance(y, numbers.Real) and not isinstance(y, (bool, np.bool_)):
        return None
    raise ValueError(f"{fname} expects f to return Var, Sum, Product or a number, "
                     f"but got {type(y)}")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Any], x0) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph, so repeated calls never accumulate into each other.
    """
    x = Var(x0, name="x")
    y = _output(f(x), "grad(f, x0)")
    if y is not None:
        backward(y, seed=1.0)
    return x.grad()


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Any],
          inputs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), in ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, Var] = {k: Var(v, name=k) for k, v in inputs.items()}
    y = _output(f(vars_ad), "grads(f, inputs)")
    if y is not None:
        backward(y, seed=1.0)
    return {k: vars_ad[k].grad() for k in inputs.keys()}


def grads_list(f: Callable[[List[Var]], Any], x0_list: Iterable[Any]) -> List[Any]:
    """
    Same as grads(), but inputs and partials are lists in matching order.

    Example
    -------
    f = lambda xs: xs[0] * xs[1] + xs[1]
    grads_list(f, [5.0, 2.0]) -> [2.0, 6.0]
    """
    xs: List[Var] = [Var(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _output(f(xs), "grads_list(f, x0_list)")
    if y is not None:
        backward(y, seed=1.0)
    return [x.grad() for x in xs]
