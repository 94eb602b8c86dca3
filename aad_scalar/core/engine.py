# aad_scalar/core/engine.py
from __future__ import annotations
import logging
from typing import Sequence, Union

from .backward import Backward

logger = logging.getLogger(__name__)


def backward(outputs: Union[Backward, Sequence[Backward]], seed=1.0) -> None:
    """
    Run a reverse pass from the given output(s).

    Args:
        outputs: a node or a (list/tuple) of nodes to seed.
        seed: adjoint seed applied to each output (1.0 gives d(out)/d(out)).

    Notes:
        - Gradients accumulate: calling this twice on the same root doubles
          every reachable grad. Build a fresh graph for an independent pass.
        - A leaf reachable along several paths receives the sum of all path
          contributions.
    """
    roots = list(outputs) if isinstance(outputs, (list, tuple)) else [outputs]
    for y in roots:
        if not isinstance(y, Backward):
            raise TypeError(f"backward() expects Var, Sum or Product, but got {type(y)}")
    for y in roots:
        logger.debug("reverse pass from %r with seed %r", y, seed)
        y.propagate(seed)
