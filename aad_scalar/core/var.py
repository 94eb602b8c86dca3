# aad_scalar/core/var.py
from __future__ import annotations
from typing import Any, Optional

from .backward import Backward
from .cell import Cell


class Var(Backward):
    """
    Leaf variable: a handle to one shared ``Cell``.

    Attributes
    ----------
    cell : Cell
        Value/gradient storage. Shared, never copied: ``alias()`` and
        ``copy.copy`` return a new handle over the same cell, so a variable
        reached through several handles accumulates every contribution.
    name : Optional[str]
        Optional debug/pretty-print name.
    """
    __slots__ = ("cell", "name")

    def __init__(self, val: Any, *, name: Optional[str] = None):
        self.cell = Cell(val)
        self.name = name

    @classmethod
    def _from_cell(cls, cell: Cell, name: Optional[str] = None) -> "Var":
        v = cls.__new__(cls)
        v.cell = cell
        v.name = name
        return v

    def alias(self) -> "Var":
        """New handle over the same cell."""
        return Var._from_cell(self.cell, self.name)

    def __copy__(self):
        return self.alias()

    def __deepcopy__(self, memo):
        # Handles are references; deep-copying one must not split the cell
        return self.alias()

    def value(self):
        return self.cell.value

    def grad(self):
        return self.cell.grad

    def propagate(self, seed) -> None:
        self.cell.accumulate(seed)

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return f"Var({float(self.value())!r}, grad={float(self.grad())!r}{label})"


def var(x: Any, *, name: Optional[str] = None) -> Var:
    """Shorthand for ``Var(x)``."""
    return Var(x, name=name)
