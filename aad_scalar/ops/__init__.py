# aad_scalar/ops/__init__.py

# Convenience re-exports so users can do: from aad_scalar.ops import add, mul
from .arithmetic import add, mul

__all__ = ["add", "mul"]
