"""
Linear-algebra helpers consumed by the shape primitives.

- SO(3) rotations and 3x3 matrices (so3 module)
- 4x4 homogeneous TRS transforms (se3 module)

All functions are pure, stateless and JIT-compilable.
"""

from . import so3
from . import se3

__all__ = [
    "so3",
    "se3",
]
