"""
JAX Shapes: geometric bounding-volume primitives in JAX.

This library provides pure, JIT-compilable implementations of bounding
volumes and the transforms that move them, for use in broad-phase
collision, culling and spatial partitioning code.
"""

import jax
jax.config.update("jax_enable_x64", True)

from . import transforms
from . import core
from . import bounds

from .core import OBB, ShapeType

__version__ = "0.1.0"
__all__ = ["transforms", "core", "bounds", "OBB", "ShapeType"]
