"""Core shape data structures for JAX Shapes.

This module provides the value types for geometric primitives in a
JAX-native, immutable format.
"""

from .obb import OBB
from .shape_type import ShapeType

__all__ = ["OBB", "ShapeType"]
