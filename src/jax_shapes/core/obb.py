"""OBB PyTree data structure.

An oriented bounding box stored as a frozen flax dataclass so that it can be
passed through `jax.jit`, `jax.vmap` and `jax.grad` like any other pytree.
"""

from jax import Array
from flax import struct

from .shape_type import ShapeType


@struct.dataclass
class OBB:
    """Immutable oriented bounding box.

    Leading batch dimensions are allowed as long as all three array fields
    share them.

    Attributes:
        center: Array of shape (..., 3), the box center in ambient space.
        half_extents: Array of shape (..., 3) with half the box size along
                      each of its *local* axes. Expected to be non-negative;
                      this is not checked.
        orientation: Array of shape (..., 3, 3) whose columns are the box's
                     local X/Y/Z axes expressed in ambient space. Expected to
                     be orthonormal; this is not checked.
        shape_type: Static tag identifying the value as an OBB for external
                    shape dispatch. Never changed by any operation.
    """
    center: Array
    half_extents: Array
    orientation: Array
    shape_type: ShapeType = struct.field(pytree_node=False, default=ShapeType.OBB)
