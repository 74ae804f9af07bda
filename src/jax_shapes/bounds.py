"""Oriented bounding box operations: construction, boundary and transforms.

Every function is pure. Operations that take an ``out`` box treat it as a
template: the channels they do not compute are carried over from ``out``
into the returned box, and ``out`` itself is left untouched. Passing the
same box as input and ``out`` is therefore always safe.

None of these functions validate their numeric input. Negative
half-extents, non-orthonormal orientations and reversed corner points
produce correspondingly degenerate results, and NaN/inf propagate
through the arithmetic unchanged.
"""

from typing import Tuple

import numpy as np
import jax.numpy as jnp
from jax import Array

from .core import OBB
from .transforms import se3, so3

# Sign pattern of the eight box corners, x varying slowest
_CORNER_SIGNS = np.array([[sx, sy, sz] for sx in (-1.0, 1.0) for sy in (-1.0, 1.0) for sz in (-1.0, 1.0)])


def create(cx=0.0, cy=0.0, cz=0.0,
           hw=1.0, hh=1.0, hl=1.0,
           ox_x=1.0, ox_y=0.0, ox_z=0.0,
           oy_x=0.0, oy_y=1.0, oy_z=0.0,
           oz_x=0.0, oz_y=0.0, oz_z=1.0) -> OBB:
    """Create a new OBB.

    Args:
        cx, cy, cz: Center coordinates.
        hw, hh, hl: Half width, half height and half length.
        ox_*, oy_*, oz_*: The box's local X, Y and Z axes in ambient space,
                          one triple per axis. Each triple becomes a
                          column of the orientation matrix.

    Arguments may be arrays sharing a batch shape; the fields then get
    shapes (..., 3) and (..., 3, 3).

    Returns:
        OBB: The new box. Defaults give a unit cube centered at the origin.
    """
    center, half_extents, orientation = _fields_from_scalars(
        cx, cy, cz, hw, hh, hl,
        ox_x, ox_y, ox_z, oy_x, oy_y, oy_z, oz_x, oz_y, oz_z,
    )
    return OBB(center=center, half_extents=half_extents, orientation=orientation)


def _fields_from_scalars(cx, cy, cz, hw, hh, hl,
                         ox_x, ox_y, ox_z, oy_x, oy_y, oy_z, oz_x, oz_y, oz_z):
    center = so3.vector(cx, cy, cz)
    half_extents = so3.vector(hw, hh, hl)
    orientation = so3.from_axes(
        so3.vector(ox_x, ox_y, ox_z),
        so3.vector(oy_x, oy_y, oy_z),
        so3.vector(oz_x, oz_y, oz_z),
    )

    batch_shape = jnp.broadcast_shapes(
        center.shape[:-1], half_extents.shape[:-1], orientation.shape[:-2]
    )
    return (
        jnp.broadcast_to(center, batch_shape + (3,)),
        jnp.broadcast_to(half_extents, batch_shape + (3,)),
        jnp.broadcast_to(orientation, batch_shape + (3, 3)),
    )


def clone(a: OBB) -> OBB:
    """Return a new OBB holding its own copies of ``a``'s arrays."""
    return OBB(
        center=jnp.array(a.center, copy=True),
        half_extents=jnp.array(a.half_extents, copy=True),
        orientation=jnp.array(a.orientation, copy=True),
    )


def copy(out: OBB, a: OBB) -> OBB:
    """Return ``out`` with center, half-extents and orientation taken from ``a``."""
    return out.replace(
        center=a.center,
        half_extents=a.half_extents,
        orientation=a.orientation,
    )


def set(out: OBB,
        cx, cy, cz,
        hw, hh, hl,
        ox_x, ox_y, ox_z,
        oy_x, oy_y, oy_z,
        oz_x, oz_y, oz_z) -> OBB:
    """Return ``out`` with every field overwritten from scalars.

    Scalars are read as in `create`. The orientation is taken as given;
    it is not re-orthonormalized.
    """
    center, half_extents, orientation = _fields_from_scalars(
        cx, cy, cz, hw, hh, hl,
        ox_x, ox_y, ox_z, oy_x, oy_y, oy_z, oz_x, oz_y, oz_z,
    )
    return out.replace(center=center, half_extents=half_extents, orientation=orientation)


def from_points(out: OBB, min_pos: Array, max_pos: Array) -> OBB:
    """Build an axis-aligned OBB spanning two corner points.

    Args:
        out: Template box.
        min_pos: (..., 3) minimum corner.
        max_pos: (..., 3) maximum corner. Expected to be >= ``min_pos``
                 component-wise; otherwise the half-extents come out negative.

    Returns:
        OBB: ``out`` centered between the corners, with half the corner
        difference as half-extents and the identity orientation.
    """
    min_pos = jnp.asarray(min_pos)
    max_pos = jnp.asarray(max_pos)

    center = (min_pos + max_pos) * 0.5
    half_extents = (max_pos - min_pos) * 0.5
    orientation = so3.identity(center.shape[:-1], dtype=center.dtype)

    return out.replace(center=center, half_extents=half_extents, orientation=orientation)


def get_boundary(obb: OBB) -> Tuple[Array, Array]:
    """Compute the tight axis-aligned box enclosing ``obb``.

    Projecting the box onto a world axis gives a half-length equal to the sum
    of the absolute contributions of its three local half-axes, so the AABB
    extent is the half-extent vector transformed by the component-wise
    absolute value of the orientation:

        extent_i = sum_j |orientation[i, j]| * half_extents[j]

    This is exact, matching the min/max over the eight corners.

    Args:
        obb: The box.

    Returns:
        Tuple (min_pos, max_pos), each of shape (..., 3).
    """
    extent = jnp.einsum("...ij,...j->...i", jnp.abs(obb.orientation), obb.half_extents)
    return obb.center - extent, obb.center + extent


def get_corners(obb: OBB) -> Array:
    """Return the eight corners of ``obb`` in ambient space.

    Returns:
        Array of shape (..., 8, 3), ordered with the local x sign varying
        slowest and z fastest.
    """
    local = obb.half_extents[..., None, :] * _CORNER_SIGNS
    return obb.center[..., None, :] + so3.apply(obb.orientation, local)


def transform(obb: OBB, m: Array, pos: Array, rot: Array, scale: Array, out: OBB) -> OBB:
    """Apply a parent transform to ``obb``.

    The center is mapped through the full matrix ``m``. The orientation is
    rebuilt from ``rot`` alone: any rotation carried by ``m`` but not by
    ``rot`` is ignored, so call sites must pass parent transforms whose
    whole rotation is given by ``rot``. ``scale`` multiplies the half-extents
    along the box's local axes, which stretches the box without shearing it.

    Args:
        obb: Source box.
        m: (..., 4, 4) parent transform.
        pos: (..., 3) parent translation. Already folded into ``m``; accepted
             so callers can pass the decomposed transform unchanged.
        rot: (..., 4) parent rotation quaternion in (w, x, y, z) format.
        scale: (..., 3) parent scale.
        out: Template box.

    Returns:
        OBB: ``out`` with all three channels recomputed.
    """
    return out.replace(
        center=se3.apply(m, obb.center),
        half_extents=obb.half_extents * jnp.asarray(scale),
        orientation=so3.from_quaternion(jnp.asarray(rot)),
    )


def translate_and_rotate(obb: OBB, m: Array, rot: Array, out: OBB) -> OBB:
    """Like `transform` but keep ``out.half_extents`` unchanged.

    Used when only the position/rotation channel of the parent changed.
    The same restriction on rotation carried by ``m`` applies.
    """
    return out.replace(
        center=se3.apply(m, obb.center),
        orientation=so3.from_quaternion(jnp.asarray(rot)),
    )


def set_scale(obb: OBB, scale: Array, out: OBB) -> OBB:
    """Return ``out`` with ``obb``'s half-extents multiplied by ``scale``.

    Center and orientation are carried over from ``out``.
    """
    return out.replace(half_extents=obb.half_extents * jnp.asarray(scale))
