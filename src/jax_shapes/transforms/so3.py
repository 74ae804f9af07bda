"""SO(3) rotation helpers in JAX.

Rotation matrices are stored row-major and act on column vectors, so the
columns of a matrix are the rotated frame's X/Y/Z axes. All functions are
pure, JIT-able and broadcast over leading batch dimensions.
"""

from typing import Tuple

import jax
import jax.numpy as jnp

Array = jax.Array


def identity(batch_shape: Tuple[int, ...] = (), dtype=float) -> Array:
    """(..., 3, 3) identity rotation(s)."""
    return jnp.broadcast_to(jnp.eye(3, dtype=dtype), batch_shape + (3, 3))


def vector(x, y, z) -> Array:
    """Stack three scalars (or same-batch arrays) into a (..., 3) vector."""
    components = jnp.broadcast_arrays(*(jnp.asarray(c, dtype=float) for c in (x, y, z)))
    return jnp.stack(components, axis=-1)


def from_axes(x_axis: Array, y_axis: Array, z_axis: Array) -> Array:
    """
    Build a basis matrix whose columns are the given axes.

    Args:
        x_axis, y_axis, z_axis: (..., 3) frame axes in ambient coordinates

    Returns:
        (..., 3, 3) matrix with ``R[..., :, j]`` equal to the j-th axis
    """
    axes = jnp.broadcast_arrays(*(jnp.asarray(a, dtype=float) for a in (x_axis, y_axis, z_axis)))
    return jnp.stack(axes, axis=-1)


def normalize_quaternion(quaternions: Array) -> Array:
    """Normalize quaternions to unit length."""
    return quaternions / jnp.linalg.norm(quaternions, axis=-1, keepdims=True)


def from_quaternion(quaternions: Array) -> Array:
    """
    Convert quaternions to rotation matrices.

    The input is used as given: a non-unit quaternion yields a scaled,
    non-orthonormal matrix. Call `normalize_quaternion` first when the
    source is not known to be normalized.

    Args:
        quaternions: (..., 4) array of quaternions in (w, x, y, z) format

    Returns:
        (..., 3, 3) array of rotation matrices
    """
    w, x, y, z = (quaternions[..., i] for i in range(4))
    x2, y2, z2 = x + x, y + y, z + z

    xx, yx, yy = x * x2, y * x2, y * y2
    zx, zy, zz = z * x2, z * y2, z * z2
    wx, wy, wz = w * x2, w * y2, w * z2

    rows = (
        (1 - yy - zz, yx - wz, zx + wy),
        (yx + wz, 1 - xx - zz, zy - wx),
        (zx - wy, zy + wx, 1 - xx - yy),
    )
    return jnp.stack([jnp.stack(row, axis=-1) for row in rows], axis=-2)


def apply(R: Array, v: Array) -> Array:
    """
    Apply 3x3 matrices to vector(s).

    Args:
        R: (..., 3, 3) matrix
        v: (..., 3) or (..., N, 3) vector(s)

    Returns:
        (..., 3) or (..., N, 3) transformed vector(s)
    """
    if v.ndim == R.ndim - 1:
        return jnp.matmul(R, v[..., None])[..., 0]
    # row vectors: (R v)^T = v^T R^T
    return jnp.matmul(v, jnp.swapaxes(R, -1, -2))
