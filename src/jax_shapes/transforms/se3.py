"""Homogeneous 4x4 transforms in JAX.

Parent transforms handed to shapes are affine TRS matrices
(translation, rotation, non-uniform scale) stored row-major, acting on
column vectors with the translation in the last column.
"""

from typing import Tuple

import jax
import jax.numpy as jnp

from . import so3

Array = jax.Array


def identity(batch_shape: Tuple[int, ...] = (), dtype=float) -> Array:
    """(..., 4, 4) identity transform(s)."""
    return jnp.broadcast_to(jnp.eye(4, dtype=dtype), batch_shape + (4, 4))


def from_position_rotation_scale(p: Array, R: Array, s: Array) -> Array:
    """
    Construct a TRS transform.

    Args:
        p: (..., 3) translation
        R: (..., 3, 3) rotation matrix
        s: (..., 3) per-axis scale, applied before the rotation

    Returns:
        (..., 4, 4) matrix equal to T(p) @ R @ S(s)
    """
    batch_shape = jnp.broadcast_shapes(p.shape[:-1], R.shape[:-2], s.shape[:-1])
    p = jnp.broadcast_to(p, batch_shape + (3,))
    R = jnp.broadcast_to(R, batch_shape + (3, 3))
    s = jnp.broadcast_to(s, batch_shape + (3,))

    # R @ diag(s) scales the columns of R
    RS = R * s[..., None, :]

    T = jnp.zeros(batch_shape + (4, 4), dtype=jnp.result_type(p, R, s))
    T = T.at[..., :3, :3].set(RS)
    T = T.at[..., :3, 3].set(p)
    T = T.at[..., 3, 3].set(1.0)

    return T


def from_pos_quat_scale(p: Array, quat: Array, s: Array) -> Array:
    """TRS transform with the rotation given as a (w, x, y, z) quaternion."""
    return from_position_rotation_scale(p, so3.from_quaternion(quat), s)


def apply(T: Array, points: Array) -> Array:
    """
    Transform points by 4x4 matrices.

    The homogeneous coordinate is divided out; a zero w is treated as 1.

    Args:
        T: (..., 4, 4) transformation matrix
        points: (..., 3) or (..., N, 3) points

    Returns:
        (..., 3) or (..., N, 3) transformed points
    """
    T = jnp.asarray(T)
    points = jnp.asarray(points)

    if T.ndim < 2 or T.shape[-2:] != (4, 4):
        raise ValueError(f"matrix must have shape (...,4,4), got {T.shape}")

    ones = jnp.ones_like(points[..., 0:1])
    points_h = jnp.concatenate([points, ones], axis=-1)

    if points.ndim == T.ndim - 1:
        transformed_h = jnp.einsum("...ij,...j->...i", T, points_h)
    else:
        transformed_h = jnp.einsum("...ij,...nj->...ni", T, points_h)

    w = transformed_h[..., 3:]
    w = jnp.where(w == 0, 1.0, w)
    return transformed_h[..., :3] / w
