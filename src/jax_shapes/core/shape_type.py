"""Shape-kind tags shared by every geometric primitive."""

import enum


class ShapeType(enum.IntEnum):
    """Closed set of shape kinds used for dispatch.

    Values are distinct bits so a dispatcher can describe the kinds it
    accepts as a mask, e.g. ``ShapeType.AABB | ShapeType.OBB``.
    """
    RAY = 1 << 0
    LINE = 1 << 1
    SPHERE = 1 << 2
    AABB = 1 << 3
    OBB = 1 << 4
    PLANE = 1 << 5
    TRIANGLE = 1 << 6
    FRUSTUM = 1 << 7
    FRUSTUM_ACCURATE = 1 << 8
    CAPSULE = 1 << 9
