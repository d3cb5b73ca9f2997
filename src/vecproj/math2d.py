from __future__ import annotations

import math

from pygame.math import Vector2


def dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def scale(vec: Vector2, s: float) -> Vector2:
    return Vector2(vec.x * s, vec.y * s)


def magnitude(vec: Vector2) -> float:
    return math.hypot(vec.x, vec.y)


def projection(a: Vector2, b: Vector2) -> Vector2:
    """Component of ``a`` along ``b``. ``b`` must be non-zero."""
    return scale(b, dot(a, b) / dot(b, b))


def rejection(a: Vector2, b: Vector2) -> Vector2:
    """Component of ``a`` orthogonal to ``b``. ``b`` must be non-zero."""
    c = Vector2(a.x, a.y)
    c -= projection(a, b)
    return c


def angle_between(a: Vector2, b: Vector2) -> float:
    """Unsigned angle in radians; ``nan`` for zero-length or non-finite input."""
    mag_a = magnitude(a)
    mag_b = magnitude(b)
    if mag_a == 0.0 or mag_b == 0.0:
        return math.nan
    # unit vectors keep the dot product from overflowing
    ratio = dot(Vector2(a.x / mag_a, a.y / mag_a), Vector2(b.x / mag_b, b.y / mag_b))
    if math.isnan(ratio):
        return math.nan
    return math.acos(_clamp_value(ratio, -1.0, 1.0))


def normalized_to(vec: Vector2, length: float) -> Vector2:
    mag = magnitude(vec)
    if mag < 1e-12:
        return Vector2()
    return scale(vec, length / mag)


def _clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
