"""Criteria comparing two segments of three hits each (four hits in total)."""

from __future__ import annotations

import math

from kitrack.criterion import Criterion
from kitrack.segment import Segment

Vector = tuple[float, float, float]


def _to_signed_angle(angle: float) -> float:
    """Map an angle onto (-pi, pi] via the range [0, 2pi)."""
    angle -= 2 * math.pi * math.floor(angle / 2.0 / math.pi)
    if angle > math.pi:
        angle -= 2 * math.pi
    return angle


def _phi(v: Vector) -> float:
    return math.atan2(v[1], v[0])


def _angle_between(u: Vector, v: Vector) -> float:
    """Angle between two vectors in [0, pi]; 0 if one has zero length."""
    mag2 = sum(p * p for p in u) * sum(q * q for q in v)
    if mag2 <= 0.0:
        return 0.0
    cos = sum(p * q for p, q in zip(u, v)) / math.sqrt(mag2)
    return math.acos(max(-1.0, min(1.0, cos)))


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def _three_vectors(parent: Segment, child: Segment) -> tuple[Vector, Vector, Vector]:
    """Outer, middle and inner difference vectors of the four hits."""
    a, b, c = child.hits
    d = parent.hits[2]
    points = [(h.x, h.y, h.z) for h in (a, b, c, d)]
    outer, middle, inner = (
        tuple(q - p for p, q in zip(start, end))
        for start, end in zip(points, points[1:])
    )
    return outer, middle, inner


class Crit4_2DAngleChange(Criterion):
    """Ratio of two successive changes of direction in the xy plane."""

    name = "Crit4_2DAngleChange"
    type = "4Hit"

    def __init__(self, change_min: float, change_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.change_min = change_min
        self.change_max = change_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 3)
        outer, middle, inner = _three_vectors(parent, child)
        angle1 = _to_signed_angle(_phi(outer) - _phi(middle))
        angle2 = _to_signed_angle(_phi(middle) - _phi(inner))
        ratio = _divide(angle1, angle2)

        self._record("Crit4_2DAngleChange", ratio)
        if ratio > self.change_max:
            return False
        return not ratio < self.change_min


class Crit4_3DAngleChange(Criterion):
    """Ratio of two successive angles in space between 2-hit pieces."""

    name = "Crit4_3DAngleChange"
    type = "4Hit"

    def __init__(self, change_min: float, change_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.change_min = change_min
        self.change_max = change_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 3)
        outer, middle, inner = _three_vectors(parent, child)
        angle1 = _to_signed_angle(_angle_between(outer, middle))
        angle2 = _to_signed_angle(_angle_between(middle, inner))
        ratio = _divide(angle1, angle2)

        self._record("Crit4_3DAngleChange", ratio)
        if ratio > self.change_max:
            return False
        return not ratio < self.change_min


class Crit4NoZigZag(Criterion):
    """Checks that the curvature in the xy plane keeps its direction over four hits."""

    name = "Crit4_NoZigZag"
    type = "4Hit"

    def __init__(self, prod_min: float, prod_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.prod_min = prod_min
        self.prod_max = prod_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 3)
        outer, middle, inner = _three_vectors(parent, child)
        angle1 = math.degrees(_to_signed_angle(_phi(outer) - _phi(middle)))
        angle2 = math.degrees(_to_signed_angle(_phi(middle) - _phi(inner)))
        prod = angle1 * angle2

        self._record("Crit4_NoZigZag_angle1", angle1)
        self._record("Crit4_NoZigZag_angle2", angle2)
        self._record("Crit4_NoZigZag", prod)

        if prod < self.prod_min:
            return False
        return not prod > self.prod_max