"""Criteria comparing two segments of two hits each (three hits in total)."""

from __future__ import annotations

import math

from kitrack.criterion import Criterion
from kitrack.segment import Segment


def _to_signed_angle(angle: float) -> float:
    """Map an angle onto (-pi, pi] via the range [0, 2pi)."""
    angle -= 2 * math.pi * math.floor(angle / 2.0 / math.pi)
    if angle > math.pi:
        angle -= 2 * math.pi
    return angle


def _cos_squared(u: tuple[float, ...], v: tuple[float, ...]) -> float | None:
    """Squared cosine of the angle between u and v, or None if one has zero length."""
    numerator = sum(p * q for p, q in zip(u, v))
    denom_squared = sum(p * p for p in u) * sum(q * q for q in v)
    if denom_squared <= 0.0:
        return None
    # the cosine can never exceed 1; guard against rounding
    return min(numerator * numerator / denom_squared, 1.0)


class _AngleCriterion(Criterion):
    """Angle between the two connected 2-hit segments, in a given projection."""

    type = "3Hit"
    _dimensions = 2
    _cos_key = ""

    def __init__(self, angle_min: float, angle_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.cos_angle_min = math.cos(angle_max * math.pi / 180.0)
        self.cos_angle_max = math.cos(angle_min * math.pi / 180.0)

    def _check_angle(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 2)
        a, b = child.hits
        c = parent.hits[1]
        n = self._dimensions
        pa, pb, pc = ((h.x, h.y, h.z)[:n] for h in (a, b, c))
        u = tuple(q - p for p, q in zip(pa, pb))
        v = tuple(q - p for p, q in zip(pb, pc))

        self._record(self._cos_key, 1.0)
        self._record(self.name, 0.0)

        cos_squared = _cos_squared(u, v)
        if cos_squared is None:
            return True
        self._record(self._cos_key, cos_squared)
        self._record(self.name, math.degrees(math.acos(math.sqrt(cos_squared))))

        if cos_squared < self.cos_angle_min * self.cos_angle_min:
            return False
        return not cos_squared > self.cos_angle_max * self.cos_angle_max


class Crit3_2DAngle(_AngleCriterion):
    """Angle in the xy plane between two connected 2-hit segments, in degrees."""

    name = "Crit3_2DAngle"
    _dimensions = 2
    _cos_key = "Crit3_2DAngle_cos2DAngleSquared"

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        return self._check_angle(parent, child)


class Crit3_3DAngle(_AngleCriterion):
    """Angle in space between two connected 2-hit segments, in degrees."""

    name = "Crit3_3DAngle"
    _dimensions = 3
    _cos_key = "Crit3_3DAngle_cos3DAngleSquared"

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        return self._check_angle(parent, child)


def _rz_ratio_squared(p, q) -> float:
    dx, dy, dz = p.x - q.x, p.y - q.y, p.z - q.z
    if dz == 0.0:
        return 0.0
    return (dx * dx + dy * dy + dz * dz) / (dz * dz)


class Crit3ChangeRZRatio(Criterion):
    """Change of the ratio of 3D distance to z distance between two 2-hit segments."""

    name = "Crit3_ChangeRZRatio"
    type = "3Hit"

    def __init__(self, min_change: float, max_change: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.ratio_change_min_squared = min_change * min_change
        self.ratio_change_max_squared = max_change * max_change

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 2)
        a, b = child.hits
        c = parent.hits[1]

        ratio_squared_parent = _rz_ratio_squared(a, b)
        ratio_squared_child = _rz_ratio_squared(c, b)

        ratio = 0.0
        if ratio_squared_child != 0.0:
            ratio = ratio_squared_parent / ratio_squared_child

        self._record("Crit3_ChangeRZRatio_ratioOfRZRatioSquared", ratio)
        self._record("Crit3_ChangeRZRatio", math.sqrt(ratio))

        if ratio > self.ratio_change_max_squared:
            return False
        return not ratio < self.ratio_change_min_squared


class Crit3NoZigZagMV(Criterion):
    """Checks that the curvature of three mini-vectors keeps its direction.

    The product of the two successive changes of the stored angle is
    positive when the direction of curvature stays the same.
    """

    name = "Crit3_NoZigZag_MV"
    type = "3Hit"

    def __init__(self, prod_min: float, prod_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.prod_min = prod_min
        self.prod_max = prod_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 2, unit="mini-vectors")
        a, b = child.hits
        c = parent.hits[1]

        angle1 = c.theta - b.theta
        angle2 = 0.0 if a.is_virtual else b.theta - a.theta

        angle1 = math.degrees(_to_signed_angle(angle1))
        angle2 = math.degrees(_to_signed_angle(angle2))
        prod = angle1 * angle2

        self._record("Crit3_NoZigZag_MV_angle1", angle1)
        self._record("Crit3_NoZigZag_MV_angle2", angle2)
        self._record("Crit3_NoZigZag_MV", prod)

        if prod < self.prod_min:
            return False
        return not prod > self.prod_max