"""Criteria comparing two segments of one hit each."""

from __future__ import annotations

import math

from kitrack.criterion import Criterion, wrap_to_pi
from kitrack.interfaces import Hit
from kitrack.segment import Segment

_ORIGIN_RADIUS_SQUARED = 0.0001


def _near_origin(hit: Hit) -> bool:
    return hit.x * hit.x + hit.y * hit.y < _ORIGIN_RADIUS_SQUARED


def _angle_difference_degrees(a: Hit, b: Hit, angle_a: float, angle_b: float) -> float:
    """Absolute difference of two angles in degrees; 0 if a hit lies at the origin."""
    delta = wrap_to_pi(angle_a - angle_b)
    if _near_origin(a) or _near_origin(b):
        delta = 0.0
    return 180.0 * abs(delta) / math.pi


class Crit2DeltaPhi(Criterion):
    """Difference of the azimuthal angles of two hits, in degrees."""

    name = "Crit2_DeltaPhi"
    type = "2Hit"

    def __init__(self, delta_phi_min: float, delta_phi_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.delta_phi_min = delta_phi_min
        self.delta_phi_max = delta_phi_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        delta_phi = _angle_difference_degrees(
            a, b, math.atan2(a.y, a.x), math.atan2(b.y, b.x)
        )
        self._record("Crit2_DeltaPhi", delta_phi)
        return self.delta_phi_min <= delta_phi <= self.delta_phi_max


class Crit2DeltaPhiMV(Criterion):
    """Difference of the stored azimuthal angles of two mini-vectors, in degrees."""

    name = "Crit2_DeltaPhi_MV"
    type = "2Hit"

    def __init__(self, delta_phi_min: float, delta_phi_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.delta_phi_min = delta_phi_min
        self.delta_phi_max = delta_phi_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        delta_phi = _angle_difference_degrees(a, b, a.phi, b.phi)
        self._record("Crit2_DeltaPhi_MV", delta_phi)
        return self.delta_phi_min <= delta_phi <= self.delta_phi_max


class Crit2DeltaRho(Criterion):
    """Difference of the transverse distances of two hits from the beam axis."""

    name = "Crit2_DeltaRho"
    type = "2Hit"

    def __init__(self, delta_rho_min: float, delta_rho_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.delta_rho_min = delta_rho_min
        self.delta_rho_max = delta_rho_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        rho_a = math.hypot(a.x, a.y)
        rho_b = math.hypot(b.x, b.y)
        delta_rho = rho_a - rho_b
        self._record("Crit2_DeltaRho_rhoParent", rho_a)
        self._record("Crit2_DeltaRho_rhoChild", rho_b)
        self._record("Crit2_DeltaRho", delta_rho)
        return self.delta_rho_min <= delta_rho <= self.delta_rho_max


class Crit2DeltaThetaMV(Criterion):
    """Difference of the stored polar angles of two mini-vectors, in degrees."""

    name = "Crit2_DeltaTheta_MV"
    type = "2Hit"

    def __init__(self, delta_theta_min: float, delta_theta_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.delta_theta_min = delta_theta_min
        self.delta_theta_max = delta_theta_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        delta_theta = _angle_difference_degrees(a, b, a.theta, b.theta)
        self._record("Crit2_DeltaTheta_MV", delta_theta)
        return self.delta_theta_min <= delta_theta <= self.delta_theta_max


class Crit2DistanceMV(Criterion):
    """Squared difference of the transverse distances of two mini-vectors."""

    name = "Crit2_Distance_MV"
    type = "2Hit"

    def __init__(self, delta_pos2_min: float, delta_pos2_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.delta_pos2_min = delta_pos2_min
        self.delta_pos2_max = delta_pos2_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        delta = math.hypot(a.x, a.y) - math.hypot(b.x, b.y)
        delta_pos2 = delta * delta
        if _near_origin(a) or _near_origin(b):
            delta_pos2 = 0.0
        self._record("Crit2_Distance_MV", delta_pos2)
        return self.delta_pos2_min <= delta_pos2 <= self.delta_pos2_max


class Crit2RZRatio(Criterion):
    """Ratio of the 3D distance of two hits to their distance along z."""

    name = "Crit2_RZRatio"
    type = "2Hit"

    def __init__(self, ratio_min: float, ratio_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.ratio_min = ratio_min
        self.ratio_max = ratio_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        dx, dy, dz = a.x - b.x, a.y - b.y, a.z - b.z
        ratio_squared = 0.0
        if dz != 0.0:
            ratio_squared = (dx * dx + dy * dy + dz * dz) / (dz * dz)
        self._record("Crit2_RZRatio", math.sqrt(ratio_squared))
        if ratio_squared > self.ratio_max * self.ratio_max:
            return False
        return ratio_squared >= self.ratio_min * self.ratio_min


class Crit2StraightTrackRatio(Criterion):
    """Checks that two hits lie on a straight line through the origin.

    The ratio compared is (rho_a / z_a) / (rho_b / z_b), which is 1 for
    perfectly straight tracks from the interaction point.
    """

    name = "Crit2_StraightTrackRatio"
    type = "2Hit"

    def __init__(self, ratio_min: float, ratio_max: float, *, save_values: bool = False) -> None:
        super().__init__(save_values=save_values)
        self.ratio_min = ratio_min
        self.ratio_max = ratio_max

    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        self._require_hits(parent, child, 1)
        a, b = parent.hits[0], child.hits[0]
        rho_a_squared = a.x * a.x + a.y * a.y
        rho_b_squared = b.x * b.x + b.y * b.y
        self._record("Crit2_StraightTrackRatio", 1.0)

        if rho_b_squared > 0.0 and a.z != 0.0:
            ratio_squared = (rho_a_squared * b.z * b.z) / (rho_b_squared * a.z * a.z)
            self._record("Crit2_StraightTrackRatio", math.sqrt(ratio_squared))
            if ratio_squared > self.ratio_max * self.ratio_max:
                return False
            if ratio_squared < self.ratio_min * self.ratio_min:
                return False
        return True