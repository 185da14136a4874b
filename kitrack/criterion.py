"""Base class of the criteria that decide whether two segments may be connected."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from kitrack.exceptions import BadSegmentLength
from kitrack.segment import Segment


def wrap_to_pi(angle: float) -> float:
    """Shift an angle by one full turn if it lies outside [-pi, pi].

    Only a single shift is applied, which is enough for the difference of two
    angles that each lie in [-pi, pi].
    """
    if angle > math.pi:
        angle -= 2 * math.pi
    if angle < -math.pi:
        angle += 2 * math.pi
    return angle


class Criterion(ABC):
    """Judges whether a parent segment and a child segment could belong to one track.

    When ``save_values`` is true, the quantities computed during the last call
    of :meth:`are_compatible` are kept in :attr:`values`, keyed by name.
    """

    name: str = "Criterion"
    type: str = ""

    def __init__(self, *, save_values: bool = False) -> None:
        self.save_values = save_values
        self.values: dict[str, float] = {}

    @abstractmethod
    def are_compatible(self, parent: Segment, child: Segment) -> bool:
        """Return whether the two segments fulfil the criterion."""

    def _record(self, key: str, value: float) -> None:
        if self.save_values:
            self.values[key] = value

    def _require_hits(
        self,
        parent: Segment,
        child: Segment,
        n_hits: int,
        unit: str | None = None,
    ) -> None:
        """Raise BadSegmentLength unless both segments hold exactly n_hits hits."""
        if len(parent.hits) == n_hits and len(child.hits) == n_hits:
            return
        if unit is None:
            unit = "hit" if n_hits == 1 else "hits"
        raise BadSegmentLength(
            f"{self.name}::This criterion needs 2 segments with {n_hits} {unit} each, "
            f"passed was a {len(parent.hits)} hit segment (parent) and a "
            f"{len(child.hits)} hit segment (child)."
        )