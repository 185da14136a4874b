import math

import pytest

from kitrack.criterion import Criterion, wrap_to_pi
from kitrack.exceptions import BadSegmentLength
from kitrack.interfaces import Hit, SectorSystem
from kitrack.segment import Segment


class _Sectors(SectorSystem):
    def layer(self, sector):
        return sector

    def info_on_sector(self, sector):
        return str(sector)


_SYSTEM = _Sectors(n_layers=3)


class _Hit(Hit):
    @property
    def sector_system(self):
        return _SYSTEM


class _SameLayer(Criterion):
    name = "SameLayer"
    type = "2Hit"

    def are_compatible(self, parent, child):
        self._require_hits(parent, child, 1)
        same = parent.hits[0].layer == child.hits[0].layer
        self._record("SameLayer", float(same))
        return same


def _segment(*sectors):
    return Segment(_Hit(1.0, 1.0, 1.0, s) for s in sectors)


def test_wrap_leaves_small_angles_alone():
    assert wrap_to_pi(0.5) == 0.5
    assert wrap_to_pi(-0.5) == -0.5


def test_wrap_shifts_large_angles_by_full_turn():
    assert wrap_to_pi(math.pi + 0.5) == pytest.approx(-math.pi + 0.5)
    assert wrap_to_pi(-math.pi - 0.5) == pytest.approx(math.pi - 0.5)


@pytest.mark.parametrize("angle", [-6.0, -3.5, -1.0, 0.0, 2.0, 3.5, 6.0])
def test_wrap_result_lies_within_pi(angle):
    wrapped = wrap_to_pi(angle)
    assert -math.pi <= wrapped <= math.pi
    assert math.isclose(math.cos(wrapped), math.cos(angle), abs_tol=1e-12)


def test_criterion_is_abstract():
    with pytest.raises(TypeError):
        Criterion()


def test_subclass_decides_and_records():
    crit = _SameLayer(save_values=True)
    assert crit.are_compatible(_segment(2), _segment(2)) is True
    assert crit.values == {"SameLayer": 1.0}
    assert crit.are_compatible(_segment(2), _segment(1)) is False
    assert crit.values == {"SameLayer": 0.0}


def test_values_not_recorded_by_default():
    crit = _SameLayer()
    crit.are_compatible(_segment(1), _segment(1))
    assert crit.values == {}
    assert crit.save_values is False


def test_wrong_length_raises_with_message():
    crit = _SameLayer()
    with pytest.raises(BadSegmentLength) as info:
        crit.are_compatible(_segment(1, 2), _segment(1))
    message = str(info.value)
    assert message.startswith("KiTrack::BadSegmentLength: SameLayer::")
    assert "1 hit each" in message
    assert "2 hit segment (parent)" in message
    assert "1 hit segment (child)" in message