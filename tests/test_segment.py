import pytest

from kitrack.interfaces import Hit, SectorSystem
from kitrack.segment import Segment


class _System(SectorSystem):
    def layer(self, sector):
        return sector

    def info_on_sector(self, sector):
        return str(sector)


_SYSTEM = _System(3)


class _Hit(Hit):
    @property
    def sector_system(self):
        return _SYSTEM


@pytest.fixture
def hits():
    return [_Hit(0.0, 0.0, float(i), sector=i) for i in range(3)]


def test_single_hit_constructor(hits):
    seg = Segment(hits[0])
    assert seg.hits == [hits[0]]


def test_list_constructor_copies(hits):
    seg = Segment(hits)
    hits.append(_Hit(sector=2))
    assert len(seg.hits) == 3


def test_children_and_parents(hits):
    inner, outer = Segment(hits[0]), Segment(hits[1])
    outer.add_child(inner)
    inner.add_parent(outer)
    assert outer.children == [inner]
    assert inner.parents == [outer]
    outer.delete_child(inner)
    inner.delete_parent(outer)
    assert outer.children == []
    assert inner.parents == []


def test_delete_removes_all_occurrences(hits):
    seg, other, keep = Segment(hits[0]), Segment(hits[1]), Segment(hits[2])
    seg.add_child(other)
    seg.add_child(keep)
    seg.add_child(other)
    seg.delete_child(other)
    assert seg.children == [keep]


def test_delete_unknown_is_harmless(hits):
    seg, other = Segment(hits[0]), Segment(hits[1])
    seg.add_parent(other)
    seg.delete_parent(Segment(hits[2]))
    assert seg.parents == [other]


def test_raise_state_raises_inner_only(hits):
    seg = Segment(hits)
    seg.set_skipped_layers(2)
    seg.raise_state()
    seg.raise_state()
    assert seg.inner_state == 2
    assert seg.outer_state == 0
    assert len(seg.state) == 3


def test_set_skipped_layers_truncates(hits):
    seg = Segment(hits)
    seg.set_skipped_layers(3)
    seg.raise_state()
    seg.set_skipped_layers(0)
    assert seg.state == [1]


def test_raise_state_on_empty_state_does_nothing(hits):
    seg = Segment(hits)
    seg.state = []
    seg.raise_state()
    assert seg.state == []


def test_layer_and_active(hits):
    seg = Segment(hits[1])
    seg.layer = 4
    seg.active = True
    assert seg.layer == 4
    assert seg.active is True