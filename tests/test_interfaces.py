import pytest

from kitrack.interfaces import Hit, SectorConnector, SectorSystem, Track


class HundredsSystem(SectorSystem):
    def layer(self, sector):
        return sector // 100

    def info_on_sector(self, sector):
        return f"layer {sector // 100}"


class TensSystem(SectorSystem):
    def layer(self, sector):
        return sector // 10

    def info_on_sector(self, sector):
        return f"layer {sector // 10}"


SYSTEM = HundredsSystem(n_layers=5)


class PlainHit(Hit):
    @property
    def sector_system(self):
        return SYSTEM


class NextSectors(SectorConnector):
    def target_sectors(self, sector):
        return {sector - 100, sector - 101}


class FixedTrack(Track):
    def __init__(self, hits):
        self._hits = list(hits)
        self._fitted = False

    @property
    def hits(self):
        return list(self._hits)

    @property
    def qi(self):
        return 0.5

    def fit(self):
        self._fitted = True

    @property
    def ndf(self):
        return len(self._hits) if self._fitted else 0

    @property
    def chi2(self):
        return 0.0

    @property
    def chi2_prob(self):
        return 1.0


def test_abstract_classes_cannot_be_instantiated():
    for cls in (SectorSystem, SectorConnector, Hit, Track):
        with pytest.raises(TypeError):
            cls()


def test_sector_system_layer_and_count():
    system = TensSystem(n_layers=7)
    assert system.layer(312) == 31
    assert system.info_on_sector(312) == "layer 31"
    assert system.n_layers == 7
    SectorSystem.__init__(system, n_layers=9)
    assert system.n_layers == 9


def test_hit_layer_uses_sector_system():
    hit = PlainHit(1.0, 2.0, 3.0, sector=207)
    assert hit.layer == 2
    assert (hit.x, hit.y, hit.z) == (1.0, 2.0, 3.0)
    Hit.__init__(hit, 4.0, 5.0, 6.0, sector=307)
    assert hit.layer == 3
    assert (hit.x, hit.y, hit.z) == (4.0, 5.0, 6.0)


def test_hit_virtual_flag_defaults_and_changes():
    hit = PlainHit(sector=100)
    assert hit.is_virtual is False
    hit.is_virtual = True
    assert hit.is_virtual is True
    Hit.__init__(hit, sector=100)
    assert hit.is_virtual is False


def test_hit_mini_vector_angles():
    hit = PlainHit(sector=100, angle3d=0.25, phi=1.5, theta=0.75)
    other = PlainHit(sector=200, angle3d=9.0)
    assert Hit.angle_3d(hit, other) == 0.25
    assert hit.angle_3d(other) == 0.25
    assert hit.phi == 1.5
    assert hit.theta == 0.75


def test_sector_connector_returns_set():
    with pytest.raises(TypeError):
        SectorConnector()
    assert NextSectors().target_sectors(300) == {200, 199}


def test_track_fit_changes_results():
    with pytest.raises(TypeError):
        Track()
    hits = [PlainHit(sector=100), PlainHit(sector=200)]
    track = FixedTrack(hits)
    assert track.ndf == 0
    track.fit()
    assert track.ndf == len(hits)
    assert track.hits == hits
    assert [Hit.angle_3d(h, h) for h in track.hits] == [0.0, 0.0]