"""Abstract interfaces for sector systems, sector connectors, hits and tracks."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SectorSystem(ABC):
    """Translates integer sector codes into layers and descriptions."""

    def __init__(self, n_layers: int = 0) -> None:
        self.n_layers = n_layers

    @abstractmethod
    def layer(self, sector: int) -> int:
        """Return the layer of the given sector."""

    @abstractmethod
    def info_on_sector(self, sector: int) -> str:
        """Return a human readable description of the sector."""


class SectorConnector(ABC):
    """Maps a sector to the set of sectors it may be linked to."""

    @abstractmethod
    def target_sectors(self, sector: int) -> set[int]:
        """Return the sectors linked to the given one."""


class Hit(ABC):
    """A measured (or virtual) point with a position and a sector."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        sector: int = 0,
        *,
        is_virtual: bool = False,
        angle3d: float = 0.0,
        phi: float = 0.0,
        theta: float = 0.0,
    ) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.sector = sector
        self.is_virtual = is_virtual
        self._angle3d = angle3d
        self.phi = phi
        self.theta = theta

    @property
    @abstractmethod
    def sector_system(self) -> SectorSystem:
        """The sector system that encodes this hit's sector."""

    @property
    def layer(self) -> int:
        """The layer of the hit, as given by its sector system."""
        return self.sector_system.layer(self.sector)

    def angle_3d(self, other: Hit | None = None) -> float:
        """Return the stored 3D angle of a mini-vector hit."""
        return self._angle3d


class Track(ABC):
    """A track made of hits, with a quality indicator and fit results."""

    @property
    @abstractmethod
    def hits(self) -> list[Hit]:
        """The hits of the track."""

    @property
    @abstractmethod
    def qi(self) -> float:
        """Quality indicator, usually between 0 and 1."""

    @abstractmethod
    def fit(self) -> None:
        """Fit the track."""

    @property
    @abstractmethod
    def ndf(self) -> float:
        """Degrees of freedom of the fit; valid after fit()."""

    @property
    @abstractmethod
    def chi2(self) -> float:
        """Chi squared of the fit; valid after fit()."""

    @property
    @abstractmethod
    def chi2_prob(self) -> float:
        """Chi squared probability of the fit; valid after fit()."""