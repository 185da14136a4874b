"""Exceptions raised by the track finding code."""


class KiTrackError(Exception):
    """Base class of every error raised by this package."""

    prefix = "KiTrack::Exception"

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.message = f"{self.prefix}: {text}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class OutOfRange(KiTrackError):
    """Raised when a layer, sensor or sector outside the known range is requested."""

    prefix = "KiTrack::OutOfRange"


class InvalidParameter(KiTrackError):
    """Raised when a parameter makes no sense for the requested operation."""

    prefix = "KiTrack::InvalidParameter"


class BadSegmentLength(KiTrackError):
    """Raised when a criterion receives segments with the wrong number of hits."""

    prefix = "KiTrack::BadSegmentLength"


class UnknownCriterion(KiTrackError):
    """Raised when a criterion name is not known."""

    prefix = "KiTrack::UnknownCriterion"