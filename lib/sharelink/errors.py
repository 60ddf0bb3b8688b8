"""Typed failures raised by the share-link codec."""

from typing import Optional


class ShareLinkError(ValueError):
    """Base class for every share-link decode/encode failure."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field  # Query key that failed, when there is one


class UnrecognizedLinkKind(ShareLinkError):
    """Scheme/host/path matches neither the multiplayer nor the share link."""


class UnsupportedFormatVersion(ShareLinkError):
    """The mv parameter is missing or not in the format version table."""


class MalformedField(ShareLinkError):
    """A required field is missing or fails its parse."""


class UnknownScoreType(ShareLinkError):
    """The s parameter has no entry in the score type table."""


class UnknownHintFlag(ShareLinkError):
    """The h parameter contains a character with no hint toggle."""
