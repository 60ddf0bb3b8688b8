"""Board format registry, keyed by the mv query parameter."""

from lib.sharelink.formats.base import BoardFormat
from lib.sharelink.formats.current import CurrentBoardFormat
from lib.sharelink.formats.legacy import LegacyBoardFormat

FORMAT_VERSIONS = {
    LegacyBoardFormat.version: LegacyBoardFormat(),
    CurrentBoardFormat.version: CurrentBoardFormat(),
}

# The only version the encoder writes
CURRENT_FORMAT_VERSION = CurrentBoardFormat.version

__all__ = [
    "BoardFormat",
    "CurrentBoardFormat",
    "LegacyBoardFormat",
    "FORMAT_VERSIONS",
    "CURRENT_FORMAT_VERSION",
]
