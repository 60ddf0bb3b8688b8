"""Base class for version-specific board encodings."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from lib.sharelink.errors import MalformedField, UnsupportedFormatVersion
from lib.sharelink.models import SUPPORTED_BOARD_SIZES

BOARD_PARAM = "b"


class BoardFormat(ABC):
    """Reads (and, for the current version, writes) the b query parameter."""

    version: int
    can_encode: bool = False

    @abstractmethod
    def decode(self, raw: str) -> List[str]:
        """Turn the raw b value into the ordered tile list."""

    def encode(self, tiles: Sequence[str]) -> str:
        """Turn the ordered tile list into a b value."""
        raise UnsupportedFormatVersion(
            f"Format version {self.version} is read-only", field="mv"
        )

    def check_tile_count(self, tiles: List[str]) -> List[str]:
        if len(tiles) not in SUPPORTED_BOARD_SIZES:
            raise MalformedField(
                f"Board has {len(tiles)} tiles, expected one of {sorted(SUPPORTED_BOARD_SIZES)}",
                field=BOARD_PARAM,
            )
        return tiles
