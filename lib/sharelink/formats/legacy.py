"""Legacy board format (mv=20007).

One letter per tile, no delimiter, so digraph tiles cannot appear:
  b=ABCDEFGHIJKLMNOPQRSTUVWXY
"""

from typing import List

from lib.sharelink.errors import MalformedField
from lib.sharelink.formats.base import BOARD_PARAM, BoardFormat


class LegacyBoardFormat(BoardFormat):
    version = 20007

    def decode(self, raw: str) -> List[str]:
        tiles = list(raw)
        for tile in tiles:
            if not tile.isalpha():
                raise MalformedField(f"Legacy board tile {tile!r} is not a letter", field=BOARD_PARAM)
        return self.check_tile_count(tiles)
