"""Current board format (mv=20017).

Tiles are joined with "," and the UTF-8 text is base64url encoded without
padding, so multi-character tiles survive:
  A,B,...,P,Qu,R,...,Y  ->  b=QSxCLEMsRCxF...LFk
"""

import base64
import binascii
import re
from typing import List, Sequence

from lib.sharelink.errors import MalformedField
from lib.sharelink.formats.base import BOARD_PARAM, BoardFormat

TILE_DELIMITER = ","

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class CurrentBoardFormat(BoardFormat):
    version = 20017
    can_encode = True

    def decode(self, raw: str) -> List[str]:
        if not _BASE64URL_RE.fullmatch(raw):
            raise MalformedField("Board is not base64url text", field=BOARD_PARAM)

        unpadded = raw.rstrip("=")
        try:
            data = base64.urlsafe_b64decode(unpadded + "=" * (-len(unpadded) % 4))
            text = data.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedField(f"Board could not be decoded: {e}", field=BOARD_PARAM) from e

        tiles = text.split(TILE_DELIMITER)
        if any(not tile for tile in tiles):
            raise MalformedField("Board contains an empty tile", field=BOARD_PARAM)
        return self.check_tile_count(tiles)

    def encode(self, tiles: Sequence[str]) -> str:
        for tile in tiles:
            if not tile or TILE_DELIMITER in tile:
                raise MalformedField(f"Tile {tile!r} cannot be encoded", field=BOARD_PARAM)

        data = TILE_DELIMITER.join(tiles).encode("utf-8")
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
