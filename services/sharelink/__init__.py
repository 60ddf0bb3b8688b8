"""Share-link service: public interface."""

from services.sharelink.service import (
    check_board_tiles,
    create_multiplayer_link,
    create_share_link,
    parse_game,
    parse_query,
    upgrade_link,
)

__all__ = [
    "parse_game",
    "parse_query",
    "create_multiplayer_link",
    "create_share_link",
    "upgrade_link",
    "check_board_tiles",
]
