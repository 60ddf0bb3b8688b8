"""Business logic for share and multiplayer links.

Thin layer over lib/sharelink: builds records for the two delivery types,
upgrades old links, and logs what comes through. The codec itself never logs.
"""

from typing import Iterable, List, Optional, Sequence

from loguru import logger

from lib.sharelink.codec import decode_query, parse_link, serialize_link, split_query
from lib.sharelink.config import ShareLinkConfig
from lib.sharelink.errors import ShareLinkError
from lib.sharelink.models import Hints, LinkType, ScoreType, ShareRecord


def parse_game(uri: str, config: Optional[ShareLinkConfig] = None) -> ShareRecord:
    """Decode a multiplayer or share link into a ShareRecord."""
    try:
        record = parse_link(uri, config)
    except ShareLinkError as e:
        _log_rejection(e)
        raise

    _log_decoded(record)
    return record


def parse_query(query: str, link_type: LinkType) -> ShareRecord:
    """Decode the raw query of a link whose delivery type is already known.

    Used by the share page itself, where the request path has been routed.
    """
    try:
        record = decode_query(split_query(query), link_type)
    except ShareLinkError as e:
        _log_rejection(e)
        raise

    _log_decoded(record)
    return record


def _log_rejection(e: ShareLinkError) -> None:
    logger.warning(f"Rejected link ({type(e).__name__}, field={e.field}): {e}")


def _log_decoded(record: ShareRecord) -> None:
    logger.debug(
        f"Decoded {record.link_type.value} link: {record.board_size}x{record.board_size} "
        f"{record.language}, app version {record.source_app_version}"
    )


def _build_record(
    link_type: LinkType,
    board: Sequence[str],
    language: str,
    time_limit_in_seconds: int,
    min_word_length: int,
    score_type: ScoreType,
    hints: Hints,
    source_app_version: Optional[int],
    score_to_beat: Optional[int] = None,
    num_words_to_beat: Optional[int] = None,
) -> ShareRecord:
    return ShareRecord(
        board=tuple(board),
        language=language,
        time_limit_in_seconds=time_limit_in_seconds,
        min_word_length=min_word_length,
        score_type=score_type,
        hints=hints,
        link_type=link_type,
        source_app_version=source_app_version,
        score_to_beat=score_to_beat,
        num_words_to_beat=num_words_to_beat,
    )


def create_multiplayer_link(
    board: Sequence[str],
    language: str,
    time_limit_in_seconds: int,
    min_word_length: int,
    score_type: ScoreType,
    hints: Hints,
    source_app_version: Optional[int] = None,
    config: Optional[ShareLinkConfig] = None,
) -> str:
    """Deep link inviting a peer into a live game. Never carries beat-targets."""
    record = _build_record(
        LinkType.MULTIPLAYER,
        board,
        language,
        time_limit_in_seconds,
        min_word_length,
        score_type,
        hints,
        source_app_version,
    )
    url = serialize_link(record, config)
    logger.info(f"Created multiplayer link ({record.language}, {len(record.board)} tiles)")
    return url


def create_share_link(
    board: Sequence[str],
    language: str,
    time_limit_in_seconds: int,
    min_word_length: int,
    score_type: ScoreType,
    hints: Hints,
    source_app_version: Optional[int] = None,
    score_to_beat: Optional[int] = None,
    num_words_to_beat: Optional[int] = None,
    config: Optional[ShareLinkConfig] = None,
) -> str:
    """Web link to a finished game, optionally challenging the recipient."""
    record = _build_record(
        LinkType.SHARE,
        board,
        language,
        time_limit_in_seconds,
        min_word_length,
        score_type,
        hints,
        source_app_version,
        score_to_beat=score_to_beat,
        num_words_to_beat=num_words_to_beat,
    )
    url = serialize_link(record, config)
    logger.info(
        f"Created share link ({record.language}, score_to_beat={record.score_to_beat}, "
        f"num_words_to_beat={record.num_words_to_beat})"
    )
    return url


def upgrade_link(uri: str, config: Optional[ShareLinkConfig] = None) -> str:
    """Re-serialize a link of any supported version in the current format."""
    record = parse_game(uri, config)
    upgraded = serialize_link(record, config)
    if upgraded != uri:
        logger.info(f"Upgraded {record.link_type.value} link to current format")
    return upgraded


def check_board_tiles(record: ShareRecord, digraphs: Iterable[str]) -> List[str]:
    """Tiles that are neither a single letter nor one of the language's digraphs.

    `digraphs` comes from the caller's language registry, e.g. {"Qu"} for
    English. An empty result means the board is playable in that language.
    """
    allowed = set(digraphs)
    invalid = [tile for tile in record.board if len(tile) != 1 and tile not in allowed]
    if invalid:
        logger.warning(f"Board for {record.language} has {len(invalid)} unknown tiles: {invalid}")
    return invalid
