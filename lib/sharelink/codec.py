"""Share-link payload codec.

decode_query() / parse_link(): read any supported format version.
encode_query() / serialize_link(): always write the current format version.

Pure functions: no I/O, no logging, no shared state.
"""

import re
from typing import Dict, FrozenSet, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlparse

from lib.sharelink.classifier import classify_link, link_prefix
from lib.sharelink.config import ShareLinkConfig
from lib.sharelink.errors import (
    MalformedField,
    UnknownHintFlag,
    UnknownScoreType,
    UnsupportedFormatVersion,
)
from lib.sharelink.formats import CURRENT_FORMAT_VERSION, FORMAT_VERSIONS, BoardFormat
from lib.sharelink.models import Hints, HintToggle, LinkType, ScoreType, ShareRecord

# Query keys, in the order the encoder writes them
PARAM_ORDER = ("b", "l", "t", "sc", "w", "m", "mv", "v", "s", "h")

SCORE_TYPE_CODES: Dict[str, ScoreType] = {
    "l": ScoreType.SCORE_LETTERS,
    "w": ScoreType.SCORE_WORDS,
}
SCORE_TYPE_TO_CODE: Dict[ScoreType, str] = {v: k for k, v in SCORE_TYPE_CODES.items()}

# Dict order is the canonical flag order on output ("nc")
HINT_FLAG_CODES: Dict[str, HintToggle] = {
    "n": HintToggle.WORD_COUNT,
    "c": HintToggle.CONTAINS,
}
HINTS_BY_TOGGLES: Dict[FrozenSet[HintToggle], Hints] = {
    frozenset(): Hints.NONE,
    frozenset({HintToggle.WORD_COUNT}): Hints.WORD_COUNT,
    frozenset({HintToggle.CONTAINS}): Hints.CONTAINS,
    frozenset({HintToggle.WORD_COUNT, HintToggle.CONTAINS}): Hints.BOTH,
}
TOGGLES_BY_HINTS: Dict[Hints, FrozenSet[HintToggle]] = {v: k for k, v in HINTS_BY_TOGGLES.items()}

# Bounded so int() never hits the interpreter's digit limit
_UNSIGNED_RE = re.compile(r"[0-9]{1,18}")
_SIGNED_RE = re.compile(r"-?[0-9]{1,18}")


# --- Field helpers ---


def _required(params: Mapping[str, str], key: str) -> str:
    value = params.get(key)
    if value is None:
        raise MalformedField(f"Missing required parameter '{key}'", field=key)
    return value


def _parse_int(raw: str, key: str, minimum: Optional[int] = 0) -> int:
    pattern = _SIGNED_RE if minimum is None else _UNSIGNED_RE
    if not pattern.fullmatch(raw):
        raise MalformedField(f"Parameter '{key}' is not a valid integer: {raw!r}", field=key)
    value = int(raw)
    if minimum is not None and value < minimum:
        raise MalformedField(f"Parameter '{key}' must be >= {minimum}, got {value}", field=key)
    return value


def _optional_int(params: Mapping[str, str], key: str, minimum: Optional[int] = 0) -> Optional[int]:
    """Absent -> None. Present but malformed is still an error."""
    raw = params.get(key)
    if raw is None:
        return None
    return _parse_int(raw, key, minimum=minimum)


def _board_format(params: Mapping[str, str]) -> BoardFormat:
    raw = params.get("mv")
    if raw is None:
        raise UnsupportedFormatVersion("Missing format version 'mv'", field="mv")
    if not _UNSIGNED_RE.fullmatch(raw) or int(raw) not in FORMAT_VERSIONS:
        raise UnsupportedFormatVersion(f"Unsupported format version: {raw!r}", field="mv")
    return FORMAT_VERSIONS[int(raw)]


def _decode_score_type(raw: str) -> ScoreType:
    if raw not in SCORE_TYPE_CODES:
        raise UnknownScoreType(f"Unknown score type: {raw!r}", field="s")
    return SCORE_TYPE_CODES[raw]


def _decode_hints(raw: str) -> Hints:
    toggles = set()
    for flag in raw:
        if flag not in HINT_FLAG_CODES:
            raise UnknownHintFlag(f"Unknown hint flag: {flag!r}", field="h")
        toggles.add(HINT_FLAG_CODES[flag])
    return HINTS_BY_TOGGLES[frozenset(toggles)]


def _encode_hints(hints: Hints) -> str:
    toggles = TOGGLES_BY_HINTS[hints]
    return "".join(code for code, toggle in HINT_FLAG_CODES.items() if toggle in toggles)


# --- Decode ---


def decode_query(params: Mapping[str, str], link_type: LinkType) -> ShareRecord:
    """Decode query parameters of an already classified link."""
    board_format = _board_format(params)
    board = board_format.decode(_required(params, "b"))

    language = _required(params, "l")
    if not language:
        raise MalformedField("Parameter 'l' must not be empty", field="l")

    return ShareRecord(
        board=tuple(board),
        language=language,
        time_limit_in_seconds=_parse_int(_required(params, "t"), "t"),
        min_word_length=_parse_int(_required(params, "m"), "m", minimum=1),
        score_type=_decode_score_type(_required(params, "s")),
        hints=_decode_hints(_required(params, "h")),
        link_type=link_type,
        source_app_version=_optional_int(params, "v", minimum=None),
        score_to_beat=_optional_int(params, "sc"),
        num_words_to_beat=_optional_int(params, "w"),
    )


def split_query(query: str) -> Dict[str, str]:
    """Split a raw query string into a dict, rejecting repeated keys."""
    params: Dict[str, str] = {}
    try:
        pairs = parse_qsl(query, keep_blank_values=True, errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedField(f"Query is not valid UTF-8: {e}") from e

    for key, value in pairs:
        if key in params:
            raise MalformedField(f"Parameter '{key}' appears more than once", field=key)
        params[key] = value
    return params


def parse_link(uri: str, config: Optional[ShareLinkConfig] = None) -> ShareRecord:
    """Classify a link and decode its payload.

    The payload is not looked at unless the link is recognized.
    """
    link_type = classify_link(uri, config)
    return decode_query(split_query(urlparse(uri).query), link_type)


# --- Encode ---


def encode_query(record: ShareRecord) -> Dict[str, str]:
    """Query parameters for a record, in the current format and canonical order."""
    board_format = FORMAT_VERSIONS[CURRENT_FORMAT_VERSION]

    params = {
        "b": board_format.encode(record.board),
        "l": record.language,
        "t": str(record.time_limit_in_seconds),
        "sc": None if record.score_to_beat is None else str(record.score_to_beat),
        "w": None if record.num_words_to_beat is None else str(record.num_words_to_beat),
        "m": str(record.min_word_length),
        "mv": str(CURRENT_FORMAT_VERSION),
        "v": None if record.source_app_version is None else str(record.source_app_version),
        "s": SCORE_TYPE_TO_CODE[record.score_type],
        "h": _encode_hints(record.hints),
    }
    return {key: params[key] for key in PARAM_ORDER if params[key] is not None}


def serialize_link(record: ShareRecord, config: Optional[ShareLinkConfig] = None) -> str:
    """Full URI for a record, prefixed according to its link type."""
    return f"{link_prefix(record.link_type, config)}?{urlencode(encode_query(record))}"
