"""Share-link codec for word-search boards.

Two delivery types, one payload:
  MULTIPLAYER: lexica://multiplayer?<query>
  SHARE:       https://lexica.github.io/share/?<query>

Shared library: models, classifier, codec and format versions only.
Logging and business logic live in services/sharelink/.
API layer lives in api/sharelink/.
"""

from lib.sharelink.classifier import classify_link, link_prefix
from lib.sharelink.codec import decode_query, encode_query, parse_link, serialize_link
from lib.sharelink.errors import (
    MalformedField,
    ShareLinkError,
    UnknownHintFlag,
    UnknownScoreType,
    UnrecognizedLinkKind,
    UnsupportedFormatVersion,
)
from lib.sharelink.models import NO_TARGET, Hints, LinkType, ScoreType, ShareRecord

__all__ = [
    "ShareRecord",
    "LinkType",
    "ScoreType",
    "Hints",
    "NO_TARGET",
    "classify_link",
    "link_prefix",
    "decode_query",
    "encode_query",
    "parse_link",
    "serialize_link",
    "ShareLinkError",
    "UnrecognizedLinkKind",
    "UnsupportedFormatVersion",
    "MalformedField",
    "UnknownScoreType",
    "UnknownHintFlag",
]
