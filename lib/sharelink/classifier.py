"""Link classification: scheme/host/path -> delivery type.

  lexica://multiplayer?...               -> MULTIPLAYER
  https://lexica.github.io/share/?...    -> SHARE

Only the URI structure is inspected, never the query.
"""

from typing import Optional
from urllib.parse import urlparse

from lib.sharelink.config import ShareLinkConfig, get_config
from lib.sharelink.errors import UnrecognizedLinkKind
from lib.sharelink.models import LinkType


def classify_link(uri: str, config: Optional[ShareLinkConfig] = None) -> LinkType:
    """Return the delivery type of a link.

    Raises UnrecognizedLinkKind for any other scheme/host/path.
    """
    config = config or get_config()
    parsed = urlparse(uri)
    netloc = parsed.netloc.lower()

    if parsed.scheme == config.app_scheme.lower():
        if netloc == config.multiplayer_host.lower() and parsed.path in ("", "/"):
            return LinkType.MULTIPLAYER

    elif parsed.scheme == "https":
        share_path = config.share_path.rstrip("/")
        if netloc == config.share_host.lower() and parsed.path in (share_path, share_path + "/"):
            return LinkType.SHARE

    raise UnrecognizedLinkKind(f"Not a multiplayer or share link: {parsed.scheme}://{parsed.netloc}{parsed.path}")


def link_prefix(link_type: LinkType, config: Optional[ShareLinkConfig] = None) -> str:
    """Scheme/host/path that URIs of this delivery type start with."""
    config = config or get_config()
    if link_type == LinkType.MULTIPLAYER:
        return f"{config.app_scheme}://{config.multiplayer_host}"
    return f"https://{config.share_host}{config.share_path}"
