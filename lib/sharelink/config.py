"""Share-link URI configuration.

Values come from the environment so staging builds can point at a
different share host:

    SHARELINK_APP_SCHEME        custom scheme of the app deep link
    SHARELINK_MULTIPLAYER_HOST  authority of the multiplayer deep link
    SHARELINK_SHARE_HOST        host serving the web share page
    SHARELINK_SHARE_PATH        path of the web share page
"""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class ShareLinkConfig(BaseModel):
    """Scheme/host/path pieces for both delivery types."""

    model_config = ConfigDict(frozen=True)

    app_scheme: str = Field(default="lexica", description="Custom scheme of the app")
    multiplayer_host: str = Field(default="multiplayer", description="Deep-link target")
    share_host: str = Field(default="lexica.github.io", description="Web share page host")
    share_path: str = Field(default="/share/", description="Web share page path")


@lru_cache(maxsize=1)
def get_config() -> ShareLinkConfig:
    """Build the process-wide config from the environment (read once)."""
    defaults = ShareLinkConfig()
    return ShareLinkConfig(
        app_scheme=os.getenv("SHARELINK_APP_SCHEME", defaults.app_scheme),
        multiplayer_host=os.getenv("SHARELINK_MULTIPLAYER_HOST", defaults.multiplayer_host),
        share_host=os.getenv("SHARELINK_SHARE_HOST", defaults.share_host),
        share_path=os.getenv("SHARELINK_SHARE_PATH", defaults.share_path),
    )
