"""Unit tests for link classification."""

import pytest
from pydantic import ValidationError

from lib.sharelink.classifier import classify_link, link_prefix
from lib.sharelink.config import ShareLinkConfig, get_config
from lib.sharelink.errors import UnrecognizedLinkKind
from lib.sharelink.models import LinkType


class TestClassifyLink:
    def test_multiplayer(self):
        assert classify_link("lexica://multiplayer?b=ABC") == LinkType.MULTIPLAYER

    def test_multiplayer_trailing_slash(self):
        assert classify_link("lexica://multiplayer/?b=ABC") == LinkType.MULTIPLAYER

    def test_share(self):
        assert classify_link("https://lexica.github.io/share/?b=ABC") == LinkType.SHARE

    def test_share_without_trailing_slash(self):
        assert classify_link("https://lexica.github.io/share?b=ABC") == LinkType.SHARE

    def test_host_is_case_insensitive(self):
        assert classify_link("https://Lexica.GitHub.io/share/") == LinkType.SHARE

    @pytest.mark.parametrize(
        "uri",
        [
            "http://lexica.github.io/share/?b=ABC",  # not https
            "https://example.com/share/?b=ABC",  # wrong host
            "https://lexica.github.io/other/?b=ABC",  # wrong path
            "https://lexica.github.io/share/extra?b=ABC",
            "lexica://singleplayer?b=ABC",  # wrong deep-link target
            "lexica://multiplayer/join?b=ABC",
            "otherapp://multiplayer?b=ABC",  # wrong scheme
            "lexica://lexica.github.io/share/?b=ABC",
            "",
        ],
    )
    def test_unrecognized(self, uri):
        with pytest.raises(UnrecognizedLinkKind):
            classify_link(uri)


class TestLinkPrefix:
    def test_multiplayer(self):
        assert link_prefix(LinkType.MULTIPLAYER) == "lexica://multiplayer"

    def test_share(self):
        assert link_prefix(LinkType.SHARE) == "https://lexica.github.io/share/"

    @pytest.mark.parametrize("link_type", list(LinkType))
    def test_prefix_classifies_back(self, link_type):
        assert classify_link(link_prefix(link_type) + "?b=A") == link_type


class TestConfig:
    def test_custom_config(self):
        config = ShareLinkConfig(app_scheme="lexica-beta", share_host="beta.example.org")
        assert classify_link("lexica-beta://multiplayer?b=A", config) == LinkType.MULTIPLAYER
        assert classify_link("https://beta.example.org/share/", config) == LinkType.SHARE
        with pytest.raises(UnrecognizedLinkKind):
            classify_link("lexica://multiplayer?b=A", config)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SHARELINK_SHARE_HOST", "share.example.org")
        monkeypatch.setenv("SHARELINK_SHARE_PATH", "/s/")
        get_config.cache_clear()

        assert link_prefix(LinkType.SHARE) == "https://share.example.org/s/"
        assert classify_link("https://share.example.org/s/?b=A") == LinkType.SHARE

    def test_config_is_immutable(self):
        config = ShareLinkConfig()
        with pytest.raises(ValidationError):
            config.share_host = "elsewhere.org"
