"""HTTP tests for the share-link API. No network needed."""

import pytest
from fastapi.testclient import TestClient

from api.sharelink.app import app

pytestmark = pytest.mark.api

CURRENT_QUERY = (
    "b=QSxCLEMsRCxFLEYsRyxILEksSixLLEwsTSxOLE8sUCxRdSxSLFMsVCxVLFYsVyxYLFk"
    "&l=fr_FR&t=2700&sc=12&w=7&m=4&mv=20017&v=1234&s=l&h=nc"
)
LEGACY_MULTIPLAYER = "lexica://multiplayer?b=ABCDEFGHIJKLMNOPQRSTUVWXY&l=fr_FR&t=2700&s=l&m=4&mv=20007&v=1234&h=nc"


@pytest.fixture
def client():
    return TestClient(app)


class TestSharePage:
    def test_decodes_share_link(self, client):
        resp = client.get(f"/share/?{CURRENT_QUERY}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["record"]["board"][16] == "Qu"
        assert data["record"]["link_type"] == "SHARE"
        assert data["record"]["hints"] == "hint_both"
        assert data["record"]["score_type"] == "SCORE_LETTERS"
        assert data["record"]["score_to_beat"] == 12
        assert data["board_size"] == 5

    def test_absent_targets_use_sentinel(self, client):
        query = CURRENT_QUERY.replace("&sc=12&w=7", "")
        data = client.get(f"/share/?{query}").json()
        assert data["record"]["score_to_beat"] is None
        assert data["score_to_beat_or_sentinel"] == -1
        assert data["num_words_to_beat_or_sentinel"] == -1

    def test_bad_link(self, client):
        resp = client.get("/share/?" + CURRENT_QUERY.replace("mv=20017", "mv=1"))
        assert resp.status_code == 400
        assert resp.json()["detail"]["error"] == "UnsupportedFormatVersion"
        assert resp.json()["detail"]["field"] == "mv"

    def test_oversized_integer_is_bad_request(self, client):
        resp = client.get("/share/?" + CURRENT_QUERY.replace("t=2700", "t=" + "9" * 5000))
        assert resp.status_code == 400
        assert resp.json()["detail"]["error"] == "MalformedField"
        assert resp.json()["detail"]["field"] == "t"

    def test_invalid_utf8_is_bad_request(self, client):
        resp = client.get("/share/?" + CURRENT_QUERY.replace("l=fr_FR", "l=%FF"))
        assert resp.status_code == 400
        assert resp.json()["detail"]["error"] == "MalformedField"


class TestCreateLink:
    def _body(self, **overrides):
        body = {
            "link_type": "SHARE",
            "board": ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N", "O", "P",
                      "Qu", "R", "S", "T", "U", "V", "W", "X", "Y"],
            "language": "fr_FR",
            "time_limit_in_seconds": 2700,
            "min_word_length": 4,
            "score_type": "SCORE_LETTERS",
            "hints": "hint_both",
            "source_app_version": 1234,
            "score_to_beat": 12,
            "num_words_to_beat": 7,
        }
        body.update(overrides)
        return body

    def test_share_link(self, client):
        resp = client.post("/api/sharelink", json=self._body())
        assert resp.status_code == 200
        assert resp.json()["url"] == f"https://lexica.github.io/share/?{CURRENT_QUERY}"

    def test_multiplayer_link(self, client):
        resp = client.post(
            "/api/sharelink",
            json=self._body(link_type="MULTIPLAYER", score_to_beat=None, num_words_to_beat=None),
        )
        assert resp.status_code == 200
        assert resp.json()["url"].startswith("lexica://multiplayer?b=")

    def test_multiplayer_rejects_targets(self, client):
        resp = client.post("/api/sharelink", json=self._body(link_type="MULTIPLAYER"))
        assert resp.status_code == 422

    def test_bad_board_size(self, client):
        resp = client.post("/api/sharelink", json=self._body(board=["A", "B", "C"]))
        assert resp.status_code == 422

    def test_unencodable_tile(self, client):
        board = ["A,B"] + ["C"] * 8
        resp = client.post("/api/sharelink", json=self._body(board=board))
        assert resp.status_code == 400
        assert resp.json()["detail"]["error"] == "MalformedField"


class TestUpgrade:
    def test_legacy_link(self, client):
        resp = client.post("/api/sharelink/upgrade", json={"url": LEGACY_MULTIPLAYER})
        assert resp.status_code == 200
        assert "mv=20017" in resp.json()["url"]

    def test_unrecognized(self, client):
        resp = client.post("/api/sharelink/upgrade", json={"url": "https://example.com/?mv=20017"})
        assert resp.status_code == 400
        assert resp.json()["detail"]["error"] == "UnrecognizedLinkKind"
