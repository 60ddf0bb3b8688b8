"""API routes for the web share page and link creation."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field, ValidationError

from lib.sharelink.errors import ShareLinkError
from lib.sharelink.models import Hints, LinkType, ScoreType, ShareRecord
from services.sharelink import service

router = APIRouter()


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class ShareLinkBody(BaseModel):
    """Create a multiplayer or share link.

    Example, share link challenging the recipient:
        {
            "link_type": "SHARE",
            "board": ["A", "B", "C", "D", "E", "F", "G", "H", "Qu"],
            "language": "en_US",
            "time_limit_in_seconds": 180,
            "min_word_length": 3,
            "score_type": "SCORE_LETTERS",
            "hints": "hint_both",
            "score_to_beat": 42
        }
    """

    link_type: LinkType
    board: List[str]
    language: str
    time_limit_in_seconds: int
    min_word_length: int
    score_type: ScoreType
    hints: Hints = Hints.NONE
    source_app_version: Optional[int] = None
    score_to_beat: Optional[int] = None  # SHARE only
    num_words_to_beat: Optional[int] = None  # SHARE only


class UpgradeBody(BaseModel):
    url: str


class ShareLinkResponse(BaseModel):
    url: str


class ShareRecordResponse(BaseModel):
    record: ShareRecord
    board_size: int
    score_to_beat_or_sentinel: int = Field(..., description="-1 when there is no target")
    num_words_to_beat_or_sentinel: int = Field(..., description="-1 when there is no target")


def _bad_link(e: ShareLinkError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"error": type(e).__name__, "field": e.field, "message": str(e)},
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/share/", response_model=ShareRecordResponse)
async def share_page(request: Request):
    """The page a share link opens when the app is not installed."""
    try:
        record = service.parse_query(request.url.query, LinkType.SHARE)
    except ShareLinkError as e:
        raise _bad_link(e)

    return ShareRecordResponse(
        record=record,
        board_size=record.board_size,
        score_to_beat_or_sentinel=record.score_to_beat_or_sentinel,
        num_words_to_beat_or_sentinel=record.num_words_to_beat_or_sentinel,
    )


@router.post("/api/sharelink", response_model=ShareLinkResponse)
async def create_link(body: ShareLinkBody):
    if body.link_type == LinkType.MULTIPLAYER and (
        body.score_to_beat is not None or body.num_words_to_beat is not None
    ):
        raise HTTPException(status_code=422, detail="Multiplayer links cannot carry beat-targets")

    common = dict(
        board=body.board,
        language=body.language,
        time_limit_in_seconds=body.time_limit_in_seconds,
        min_word_length=body.min_word_length,
        score_type=body.score_type,
        hints=body.hints,
        source_app_version=body.source_app_version,
    )
    try:
        if body.link_type == LinkType.MULTIPLAYER:
            url = service.create_multiplayer_link(**common)
        else:
            url = service.create_share_link(
                **common,
                score_to_beat=body.score_to_beat,
                num_words_to_beat=body.num_words_to_beat,
            )
    except ShareLinkError as e:
        raise _bad_link(e)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ShareLinkResponse(url=url)


@router.post("/api/sharelink/upgrade", response_model=ShareLinkResponse)
async def upgrade(body: UpgradeBody):
    try:
        url = service.upgrade_link(body.url)
    except ShareLinkError as e:
        raise _bad_link(e)
    return ShareLinkResponse(url=url)
