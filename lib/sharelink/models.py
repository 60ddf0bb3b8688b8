"""Data models for share-link encoding and decoding."""

import math
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Board side lengths a link may describe (3x3 up to 6x6)
SUPPORTED_BOARD_SIDES = (3, 4, 5, 6)
SUPPORTED_BOARD_SIZES = {side * side: side for side in SUPPORTED_BOARD_SIDES}

# Stand-in for an absent beat-target, for consumers that compare integers
NO_TARGET = -1


class LinkType(str, Enum):
    """Delivery type of a link, decided by its scheme/host/path."""

    MULTIPLAYER = "MULTIPLAYER"  # App deep link, live session invite
    SHARE = "SHARE"  # Web link to a finished game's result


class ScoreType(str, Enum):
    """Scoring mode of the round."""

    SCORE_LETTERS = "SCORE_LETTERS"  # Points per letter value
    SCORE_WORDS = "SCORE_WORDS"  # Points per word length


class HintToggle(str, Enum):
    """A single hint switch. Combined into Hints."""

    WORD_COUNT = "WORD_COUNT"
    CONTAINS = "CONTAINS"


class Hints(str, Enum):
    """Every legal combination of hint toggles."""

    NONE = "hint_none"
    WORD_COUNT = "hint_word_count"
    CONTAINS = "hint_contains"
    BOTH = "hint_both"


class ShareRecord(BaseModel):
    """Decoded contents of a share or multiplayer link."""

    model_config = ConfigDict(frozen=True)

    board: Tuple[str, ...]  # Row-major tiles, e.g. ("A", "B", ..., "Qu", ...)
    language: str = Field(..., min_length=1)  # Opaque locale tag, e.g. "fr_FR"
    time_limit_in_seconds: int = Field(..., ge=0)
    min_word_length: int = Field(..., ge=1)
    score_type: ScoreType
    hints: Hints
    link_type: LinkType
    source_app_version: Optional[int] = None  # Opaque, passed through unchanged
    score_to_beat: Optional[int] = Field(None, ge=0)
    num_words_to_beat: Optional[int] = Field(None, ge=0)

    @field_validator("board")
    @classmethod
    def board_is_supported_square(cls, v):
        if len(v) not in SUPPORTED_BOARD_SIZES:
            raise ValueError(f"board must have one of {sorted(SUPPORTED_BOARD_SIZES)} tiles, got {len(v)}")
        if any(not tile for tile in v):
            raise ValueError("board tiles must not be empty")
        return v

    @property
    def board_size(self) -> int:
        """Side length of the board."""
        return math.isqrt(len(self.board))

    @property
    def score_to_beat_or_sentinel(self) -> int:
        """score_to_beat, or NO_TARGET when absent."""
        return NO_TARGET if self.score_to_beat is None else self.score_to_beat

    @property
    def num_words_to_beat_or_sentinel(self) -> int:
        """num_words_to_beat, or NO_TARGET when absent."""
        return NO_TARGET if self.num_words_to_beat is None else self.num_words_to_beat

    def has_beat_targets(self) -> bool:
        """True if either beat-target is set."""
        return self.score_to_beat is not None or self.num_words_to_beat is not None
