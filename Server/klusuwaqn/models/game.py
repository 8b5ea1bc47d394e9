"""
Game Data Models

Contains the matching game's state, round grid and the actions that drive it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .word import Word


class Phase(Enum):
    """Which screen the matching game is on."""
    PLAYING = "playing"
    SHOWING_SUCCESS = "showing_success"
    SHOWING_WARNING = "showing_warning"
    SHOWING_FAILURE = "showing_failure"
    COMPLETED = "completed"


@dataclass(frozen=True)
class RoundGrid:
    """One generated round: the shuffled 3x3 grid and the word to find."""
    slots: Tuple[Optional[Word], ...]  # None marks a blank panel
    target: Word

    @property
    def target_text(self) -> str:
        return self.target.mikmaq

    @property
    def target_image(self) -> str:
        return self.target.image_path

    @property
    def target_audio(self) -> str:
        return self.target.audio_path


@dataclass(frozen=True)
class GameState:
    """Matching game state for one play-through. Replaced, never mutated."""
    catalog: Tuple[Word, ...]
    month: Optional[str]
    word_set: Tuple[Word, ...]
    round_index: int = 0
    grid: Optional[RoundGrid] = None
    success_count: int = 0
    attempt_strikes: int = 0
    phase: Phase = Phase.PLAYING

    @property
    def is_empty(self) -> bool:
        """True when the selected month has no words to play."""
        return not self.word_set

    @property
    def total_rounds(self) -> int:
        return len(self.word_set)

    @property
    def current_word(self) -> Optional[Word]:
        if 0 <= self.round_index < len(self.word_set):
            return self.word_set[self.round_index]
        return None

    @property
    def round_display(self) -> str:
        return f"{self.round_index}/{self.total_rounds}"


# Actions accepted by the game reducer

@dataclass(frozen=True)
class SelectSlot:
    image_ref: str


@dataclass(frozen=True)
class AcknowledgeWarning:
    pass


@dataclass(frozen=True)
class AdvanceRound:
    pass


@dataclass(frozen=True)
class RestartRound:
    pass


@dataclass(frozen=True)
class StartNewGame:
    pass


@dataclass(frozen=True)
class SelectMonth:
    month: str
