"""
Island Game Data Models

Contains the Goat Island quiz's animals, levels and state. The quiz reuses the
matching game's Phase values and its AdvanceRound, RestartRound and
StartNewGame actions.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .game import Phase


@dataclass(frozen=True)
class Animal:
    """An animal the quiz can ask about or offer as an option."""
    id: str
    mikmaq: str
    english: str
    image: str

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'mikmaq': self.mikmaq,
            'english': self.english,
            'image': self.image
        }


@dataclass(frozen=True)
class IslandLevel:
    """One stage of the island map and the animal to find there."""
    level_id: int
    map_image: str
    target: Animal
    character_top: str
    character_left: str


@dataclass(frozen=True)
class IslandState:
    """Island quiz state for one play-through. Replaced, never mutated."""
    levels: Tuple[IslandLevel, ...]
    animals: Tuple[Animal, ...]
    level_index: int = 0
    options: Tuple[Animal, ...] = ()
    wrong_attempts: int = 0
    phase: Phase = Phase.PLAYING

    @property
    def total_levels(self) -> int:
        return len(self.levels)

    @property
    def current_level(self) -> Optional[IslandLevel]:
        if 0 <= self.level_index < len(self.levels):
            return self.levels[self.level_index]
        return None

    @property
    def level_number(self) -> int:
        """1-based level shown in the page header."""
        return self.level_index + 1


@dataclass(frozen=True)
class PickAnimal:
    animal_id: str
