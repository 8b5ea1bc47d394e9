"""
Round Generator

Builds the 3x3 grid for one round of the matching game.
"""

import random
from typing import List, Optional, Sequence, TypeVar

from ..config.game_settings import GRID_SIZE
from ..models.game import RoundGrid
from ..models.word import Word

T = TypeVar('T')


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of items (Fisher-Yates via random.Random.shuffle)."""
    rng = rng or random.Random()
    result = list(items)
    rng.shuffle(result)
    return result


def blank_count(word_count: int) -> int:
    """Number of blank panels needed to pad a grid built from word_count words."""
    return max(0, (GRID_SIZE - 1) - (word_count - 1))


def generate_round(word_set: Sequence[Word],
                   target_index: int,
                   rng: Optional[random.Random] = None) -> Optional[RoundGrid]:
    """
    Generate the grid for the round whose answer is word_set[target_index].

    The grid always holds GRID_SIZE slots: the target, up to GRID_SIZE - 1
    distractors drawn without replacement from the rest of word_set, and blank
    panels (None) when there are not enough distractors.

    Args:
        word_set: Words of the current play-through
        target_index: Index of this round's answer in word_set
        rng: Source of randomness; pass a seeded random.Random for repeatable grids

    Returns:
        RoundGrid, or None when word_set is empty

    Raises:
        IndexError: If target_index is outside word_set
    """
    if not word_set:
        return None

    if not 0 <= target_index < len(word_set):
        raise IndexError(f"Target index {target_index} out of range for {len(word_set)} words")

    rng = rng or random.Random()
    target = word_set[target_index]

    # A distractor sharing the target image would be a second correct answer
    distractors = [
        word for index, word in enumerate(word_set)
        if index != target_index and word.id != target.id and word.image_path != target.image_path
    ]
    distractors = shuffled(distractors, rng)[:GRID_SIZE - 1]
    blanks = [None] * blank_count(len(distractors) + 1)

    slots = shuffled([target, *distractors, *blanks], rng)
    return RoundGrid(slots=tuple(slots), target=target)
