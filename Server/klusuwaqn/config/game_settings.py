"""
Game Configuration Constants Module

This module defines the constants shared by the matching game, the island quiz,
the dictionary search and the seed import. All tunable parameters are centralized
here so the grid shape, the island levels and search weighting can be changed in
one place.
"""

import json
import os
from typing import Dict, Final, List, Tuple

from ..models.island import Animal, IslandLevel
from ..models.word import Month

# Matching game grid (3x3)
GRID_SIZE: Final[int] = 9
"""
Number of slots displayed every round, target included.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_STRIKES: Final[int] = 2
"""Wrong picks on one round that end the play-through."""

DEFAULT_MONTH: Final[Month] = Month.SEPTEMBER

# Fuzzy search configuration used by the dictionary and the admin table
SEARCH_KEYS: Final[Dict[str, float]] = {
    'mikmaq': 1.0,
    'english': 1.0,
    'startMonth': 0.5,
}
SEARCH_THRESHOLD: Final[float] = 0.3
SEARCH_DISTANCE: Final[int] = 100

# Mi'kmaq names for the months the school year covers
MONTH_TRANSLATIONS: Final[Dict[str, str]] = {
    'September': "Wikumkewiku's",
    'October': "Wikewiku's",
    'November': "Keptekewiku's",
    'December': "Kesikewiku's",
    'January': "Punamujuiku's",
    'February': 'Apuknajit',
    'March': "Si'ko'ku's",
}


def _load_seed_words() -> List[Dict[str, str]]:
    """
    Load the starter vocabulary from seed_words.json.

    Returns:
        List[Dict[str, str]]: Records with mikmaq, english and startMonth keys

    Raises:
        FileNotFoundError: If seed_words.json file is not found
        ValueError: If the file is malformed or a record is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'seed_words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            seed_words = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Seed word file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in seed_words.json: {e}")

    if not isinstance(seed_words, list):
        raise ValueError("JSON file must contain an array of words")

    if not seed_words:
        raise ValueError("Seed word list cannot be empty")

    month_names = {month.value for month in Month}
    for index, record in enumerate(seed_words):
        for field in ('mikmaq', 'english', 'startMonth'):
            value = record.get(field)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Seed word at index {index} has no '{field}'")
        if record['startMonth'] not in month_names:
            raise ValueError(f"Seed word at index {index} has unknown month '{record['startMonth']}'")

    return seed_words


# Starter vocabulary loaded from JSON file
SEED_WORDS: Final[List[Dict[str, str]]] = _load_seed_words()


def validate_seed_words_integrity() -> bool:
    """
    Validates the seed vocabulary before it is imported.

    Checks that no Mi'kmaq spelling appears twice, since the seed import derives
    media file names from it.

    Returns:
        bool: True if the seed list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    spellings = [record['mikmaq'].lower() for record in SEED_WORDS]
    if len(spellings) != len(set(spellings)):
        duplicates = sorted({word for word in spellings if spellings.count(word) > 1})
        raise ValueError(f"Duplicate words found in seed list: {duplicates}")

    return True


def get_month_label(month: str) -> str:
    """Label used by the month picker, e.g. "Wikumkewiku's (Sep)"."""
    mikmaq_name = MONTH_TRANSLATIONS.get(month, month)
    return f"{mikmaq_name} ({month[:3]})"


# Goat Island quiz
ISLAND_QUIZ_OPTIONS: Final[int] = 3
"""Animals offered per level, the target included."""

ISLAND_MAX_WRONG: Final[int] = 2
"""Wrong picks on one level that end the island game."""


def _load_island_data() -> Tuple[Tuple[Animal, ...], Tuple[IslandLevel, ...], str]:
    """
    Load the island quiz animals and level progression from island_levels.json.

    Returns:
        Tuple of the animals, the levels in play order and the finish map image

    Raises:
        FileNotFoundError: If island_levels.json file is not found
        ValueError: If the file is malformed or a level names an unknown animal
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'island_levels.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Island level file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in island_levels.json: {e}")

    try:
        animals = tuple(
            Animal(id=a['id'], mikmaq=a['mikmaq'], english=a['english'], image=a['image'])
            for a in data['animals']
        )
        by_id = {animal.id: animal for animal in animals}
        if len(by_id) != len(animals):
            raise ValueError("Duplicate animal ids in island_levels.json")

        levels = []
        for index, level in enumerate(data['levels']):
            target = by_id.get(level['target'])
            if target is None:
                raise ValueError(f"Island level {index} targets unknown animal '{level['target']}'")
            levels.append(IslandLevel(
                level_id=index,
                map_image=level['map'],
                target=target,
                character_top=level['characterPos']['top'],
                character_left=level['characterPos']['left'],
            ))
        finish_map = data['finishMap']
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed island_levels.json: {e}")

    if not levels:
        raise ValueError("Island level list cannot be empty")
    if len(animals) < ISLAND_QUIZ_OPTIONS:
        raise ValueError(f"Island quiz needs at least {ISLAND_QUIZ_OPTIONS} animals")

    return animals, tuple(levels), finish_map


ISLAND_ANIMALS, ISLAND_LEVELS, ISLAND_FINISH_MAP = _load_island_data()
