"""
Search Service

Fuzzy search over the word catalog for the dictionary and the admin table.
Matching is approximate substring matching built on difflib.SequenceMatcher;
this module only decides which fields count and how much.
"""

import difflib
from typing import Dict, List, Optional, Sequence, Tuple

from flask import current_app, has_app_context

from ..config.game_settings import SEARCH_DISTANCE, SEARCH_KEYS, SEARCH_THRESHOLD
from ..models.word import Word

# Stands in for a perfect score so it still carries weight in the product
_EPSILON = 1e-6


def _field_values(word: Word) -> Dict[str, str]:
    return {
        'mikmaq': word.mikmaq,
        'english': word.english,
        'startMonth': word.start_month,
    }


def field_score(query: str, text: str, distance: int = SEARCH_DISTANCE) -> float:
    """
    Score how well query appears somewhere in text.

    Every window of text as long as the query is compared with it; the best
    window wins. A match further from the start of the text is penalised by
    offset / distance.

    Returns:
        float: 0.0 for an exact match at the start, 1.0 or more for no match
    """
    query = query.lower()
    text = text.lower()
    if not query or not text:
        return 1.0

    window = len(query)
    if len(text) <= window:
        return 1.0 - difflib.SequenceMatcher(None, query, text).ratio()

    best = 1.0
    for offset in range(len(text) - window + 1):
        ratio = difflib.SequenceMatcher(None, query, text[offset:offset + window]).ratio()
        score = (1.0 - ratio) + offset / distance
        if score < best:
            best = score
            if best == 0.0:
                break
    return best


def score_word(word: Word,
               query: str,
               threshold: float,
               keys: Optional[Dict[str, float]] = None,
               distance: int = SEARCH_DISTANCE) -> Optional[float]:
    """
    Combined score for one word, or None if no field is close enough.

    Matched fields are combined as a product of score ** normalised weight, so
    a near-perfect match on a heavy field ranks highest.
    """
    keys = keys or SEARCH_KEYS
    total_weight = sum(keys.values())
    values = _field_values(word)

    combined = 1.0
    matched = False
    for field, weight in keys.items():
        score = field_score(query, values.get(field, ''), distance)
        if score > threshold:
            continue
        matched = True
        combined *= max(score, _EPSILON) ** (weight / total_weight)

    return combined if matched else None


def _default_threshold() -> float:
    if has_app_context():
        return current_app.config.get('SEARCH_THRESHOLD', SEARCH_THRESHOLD)
    return SEARCH_THRESHOLD


def search(catalog: Sequence[Word], query: str, threshold: Optional[float] = None) -> List[Word]:
    """
    Filter and rank the catalog by a free-text query.

    Args:
        catalog: Words to search
        query: Text typed by the user; blank returns the catalog unchanged
        threshold: Highest field score still counted as a match (0 exact, 1 anything)

    Returns:
        List[Word]: Matching words, best first; ties keep catalog order
    """
    if not query or not query.strip():
        return list(catalog)

    if threshold is None:
        threshold = _default_threshold()

    query = query.strip()
    ranked: List[Tuple[float, int, Word]] = []
    for index, word in enumerate(catalog):
        score = score_word(word, query, threshold)
        if score is not None:
            ranked.append((score, index, word))

    ranked.sort(key=lambda entry: (entry[0], entry[1]))
    return [word for _, _, word in ranked]
