"""
Game Service

Keeps matching game sessions in memory and routes player actions through the
game state machine.
"""

import random
import uuid
from typing import Any, Dict, List, Mapping, Optional

from ..config.game_settings import DEFAULT_MONTH, get_month_label
from ..models.game import (
    GameState, Phase, SelectSlot, AcknowledgeWarning, AdvanceRound,
    RestartRound, StartNewGame, SelectMonth
)
from ..models.word import Month, Word
from ..utils.game_logger import game_logger
from ..utils.helpers import to_storage_url
from .game_state_machine import new_game, reduce_game
from .word_service import get_word_service

ACTION_NAMES = (
    'select_slot', 'acknowledge_warning', 'advance_round',
    'restart_round', 'start_new_game', 'select_month'
)

# Phases in which the round is decided and the target may be shown
REVEAL_PHASES = frozenset({Phase.SHOWING_SUCCESS, Phase.SHOWING_FAILURE, Phase.COMPLETED})


def build_action(action_name: str, payload: Optional[Mapping[str, Any]] = None):
    """
    Turn an action name and its payload into a reducer action.

    Raises:
        ValueError: If the action is unknown or its payload is incomplete
    """
    payload = payload or {}

    if action_name == 'select_slot':
        image_ref = payload.get('image_ref')
        if not isinstance(image_ref, str):
            raise ValueError("select_slot requires 'image_ref'")
        return SelectSlot(image_ref)
    if action_name == 'select_month':
        month = payload.get('month')
        if not isinstance(month, str):
            raise ValueError("select_month requires 'month'")
        return SelectMonth(month)
    if action_name == 'acknowledge_warning':
        return AcknowledgeWarning()
    if action_name == 'advance_round':
        return AdvanceRound()
    if action_name == 'restart_round':
        return RestartRound()
    if action_name == 'start_new_game':
        return StartNewGame()

    raise ValueError(f"Unknown action '{action_name}'. Must be one of: {', '.join(ACTION_NAMES)}")


def _slot_to_dict(word: Optional[Word]) -> Optional[Dict[str, Any]]:
    if word is None:
        return None
    return {
        'id': word.id,
        'mikmaq': word.mikmaq,
        'english': word.english,
        'imagePath': word.image_path,
        'imageUrl': to_storage_url(word.image_path)
    }


def serialize_state(state: GameState) -> Dict[str, Any]:
    """
    JSON view of a game state.

    The target image is withheld until the round is decided, so a first wrong
    pick does not give the answer away. The correct word is revealed once the
    play-through has failed.
    """
    grid = None
    if state.grid is not None:
        grid = {
            'slots': [_slot_to_dict(slot) for slot in state.grid.slots],
            'target_text': state.grid.target_text,
            'target_audio': state.grid.target_audio,
            'target_audio_url': to_storage_url(state.grid.target_audio),
            'target_image': state.grid.target_image if state.phase in REVEAL_PHASES else None
        }

    correct_word = None
    if state.phase == Phase.SHOWING_FAILURE and state.current_word is not None:
        correct_word = _slot_to_dict(state.current_word)

    return {
        'month': state.month,
        'month_label': get_month_label(state.month) if state.month else None,
        'phase': state.phase.value,
        'round_index': state.round_index,
        'total_rounds': state.total_rounds,
        'round_display': state.round_display,
        'success_count': state.success_count,
        'attempt_strikes': state.attempt_strikes,
        'empty_word_set': state.is_empty,
        'grid': grid,
        'correct_word': correct_word
    }


class GameService:
    """
    Matching game session manager.

    This class handles:
    - Game session management with unique game IDs
    - Fetching the catalog snapshot once per session
    - Applying player actions and keeping each session's random source
    """

    def __init__(self):
        self.games: Dict[str, Dict[str, Any]] = {}

    def _load_catalog(self) -> List[Word]:
        word_service = get_word_service()
        if not word_service:
            game_logger.logger.error("Word service unavailable, starting game with an empty catalog")
            return []
        try:
            return word_service.list_words()
        except Exception as e:
            game_logger.logger.error(f"Failed to load word catalog, starting game with an empty catalog: {e}")
            return []

    def create_game(self, month: Optional[str] = None, seed: Optional[int] = None,
                    catalog: Optional[List[Word]] = None) -> str:
        """
        Creates a new game session for a month.

        Args:
            month: Month whose words are played; defaults to September
            seed: Optional seed for a repeatable session
            catalog: Words to play with; fetched from the word service when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If month is not a month name
        """
        selected = Month.parse(month) if month is not None else DEFAULT_MONTH
        if selected is None:
            raise ValueError(f"Invalid month '{month}'")

        if catalog is None:
            catalog = self._load_catalog()

        rng = random.Random(seed)
        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            'state': new_game(catalog, selected.value, rng),
            'rng': rng
        }
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current state of a session.

        Returns:
            GameState or None if game not found
        """
        game = self.games.get(game_id)
        return game['state'] if game else None

    def apply_action(self, game_id: str, action_name: str,
                     payload: Optional[Mapping[str, Any]] = None) -> Optional[GameState]:
        """
        Applies a player action to a session.

        Returns:
            Updated GameState or None if game not found

        Raises:
            ValueError: If the action is unknown or its payload is incomplete
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        action = build_action(action_name, payload)
        game['state'] = reduce_game(game['state'], action, game['rng'])
        return game['state']

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service() -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService()
    return _game_service
