"""
Island Service

Keeps Goat Island quiz sessions in memory and routes player actions through
the island state machine.
"""

import random
import uuid
from typing import Any, Dict, Mapping, Optional

from ..config.game_settings import ISLAND_ANIMALS, ISLAND_FINISH_MAP, ISLAND_LEVELS
from ..models.game import Phase, AdvanceRound, RestartRound, StartNewGame
from ..models.island import IslandState, PickAnimal
from .island_game import new_island_game, reduce_island

ISLAND_ACTION_NAMES = ('pick_animal', 'advance_level', 'restart', 'start_new_game')


def build_island_action(action_name: str, payload: Optional[Mapping[str, Any]] = None):
    """
    Turn an action name and its payload into an island reducer action.

    Raises:
        ValueError: If the action is unknown or its payload is incomplete
    """
    payload = payload or {}

    if action_name == 'pick_animal':
        animal_id = payload.get('animal_id')
        if not isinstance(animal_id, str):
            raise ValueError("pick_animal requires 'animal_id'")
        return PickAnimal(animal_id)
    if action_name == 'advance_level':
        return AdvanceRound()
    if action_name == 'restart':
        return RestartRound()
    if action_name == 'start_new_game':
        return StartNewGame()

    raise ValueError(f"Unknown action '{action_name}'. Must be one of: {', '.join(ISLAND_ACTION_NAMES)}")


def serialize_island_state(state: IslandState) -> Dict[str, Any]:
    """
    JSON view of an island quiz state.

    Options carry only their id and picture, and the target animal is named in
    full only once the level is decided.
    """
    level = state.current_level

    level_view = None
    if level is not None:
        level_view = {
            'level_id': level.level_id,
            'prompt': level.target.mikmaq,
            'character_pos': {'top': level.character_top, 'left': level.character_left}
        }

    target_animal = None
    if level is not None and state.phase in (Phase.SHOWING_SUCCESS, Phase.SHOWING_FAILURE):
        target_animal = level.target.to_dict()

    return {
        'phase': state.phase.value,
        'level_index': state.level_index,
        'level_number': state.level_number,
        'total_levels': state.total_levels,
        'wrong_attempts': state.wrong_attempts,
        'map_image': level.map_image if level is not None else ISLAND_FINISH_MAP,
        'level': level_view,
        'options': [{'id': animal.id, 'image': animal.image} for animal in state.options],
        'target_animal': target_animal
    }


class IslandService:
    """Island quiz session manager, one random source per session."""

    def __init__(self, levels=ISLAND_LEVELS, animals=ISLAND_ANIMALS):
        self.levels = levels
        self.animals = animals
        self.games: Dict[str, Dict[str, Any]] = {}

    def create_game(self, seed: Optional[int] = None) -> str:
        """
        Creates a new island quiz session at the first level.

        Returns:
            str: Unique game ID for this session
        """
        rng = random.Random(seed)
        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            'state': new_island_game(self.levels, self.animals, rng),
            'rng': rng
        }
        return game_id

    def get_game_state(self, game_id: str) -> Optional[IslandState]:
        game = self.games.get(game_id)
        return game['state'] if game else None

    def apply_action(self, game_id: str, action_name: str,
                     payload: Optional[Mapping[str, Any]] = None) -> Optional[IslandState]:
        """
        Applies a player action to a session.

        Returns:
            Updated IslandState or None if game not found

        Raises:
            ValueError: If the action is unknown or its payload is incomplete
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        action = build_island_action(action_name, payload)
        game['state'] = reduce_island(game['state'], action, game['rng'])
        return game['state']

    def delete_game(self, game_id: str) -> bool:
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_island_service = None


def get_island_service() -> Optional[IslandService]:
    """Get the global island service instance."""
    return _island_service


def initialize_island_service() -> IslandService:
    """Initialize the global island service instance."""
    global _island_service
    _island_service = IslandService()
    return _island_service
