"""
Services Package

Contains all business logic and service classes.
"""

from .auth_service import AuthService, get_auth_service, initialize_auth_service
from .game_service import GameService, get_game_service, initialize_game_service
from .island_service import IslandService, get_island_service, initialize_island_service
from .word_service import WordService, get_word_service, initialize_word_service
from .round_generator import generate_round
from .game_state_machine import new_game, reduce_game
from .island_game import new_island_game, reduce_island
from .search_service import search

__all__ = [
    'AuthService', 'get_auth_service', 'initialize_auth_service',
    'GameService', 'get_game_service', 'initialize_game_service',
    'IslandService', 'get_island_service', 'initialize_island_service',
    'WordService', 'get_word_service', 'initialize_word_service',
    'generate_round', 'new_game', 'reduce_game', 'new_island_game', 'reduce_island', 'search'
]
