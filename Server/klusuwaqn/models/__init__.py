"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .word import Month, Word
from .game import (
    GameState, Phase, RoundGrid,
    SelectSlot, AcknowledgeWarning, AdvanceRound, RestartRound, StartNewGame, SelectMonth
)
from .island import Animal, IslandLevel, IslandState, PickAnimal
from .user import User

__all__ = [
    'Month', 'Word', 'GameState', 'Phase', 'RoundGrid',
    'SelectSlot', 'AcknowledgeWarning', 'AdvanceRound', 'RestartRound', 'StartNewGame', 'SelectMonth',
    'Animal', 'IslandLevel', 'IslandState', 'PickAnimal',
    'User'
]
