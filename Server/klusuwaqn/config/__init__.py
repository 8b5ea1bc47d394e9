"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, island levels, search weighting and seed data (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, validate_environment
from .game_settings import (
    GRID_SIZE, MAX_STRIKES, SEARCH_KEYS, SEARCH_THRESHOLD, MONTH_TRANSLATIONS, SEED_WORDS,
    ISLAND_QUIZ_OPTIONS, ISLAND_MAX_WRONG, ISLAND_ANIMALS, ISLAND_LEVELS, ISLAND_FINISH_MAP,
    validate_seed_words_integrity, get_month_label
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'validate_environment',
    # Game rules
    'GRID_SIZE', 'MAX_STRIKES', 'SEARCH_KEYS', 'SEARCH_THRESHOLD', 'MONTH_TRANSLATIONS', 'SEED_WORDS',
    'ISLAND_QUIZ_OPTIONS', 'ISLAND_MAX_WRONG', 'ISLAND_ANIMALS', 'ISLAND_LEVELS', 'ISLAND_FINISH_MAP',
    'validate_seed_words_integrity', 'get_month_label'
]
