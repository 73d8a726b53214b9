"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DIFFICULTY_SETTINGS, DEFAULT_DIFFICULTY, LEADERBOARD_LIMIT,
    get_difficulty, validate_difficulty_settings
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DIFFICULTY_SETTINGS', 'DEFAULT_DIFFICULTY', 'LEADERBOARD_LIMIT',
    'get_difficulty', 'validate_difficulty_settings'
]
