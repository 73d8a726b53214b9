"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_session
from .helpers import get_user_identity, parse_int_prefix
from .game_logger import game_logger

__all__ = ['require_session', 'get_user_identity', 'parse_int_prefix', 'game_logger']
