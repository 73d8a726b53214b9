"""
Services Package

Contains all business logic and service classes.
"""

from .account_service import AccountStore
from .errors import (
    GameError, MissingFieldsError, DuplicateEmailError, InvalidCredentialsError,
    UnknownDifficultyError, OutOfRangeError, RoundFinishedError, MalformedPersistedDataError
)
from .game_service import GameSession
from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage, create_storage

__all__ = [
    'AccountStore', 'GameSession',
    'KeyValueStorage', 'MemoryStorage', 'JsonFileStorage', 'create_storage',
    'GameError', 'MissingFieldsError', 'DuplicateEmailError', 'InvalidCredentialsError',
    'UnknownDifficultyError', 'OutOfRangeError', 'RoundFinishedError', 'MalformedPersistedDataError'
]
