"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .account import Account, BestScore
from .game import GameRound, GameState, GameStatus, GuessOutcome, GuessResult, LeaderboardEntry

__all__ = [
    'Account', 'BestScore',
    'GameRound', 'GameState', 'GameStatus', 'GuessOutcome', 'GuessResult', 'LeaderboardEntry'
]
