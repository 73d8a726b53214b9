"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class GameStatus(Enum):
    """Round status. The only transition is PLAYING -> WON."""
    PLAYING = "playing"
    WON = "won"


class GuessOutcome(Enum):
    """Classification of an accepted guess."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


@dataclass
class GameRound:
    """Server-side round state. ``target`` never leaves the service while playing."""
    difficulty: str
    difficulty_label: str
    min: int
    max: int
    target: int
    attempts: int = 0
    status: GameStatus = GameStatus.PLAYING


@dataclass(frozen=True)
class LeaderboardEntry:
    """One completed, won round."""
    attempts: int
    difficulty: str
    date: str
    timestamp: int
    player_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attempts": self.attempts,
            "difficulty": self.difficulty,
            "date": self.date,
            "timestamp": self.timestamp,
            "playerName": self.player_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardEntry":
        if not isinstance(data, dict):
            raise TypeError(f"Leaderboard entry must be an object, got {type(data).__name__}")
        return cls(
            attempts=int(data["attempts"]),
            difficulty=str(data["difficulty"]),
            date=str(data.get("date", "")),
            timestamp=int(data.get("timestamp") or 0),
            player_name=data.get("playerName"),
        )


@dataclass
class GuessResult:
    """Outcome of one accepted guess."""
    guess: int
    outcome: GuessOutcome
    attempts: int
    status: GameStatus
    feedback: str
    entry: Optional[LeaderboardEntry] = None


@dataclass
class GameState:
    """Client-facing round snapshot (answer only included once the round is won)."""
    difficulty: str
    difficulty_label: str
    min: int
    max: int
    attempts: int
    status: str
    feedback: str
    can_change_difficulty: bool
    answer: Optional[int] = None
