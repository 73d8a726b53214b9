"""
Account Data Models

Contains account-related data structures and their persisted JSON form.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass
class BestScore:
    """Fewest-attempts win recorded for an account."""
    attempts: int
    difficulty: str
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {"attempts": self.attempts, "difficulty": self.difficulty, "date": self.date}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BestScore":
        return cls(
            attempts=int(data["attempts"]),
            difficulty=str(data["difficulty"]),
            date=str(data.get("date", "")),
        )


@dataclass
class Account:
    """
    Registered user's durable profile and game statistics.

    ``password`` is ``None`` on every record handed out of the account store;
    only the persisted account list carries it. ``to_dict()`` omits the
    ``password`` key entirely when it is ``None``, so the serialized form of
    a returned record (session key, API responses) has no password field.
    """
    id: str
    name: str
    email: str
    password: Optional[str]
    created_at: str
    games_played: int = 0
    best_score: Optional[BestScore] = None

    def without_password(self) -> "Account":
        return replace(self, password=None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the persisted store."""
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at,
            "gamesPlayed": self.games_played,
            "bestScore": self.best_score.to_dict() if self.best_score else None,
        }
        if self.password is not None:
            data["password"] = self.password
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        """
        Build an account from its persisted form.

        Raises:
            KeyError, TypeError, ValueError: If the record is missing fields
                or has values of the wrong shape
        """
        if not isinstance(data, dict):
            raise TypeError(f"Account record must be an object, got {type(data).__name__}")

        best_score = data.get("bestScore")
        games_played = int(data.get("gamesPlayed") or 0)
        if games_played < 0:
            raise ValueError("gamesPlayed cannot be negative")

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            password=data.get("password"),
            created_at=str(data.get("createdAt", "")),
            games_played=games_played,
            best_score=BestScore.from_dict(best_score) if best_score else None,
        )
