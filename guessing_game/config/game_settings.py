"""
Game Configuration Constants Module

This module defines all game configuration constants: difficulty tiers,
leaderboard size and the storage keys used by the persisted store.
All game parameters are centralized here to enable easy modification

"""

from typing import Dict, Final


# Difficulty tiers: inclusive integer ranges plus the label shown to players
DIFFICULTY_SETTINGS: Final[Dict[str, Dict]] = {
    "easy": {"min": 1, "max": 50, "name": "Easy (1-50)"},
    "medium": {"min": 1, "max": 100, "name": "Medium (1-100)"},
    "hard": {"min": 1, "max": 200, "name": "Hard (1-200)"},
}

DEFAULT_DIFFICULTY: Final[str] = "medium"

LEADERBOARD_LIMIT: Final[int] = 10
"""
Number of best rounds kept on the leaderboard.
Type: Final[int] - Immutable to prevent accidental modification
"""

LEADERBOARD_DISPLAY_LIMIT: Final[int] = 5

# Storage keys (same names the browser build wrote to localStorage)
USERS_KEY: Final[str] = "users"
CURRENT_USER_KEY: Final[str] = "currentUser"
LEADERBOARD_KEY: Final[str] = "numberGuessingLeaderboard"

# Seed record used when SEED_DEMO_ACCOUNT is enabled and no accounts exist
DEMO_ACCOUNT: Final[Dict] = {
    "id": "demo-user",
    "name": "Demo User",
    "email": "demo@example.com",
    "password": "demo123",
    "gamesPlayed": 5,
    "bestScore": {"attempts": 3, "difficulty": "Medium (1-100)"},
}


def get_difficulty(difficulty: str) -> Dict:
    """
    Look up a difficulty tier by name.

    Raises:
        KeyError: If the difficulty is not one of the configured tiers
    """
    if not isinstance(difficulty, str):
        raise KeyError(difficulty)
    return DIFFICULTY_SETTINGS[difficulty]


def validate_difficulty_settings() -> bool:
    """
    Validates the integrity and consistency of the difficulty tiers.

    This function performs validation to ensure:
    1. Bounds validation: every tier has integer bounds with min <= max
    2. Label validation: every tier has a non-empty, unique display name
    3. Default validation: DEFAULT_DIFFICULTY names an existing tier

    Returns:
        bool: True if the settings pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not DIFFICULTY_SETTINGS:
        raise ValueError("Difficulty settings cannot be empty")

    for key, tier in DIFFICULTY_SETTINGS.items():
        low, high = tier.get("min"), tier.get("max")
        if not isinstance(low, int) or not isinstance(high, int):
            raise ValueError(f"Difficulty '{key}' must have integer bounds")
        if low > high:
            raise ValueError(f"Difficulty '{key}' has min {low} greater than max {high}")
        if not tier.get("name"):
            raise ValueError(f"Difficulty '{key}' has no display name")

    names = [tier["name"] for tier in DIFFICULTY_SETTINGS.values()]
    if len(names) != len(set(names)):
        raise ValueError(f"Duplicate difficulty names found: {names}")

    if DEFAULT_DIFFICULTY not in DIFFICULTY_SETTINGS:
        raise ValueError(f"Default difficulty '{DEFAULT_DIFFICULTY}' is not configured")

    return True


# Module initialization: Validate configuration on import
if __name__ == "__main__":

    try:
        validate_difficulty_settings()
        print(" Difficulty settings validation passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
