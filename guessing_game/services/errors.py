"""
Service Errors

Exceptions raised by the account store and game session. All of them are
recoverable at the calling boundary.
"""


class GameError(Exception):
    """Base class for every error raised by the game services."""


class MissingFieldsError(GameError):
    """A required form field was blank."""

    def __init__(self, message: str = "Please fill in all fields"):
        super().__init__(message)


class DuplicateEmailError(GameError):
    """An account with this email is already registered."""

    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


class InvalidCredentialsError(GameError):
    """No stored account matches the given email and password."""

    def __init__(self):
        super().__init__("Invalid email or password")


class UnknownDifficultyError(GameError):
    """The requested difficulty tier does not exist."""

    def __init__(self, difficulty: str):
        super().__init__(f"Unknown difficulty '{difficulty}'")
        self.difficulty = difficulty


class OutOfRangeError(GameError):
    """Guess is not an integer inside the active range. The round continues."""

    def __init__(self, low: int, high: int):
        super().__init__(f"Please enter a valid number between {low} and {high}")
        self.min = low
        self.max = high


class RoundFinishedError(GameError):
    """A guess was submitted to a round that is already won."""

    def __init__(self):
        super().__init__("Round is already over")


class MalformedPersistedDataError(GameError):
    """A stored value could not be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored value for '{key}' is malformed: {reason}")
        self.key = key
