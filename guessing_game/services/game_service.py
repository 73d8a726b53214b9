"""
Game Service

Contains the core game logic: one number-guessing round at a time plus the
persisted top-10 leaderboard.
"""

import random
from datetime import datetime
from typing import Callable, List, Optional

from ..config.game_settings import (
    DEFAULT_DIFFICULTY, LEADERBOARD_DISPLAY_LIMIT, LEADERBOARD_KEY, LEADERBOARD_LIMIT, get_difficulty
)
from ..models.game import GameRound, GameState, GameStatus, GuessOutcome, GuessResult, LeaderboardEntry
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_int_prefix
from .account_service import AccountStore, utc_now
from .errors import MalformedPersistedDataError, OutOfRangeError, RoundFinishedError, UnknownDifficultyError
from .storage import KeyValueStorage


class GameSession:
    """
    Core game service managing the current round and the leaderboard.

    This class handles:
    - Target selection for the chosen difficulty tier
    - Guess parsing, range validation and evaluation
    - Leaderboard bookkeeping for won rounds
    - Reporting wins to the account store when someone is logged in
    """

    def __init__(self,
                 storage: KeyValueStorage,
                 account_store: Optional[AccountStore] = None,
                 rng=None,
                 clock: Callable[[], datetime] = utc_now,
                 difficulty: str = DEFAULT_DIFFICULTY):
        """
        Load the leaderboard and start the first round.

        Args:
            storage: Key-value collaborator holding the leaderboard
            account_store: Receives win reports; optional
            rng: Object with ``randint(a, b)``, inclusive on both ends
            clock: Returns the current time as an aware datetime
            difficulty: Tier for the first round
        """
        self.storage = storage
        self.account_store = account_store
        self.rng = rng or random.Random()
        self.clock = clock
        self.round: Optional[GameRound] = None
        self.feedback = ""
        self._leaderboard: List[LeaderboardEntry] = self._load_leaderboard()
        self.start_round(difficulty)

    @property
    def leaderboard(self) -> List[LeaderboardEntry]:
        """Best rounds ever recorded, fewest attempts first."""
        return list(self._leaderboard)

    @property
    def can_change_difficulty(self) -> bool:
        """False once the first guess of a round in progress has been made."""
        return not (self.round.status == GameStatus.PLAYING and self.round.attempts > 0)

    def top_scores(self, limit: int = LEADERBOARD_DISPLAY_LIMIT) -> List[LeaderboardEntry]:
        return self._leaderboard[:limit]

    def start_round(self, difficulty: Optional[str] = None) -> GameState:
        """
        Start a fresh round, replacing the current one.

        Args:
            difficulty: Tier name; defaults to the current round's tier

        Raises:
            UnknownDifficultyError: If the tier does not exist
        """
        if difficulty is None:
            difficulty = self.round.difficulty if self.round else DEFAULT_DIFFICULTY

        try:
            tier = get_difficulty(difficulty)
        except KeyError:
            raise UnknownDifficultyError(difficulty) from None

        self.round = GameRound(
            difficulty=difficulty,
            difficulty_label=tier["name"],
            min=tier["min"],
            max=tier["max"],
            target=self.rng.randint(tier["min"], tier["max"]),
        )
        self.feedback = (
            f"I'm thinking of a number between {tier['min']} and {tier['max']}. Can you guess it?"
        )
        game_logger.log_game_event('round_started', username=self._player_name(), difficulty=difficulty)
        return self.get_state()

    def submit_guess(self, raw_input) -> GuessResult:
        """
        Processes a guess and updates the round.

        Args:
            raw_input: String or int typed by the player

        Returns:
            GuessResult describing the outcome

        Raises:
            RoundFinishedError: If the round is already won
            OutOfRangeError: If the input is not an integer inside the range;
                the round is left untouched
        """
        game_round = self.round
        if game_round.status == GameStatus.WON:
            raise RoundFinishedError()

        guess = parse_int_prefix(raw_input)
        if guess is None or guess < game_round.min or guess > game_round.max:
            error = OutOfRangeError(game_round.min, game_round.max)
            self.feedback = str(error)
            raise error

        game_round.attempts += 1

        entry = None
        if guess == game_round.target:
            outcome = GuessOutcome.CORRECT
            game_round.status = GameStatus.WON
            self.feedback = f"Congratulations! You guessed it in {game_round.attempts} attempts!"
            entry = self._record_win(game_round)
        elif guess < game_round.target:
            outcome = GuessOutcome.TOO_LOW
            self.feedback = "Too low! Try a higher number."
        else:
            outcome = GuessOutcome.TOO_HIGH
            self.feedback = "Too high! Try a lower number."

        return GuessResult(
            guess=guess,
            outcome=outcome,
            attempts=game_round.attempts,
            status=game_round.status,
            feedback=self.feedback,
            entry=entry,
        )

    def get_state(self) -> GameState:
        """Current round snapshot; the answer is only revealed once won."""
        game_round = self.round
        return GameState(
            difficulty=game_round.difficulty,
            difficulty_label=game_round.difficulty_label,
            min=game_round.min,
            max=game_round.max,
            attempts=game_round.attempts,
            status=game_round.status.value,
            feedback=self.feedback,
            can_change_difficulty=self.can_change_difficulty,
            answer=game_round.target if game_round.status == GameStatus.WON else None,
        )

    def _record_win(self, game_round: GameRound) -> LeaderboardEntry:
        now = self.clock()
        date = now.date().isoformat()
        entry = LeaderboardEntry(
            attempts=game_round.attempts,
            difficulty=game_round.difficulty_label,
            date=date,
            timestamp=int(now.timestamp() * 1000),
            player_name=self._player_name(),
        )

        # sorted() is stable: earlier rounds win ties
        self._leaderboard = sorted(self._leaderboard + [entry], key=lambda e: e.attempts)[:LEADERBOARD_LIMIT]
        self.storage.write_json(LEADERBOARD_KEY, [e.to_dict() for e in self._leaderboard])

        if self.account_store is not None and self.account_store.is_authenticated:
            self.account_store.update_stats(game_round.attempts, game_round.difficulty_label, date)

        game_logger.log_game_event(
            'game_won', username=entry.player_name,
            attempts=game_round.attempts, difficulty=game_round.difficulty, target=game_round.target
        )
        return entry

    def _player_name(self) -> Optional[str]:
        if self.account_store is None or self.account_store.current_user is None:
            return None
        return self.account_store.current_user.name

    def _load_leaderboard(self) -> List[LeaderboardEntry]:
        """Read the leaderboard. Malformed data reads as an empty list."""
        try:
            raw = self.storage.read_json(LEADERBOARD_KEY)
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise MalformedPersistedDataError(LEADERBOARD_KEY, "expected a list")
            try:
                entries = [LeaderboardEntry.from_dict(item) for item in raw]
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedPersistedDataError(LEADERBOARD_KEY, str(e)) from e
        except MalformedPersistedDataError as e:
            game_logger.logger.warning(f"Ignoring stored leaderboard: {e}")
            return []

        return sorted(entries, key=lambda e: e.attempts)[:LEADERBOARD_LIMIT]
