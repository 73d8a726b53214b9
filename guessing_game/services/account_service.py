"""
Account Service

Handles local accounts: registration, login, logout and per-account game
statistics. Accounts and the current session live in the injected key-value
storage.

Passwords are stored and compared in plain text. This is a mock local login
for a single-player game, not an authentication system.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..config.game_settings import CURRENT_USER_KEY, DEMO_ACCOUNT, USERS_KEY
from ..models.account import Account, BestScore
from ..utils.game_logger import game_logger
from .errors import (
    DuplicateEmailError, InvalidCredentialsError, MalformedPersistedDataError, MissingFieldsError
)
from .storage import KeyValueStorage

SessionListener = Callable[[Optional[Account]], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AccountStore:
    """
    Account service owning the account list and the current session pointer.

    This class handles:
    - Registration with unique emails
    - Exact-match login and logout
    - Games played / best score bookkeeping for the logged-in account
    - Change notification for anything displaying the session
    """

    def __init__(self, storage: KeyValueStorage, clock: Callable[[], datetime] = utc_now):
        """
        Initialize the account store and restore any persisted session.

        Args:
            storage: Key-value collaborator holding accounts and the session
            clock: Returns the current time as an aware datetime
        """
        self.storage = storage
        self.clock = clock
        self._listeners: List[SessionListener] = []
        self._current_user: Optional[Account] = self._load_session()

    @property
    def current_user(self) -> Optional[Account]:
        """The logged-in account without its password, or None."""
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a callback invoked with the new session after each change.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def register(self, name: str, email: str, password: str) -> Account:
        """
        Register a new account and log it in.

        Args:
            name: Display name
            email: Login email, unique across accounts
            password: Plain text password

        Returns:
            The new account without its password

        Raises:
            MissingFieldsError: If any field is blank
            DuplicateEmailError: If the email is already registered
        """
        if not _filled(name) or not _filled(email) or not _filled(password):
            raise MissingFieldsError()

        accounts = self._load_accounts()
        if any(account.email == email for account in accounts):
            game_logger.log_game_event('register_rejected', email=email, reason='duplicate_email')
            raise DuplicateEmailError(email)

        account = Account(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password=password,
            created_at=self.clock().isoformat(),
            games_played=0,
            best_score=None,
        )
        accounts.append(account)
        self._save_accounts(accounts)
        self._set_session(account)

        game_logger.log_game_event('user_registered', username=name, user_id=account.id)
        return self._current_user

    def login(self, email: str, password: str) -> Account:
        """
        Log in the account matching both email and password exactly.

        Returns:
            The account without its password

        Raises:
            MissingFieldsError: If email or password is blank
            InvalidCredentialsError: If no account matches
        """
        if not _filled(email) or not _filled(password):
            raise MissingFieldsError()

        match = next(
            (a for a in self._load_accounts() if a.email == email and a.password == password),
            None
        )
        if match is None:
            game_logger.log_game_event('login_failed', email=email)
            raise InvalidCredentialsError()

        self._set_session(match)
        game_logger.log_game_event('user_logged_in', username=match.name, user_id=match.id)
        return self._current_user

    def logout(self) -> None:
        """Clear the current session. Always succeeds."""
        previous = self._current_user
        self._current_user = None
        self.storage.remove(CURRENT_USER_KEY)
        if previous is not None:
            game_logger.log_game_event('user_logged_out', username=previous.name, user_id=previous.id)
        self._notify()

    def update_stats(self, attempts: int, difficulty: str, date: str) -> Optional[Account]:
        """
        Record a won round for the logged-in account.

        Increments games played and replaces the best score only when
        ``attempts`` is strictly lower than the stored one. No-op without a
        session, or when the session's account is no longer stored.

        Returns:
            The refreshed session account, or None if nothing was updated
        """
        if self._current_user is None:
            return None

        accounts = self._load_accounts()
        index = next((i for i, a in enumerate(accounts) if a.id == self._current_user.id), None)
        if index is None:
            return None

        account = accounts[index]
        account.games_played += 1
        if account.best_score is None or attempts < account.best_score.attempts:
            account.best_score = BestScore(attempts=attempts, difficulty=difficulty, date=date)

        self._save_accounts(accounts)
        self._set_session(account)
        return self._current_user

    def list_accounts(self) -> List[Account]:
        """Every stored account, passwords stripped."""
        return [account.without_password() for account in self._load_accounts()]

    def seed_demo_account(self) -> bool:
        """
        Store the demo account when no accounts exist yet.

        Returns:
            True if the demo account was written
        """
        accounts = self._load_accounts()
        if accounts:
            return False

        now = self.clock()
        demo = Account.from_dict({
            **DEMO_ACCOUNT,
            "createdAt": now.isoformat(),
            "bestScore": {**DEMO_ACCOUNT["bestScore"], "date": now.date().isoformat()},
        })
        self._save_accounts([demo])
        game_logger.log_game_event('demo_account_seeded', user_id=demo.id)
        return True

    def _set_session(self, account: Account) -> None:
        self._current_user = account.without_password()
        self.storage.write_json(CURRENT_USER_KEY, self._current_user.to_dict())
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current_user)

    def _load_accounts(self) -> List[Account]:
        """Read the account list. Malformed data reads as an empty list."""
        try:
            raw = self.storage.read_json(USERS_KEY)
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise MalformedPersistedDataError(USERS_KEY, "expected a list")
            try:
                return [Account.from_dict(item) for item in raw]
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedPersistedDataError(USERS_KEY, str(e)) from e
        except MalformedPersistedDataError as e:
            game_logger.logger.warning(f"Ignoring stored accounts: {e}")
            return []

    def _save_accounts(self, accounts: List[Account]) -> None:
        self.storage.write_json(USERS_KEY, [account.to_dict() for account in accounts])

    def _load_session(self) -> Optional[Account]:
        """Read the persisted session. Malformed data reads as logged out."""
        try:
            raw = self.storage.read_json(CURRENT_USER_KEY)
            if raw is None:
                return None
            try:
                return Account.from_dict(raw).without_password()
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedPersistedDataError(CURRENT_USER_KEY, str(e)) from e
        except MalformedPersistedDataError as e:
            game_logger.logger.warning(f"Ignoring stored session: {e}")
            return None


def _filled(value) -> bool:
    return isinstance(value, str) and bool(value.strip())
