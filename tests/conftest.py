import os
import sys
from datetime import datetime, timezone

import pytest

# Ensure the project root (containing the `guessing_game` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from guessing_game import create_app
from guessing_game.config import TestingConfig
from guessing_game.services import AccountStore, GameSession, MemoryStorage


FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class ScriptedRandom:
    """randint stand-in returning queued targets, then ``default``."""

    def __init__(self, *values, default=42):
        self.values = list(values)
        self.default = default
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture()
def clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def rng():
    return ScriptedRandom(default=42)


@pytest.fixture()
def account_store(storage, clock):
    return AccountStore(storage, clock=clock)


@pytest.fixture()
def game_session(storage, account_store, rng, clock):
    return GameSession(storage, account_store=account_store, rng=rng, clock=clock)


@pytest.fixture()
def flask_app(storage, rng, clock):
    return create_app(TestingConfig, storage=storage, rng=rng, clock=clock)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
