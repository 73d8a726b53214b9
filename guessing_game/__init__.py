"""
Number Guessing Game Application Package

Local account store, number-guessing rounds and a persisted leaderboard,
exposed to a browser front end through a small JSON API.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, storage=None, rng=None, clock=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        storage: Key-value storage; built from STORAGE_PATH when omitted
        rng: Random collaborator passed to the game session
        clock: Time source passed to both services

    Returns:
        Flask application instance with the services attached
    """
    from .services.account_service import AccountStore, utc_now
    from .services.game_service import GameSession
    from .services.storage import create_storage
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    CORS(app)

    # Build services around one shared storage
    if storage is None:
        storage = create_storage(app.config.get('STORAGE_PATH'))
    clock = clock or utc_now

    app.account_store = AccountStore(storage, clock=clock)
    if app.config.get('SEED_DEMO_ACCOUNT'):
        app.account_store.seed_demo_account()
    app.game_session = GameSession(
        storage,
        account_store=app.account_store,
        rng=rng,
        clock=clock,
        difficulty=app.config.get('DEFAULT_DIFFICULTY', 'medium'),
    )

    # Register blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.game_controller import game_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
