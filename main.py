"""
Number Guessing Game Server - Main Entry Point

This is the main entry point for the local game server.
It builds the Flask application (services included) and starts it.
"""

from guessing_game import create_app
from guessing_game.config import Config
from guessing_game.utils.game_logger import game_logger


def main():
    """Main function to create the application and start the server."""
    try:
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        storage_path = Config.STORAGE_PATH or 'in-memory storage'
        game_logger.logger.info(f"Number Guessing Game starting - storage: {storage_path}")

        print(f"\nStarting Number Guessing Game on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Storage: {storage_path}")
        print(f"Accounts stored: {len(app.account_store.list_accounts())}")
        print("=" * 50)

        # Single-process, single-threaded: the store has no locking
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=False)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Number Guessing Game shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
