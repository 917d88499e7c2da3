"""
Wordle Master Server - Main Entry Point

This is the main entry point for the Wordle Master server.
It initializes the word dictionary, the game store and the game service in
order, then starts the Flask application.
"""

import os
from wordle_master import create_app
from wordle_master.config import config
from wordle_master.services.dictionary_service import WordDictionary
from wordle_master.services.game_service import GameService
from wordle_master.services.game_store import GameStore
from wordle_master.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('FLASK_ENV', 'default'), config['default'])

    try:
        print("Initializing services...")

        dictionary = WordDictionary(word_length=config_class.WORD_LENGTH)
        dictionary.initialize(config_class.DICTIONARY_FILE)
        print(f"✓ Word dictionary loaded ({dictionary.word_count} words)")

        store = GameStore()
        print("✓ Game store initialized")

        game_service = GameService(
            store=store,
            dictionary=dictionary,
            word_length=config_class.WORD_LENGTH,
            max_attempts=config_class.MAX_ATTEMPTS
        )
        print("✓ Game service initialized")

        print("Creating Flask application...")
        app = create_app(config_class, game_service=game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Master Server starting")

        print(f"\nStarting Wordle Master Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Master Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
