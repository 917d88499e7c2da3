"""
Wordle Master Application Package

A single-player Wordle game engine served over a small JSON API. The package
is split into configuration, models, services (word dictionary, game store,
scoring, game service) and HTTP controllers.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Ready GameService to serve; built from config_class if None

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    if game_service is None:
        game_service = build_game_service(config_class)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Store the game service for use in controllers
    app.game_service = game_service

    return app


def build_game_service(config_class=Config):
    """
    Constructs the game service and its collaborators in startup order:
    word dictionary, then game store, then the service itself.
    """
    from .services.dictionary_service import WordDictionary
    from .services.game_service import GameService
    from .services.game_store import get_game_store

    dictionary = WordDictionary(word_length=config_class.WORD_LENGTH)
    dictionary.initialize(config_class.DICTIONARY_FILE)

    return GameService(
        store=get_game_store(),
        dictionary=dictionary,
        word_length=config_class.WORD_LENGTH,
        max_attempts=config_class.MAX_ATTEMPTS
    )
