"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary_service import WordDictionary
from .game_service import GameService
from .game_store import GameStore, get_game_store, reset_game_store
from .scoring import score_word

__all__ = [
    'WordDictionary',
    'GameService',
    'GameStore', 'get_game_store', 'reset_game_store',
    'score_word'
]
