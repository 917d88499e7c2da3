"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import Attempt, Game, GameStatus, LetterHint

__all__ = ['Attempt', 'Game', 'GameStatus', 'LetterHint']
