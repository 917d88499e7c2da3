"""
Utilities Package

Contains utility helpers shared across the application.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
