"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class GameStatus(Enum):
    """Lifecycle state of a game. Only IN_PLAY accepts further guesses."""
    IN_PLAY = "InPlay"
    WON = "Won"
    LOST = "Lost"
    RESIGNED = "Resigned"


class LetterHint(Enum):
    """Per-letter evaluation of a guess."""
    GREEN = "Green"    # right letter, right position
    YELLOW = "Yellow"  # right letter, wrong position
    GREY = "Grey"      # letter not creditable at this position


@dataclass
class Attempt:
    """A single guess recorded against a game."""
    try_word: str = ""
    is_valid_word: bool = False
    hints: List[LetterHint] = field(default_factory=list)

    def is_winner(self) -> bool:
        return bool(self.hints) and all(hint == LetterHint.GREEN for hint in self.hints)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "TryWord": self.try_word,
            "IsValidWord": self.is_valid_word,
            "TryResult": [hint.value for hint in self.hints]
        }


@dataclass
class Game:
    """Server-side game record, the value type held by the game store."""
    id: str
    secret_word: str
    status: GameStatus = GameStatus.IN_PLAY
    attempts: List[Attempt] = field(default_factory=list)

    @property
    def is_in_play(self) -> bool:
        return self.status == GameStatus.IN_PLAY

    def to_dict(self) -> Dict[str, Any]:
        """Full representation, including the secret word."""
        return {
            "Id": self.id,
            "Status": self.status.value,
            "SecretWord": self.secret_word,
            "Attempts": [attempt.to_dict() for attempt in self.attempts]
        }
