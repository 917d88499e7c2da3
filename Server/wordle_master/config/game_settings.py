"""
Game Configuration Constants Module

This module defines the game rules consumed by the game service and the
word dictionary. All game parameters are centralized here to enable easy
modification.
"""

import os
from typing import Dict, Final, Iterable

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_DICTIONARY_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)
"""Packaged word list used when no dictionary file is configured."""


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Args:
        words: Words currently loaded in the dictionary

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the dictionary
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters with counts
    """
    word_list = list(words)
    if not word_list:
        return {"total_words": 0}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
