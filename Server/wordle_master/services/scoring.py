"""
Guess Scoring

Implements the Wordle letter evaluation algorithm with duplicate-letter
accounting: a letter is credited Green or Yellow at most as many times as it
occurs in the secret word.
"""

from typing import List, Optional

from ..models.game import LetterHint


def score_word(try_word: str, secret_word: str) -> List[LetterHint]:
    """
    Scores a guess against the secret word.

    Greens are assigned first. Remaining occurrences of each letter are then
    credited Yellow from left to right while unmatched copies of that letter
    are left in the secret; the rest are Grey.

    Args:
        try_word: Normalized guess
        secret_word: Normalized secret word of the same length

    Returns:
        List[LetterHint]: One hint per letter position

    Raises:
        ValueError: If the two words differ in length
    """
    if len(try_word) != len(secret_word):
        raise ValueError(
            f"Cannot score '{try_word}' against a {len(secret_word)}-letter secret"
        )

    result: List[Optional[LetterHint]] = []

    # Working copy of the secret; matched letters are consumed
    secret_chars: List[Optional[str]] = list(secret_word)

    # First pass: exact position matches
    for i, letter in enumerate(try_word):
        if letter == secret_chars[i]:
            result.append(LetterHint.GREEN)
            secret_chars[i] = None
        else:
            result.append(None)

    # Second pass: present letters, budgeted by what is left unconsumed
    for i, letter in enumerate(try_word):
        if result[i] is not None:
            continue
        if letter in secret_chars:
            result[i] = LetterHint.YELLOW
            secret_chars[secret_chars.index(letter)] = None
        else:
            result[i] = LetterHint.GREY

    return [hint for hint in result if hint is not None]
