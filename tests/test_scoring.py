"""Tests for guess scoring, including duplicate-letter accounting."""

import random
import string
from collections import Counter

import pytest

from wordle_master.models.game import LetterHint
from wordle_master.services.scoring import score_word

G, Y, X = LetterHint.GREEN, LetterHint.YELLOW, LetterHint.GREY


def test_exact_match_is_all_green():
    assert score_word('blank', 'blank') == [G, G, G, G, G]


def test_no_common_letters_is_all_grey():
    assert score_word('hello', 'drawn') == [X, X, X, X, X]


@pytest.mark.parametrize('guess, secret, expected', [
    ('lolly', 'lulls', [G, X, G, G, X]),
    ('belle', 'level', [X, G, Y, Y, Y]),
    ('lemon', 'level', [G, G, X, X, X]),
    # green on the last 'e' takes the only 'e' in the secret
    ('geese', 'crane', [X, X, X, X, G]),
    ('eerie', 'crane', [X, X, Y, X, G]),
    # two 'e's in the secret: the two leftmost 'e's get yellow
    ('eerie', 'speed', [Y, Y, X, X, X]),
])
def test_duplicate_letters(guess, secret, expected):
    assert score_word(guess, secret) == expected


def test_unequal_lengths_rejected():
    with pytest.raises(ValueError):
        score_word('blanks', 'blank')


def test_credited_letters_never_exceed_secret_count():
    rng = random.Random(1234)
    alphabet = 'abcde'  # small alphabet forces plenty of duplicates

    for _ in range(2000):
        secret = ''.join(rng.choice(alphabet) for _ in range(5))
        guess = ''.join(rng.choice(alphabet) for _ in range(5))
        hints = score_word(guess, secret)

        assert len(hints) == 5
        credited = Counter(letter for letter, hint in zip(guess, hints) if hint != X)
        secret_counts = Counter(secret)
        for letter, count in credited.items():
            assert count <= secret_counts[letter]

        for i, hint in enumerate(hints):
            assert (hint == G) == (guess[i] == secret[i])


def test_works_for_other_word_lengths():
    word = ''.join(random.Random(7).choice(string.ascii_lowercase) for _ in range(7))
    assert score_word(word, word) == [G] * 7
