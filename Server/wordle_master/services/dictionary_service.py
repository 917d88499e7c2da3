"""
Dictionary Service

Supplies random secret words and validates guesses against a word list
loaded from a JSON array or a plain text file with one word per line.
"""

import json
import os
import random
import threading
from typing import Dict, FrozenSet, List, Optional

from ..config.game_settings import DEFAULT_DICTIONARY_FILE, WORD_LENGTH, get_word_statistics
from ..errors import DictionaryUninitializedError
from ..utils.game_logger import game_logger


class WordDictionary:
    """
    Word source for the game service.

    The dictionary is initialized lazily: the first call to generate_word()
    or is_word_valid() loads the default word list if initialize() has not
    been called yet.
    """

    def __init__(self, word_length: int = WORD_LENGTH, default_file: Optional[str] = None):
        self.word_length = word_length
        self.default_file = default_file or DEFAULT_DICTIONARY_FILE
        self._lock = threading.Lock()
        self._words: List[str] = []
        self._word_set: FrozenSet[str] = frozenset()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def word_count(self) -> int:
        return len(self._words)

    def initialize(self, filename: Optional[str] = None) -> None:
        """
        Loads the word list, replacing any words already loaded.

        Args:
            filename: Path to a .json or text word list; the packaged list if None

        Raises:
            FileNotFoundError: If the word list file does not exist
            json.JSONDecodeError: If a JSON word list is malformed
            DictionaryUninitializedError: If the file holds no usable words
        """
        words = self._load_word_list(filename or self.default_file)
        with self._lock:
            self._words = words
            self._word_set = frozenset(words)
            self._initialized = True

    def reset(self) -> None:
        """Forget the loaded words so the next use reloads the default list."""
        with self._lock:
            self._words = []
            self._word_set = frozenset()
            self._initialized = False

    def generate_word(self) -> str:
        """
        Returns a random word from the loaded list.

        Raises:
            DictionaryUninitializedError: If the word list is empty
        """
        self._ensure_initialized()
        words = self._words
        if not words:
            raise DictionaryUninitializedError()
        return random.choice(words)

    def is_word_valid(self, word: str) -> bool:
        """Case-insensitive membership test. Never raises."""
        if not word or not isinstance(word, str):
            return False
        try:
            self._ensure_initialized()
        except (OSError, ValueError, DictionaryUninitializedError) as e:
            game_logger.logger.error(f"Word dictionary could not be loaded: {e}")
            return False
        return word.strip().lower() in self._word_set

    def statistics(self) -> Dict:
        return get_word_statistics(self._words)

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            words = self._load_word_list(self.default_file)
            self._words = words
            self._word_set = frozenset(words)
            self._initialized = True

    def _load_word_list(self, path: str) -> List[str]:
        """
        Reads words from a file, keeping only alphabetic words of the
        configured length, lower-cased and de-duplicated in file order.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Word list file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            if path.endswith('.json'):
                raw_words = json.load(f)
                if not isinstance(raw_words, list):
                    raise ValueError("JSON word list must contain an array of words")
            else:
                raw_words = f.read().split()

        words: List[str] = []
        seen = set()
        skipped = 0
        for raw in raw_words:
            word = str(raw).strip().lower()
            if len(word) != self.word_length or not word.isalpha():
                skipped += 1
                continue
            if word not in seen:
                seen.add(word)
                words.append(word)

        if not words:
            raise DictionaryUninitializedError(f"No {self.word_length}-letter words found in {path}")

        game_logger.logger.info(
            f"Loaded {len(words)} words from {os.path.basename(path)} ({skipped} entries skipped)"
        )
        return words
