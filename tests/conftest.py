import os
import sys
import tempfile
import pytest

# Ensure the server root (containing the `wordle_master` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..', 'Server'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

# Keep test log files out of the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_master_logs_'))

from wordle_master import create_app
from wordle_master.config import TestingConfig
from wordle_master.services.dictionary_service import WordDictionary
from wordle_master.services.game_service import GameService
from wordle_master.services.game_store import GameStore


TEST_WORDS = [
    'blank', 'lulls', 'lolly', 'crane', 'hello', 'about',
    'speed', 'geese', 'eerie', 'level', 'lemon', 'belle',
    'anime', 'drawn', 'lives', 'nodes',
]

# Six valid guesses that never match the secret 'blank'
LOSING_GUESSES = ['crane', 'hello', 'about', 'speed', 'geese', 'eerie']


@pytest.fixture()
def word_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(TEST_WORDS + ['toolong', 'abc', 'x1y2z']) + '\n', encoding='utf-8')
    return str(path)


@pytest.fixture()
def dictionary(word_file):
    words = WordDictionary()
    words.initialize(word_file)
    return words


@pytest.fixture()
def store():
    return GameStore()


@pytest.fixture()
def game_service(store, dictionary):
    return GameService(store=store, dictionary=dictionary)


@pytest.fixture()
def flask_app(game_service):
    return create_app(TestingConfig, game_service=game_service)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
