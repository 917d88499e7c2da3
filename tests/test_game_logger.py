"""Tests for the structured game logger."""

import json

import pytest
from flask import Flask, request

from wordle_master.utils.game_logger import GameLogger, game_logger


@pytest.fixture()
def logger(tmp_path):
    yield GameLogger(str(tmp_path / 'logs'))
    # both instances share one logging.Logger; hand it back to the module logger
    for handler in game_logger.logger.handlers:
        handler.close()
    game_logger._setup_logger()


def read_entries(logger):
    for handler in logger.logger.handlers:
        handler.flush()
    entries = []
    for log_file in sorted(logger.log_dir.glob('game_log_*.log')):
        for line in log_file.read_text(encoding='utf-8').splitlines():
            entries.append(json.loads(line.split(' | ', 2)[2]))
    return entries


def test_engine_event_has_no_client(logger):
    logger.log_game_event('g1', 'game_won', attempts_used=3)

    entry = read_entries(logger)[-1]
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'game_won'
    assert entry['user'] == {'source': 'engine'}
    assert entry['details'] == {'game_id': 'g1', 'attempts_used': 3}


def test_request_event_records_client(logger):
    logger.log_game_event('g1', 'game_created', user_ip='10.0.0.7')

    entry = read_entries(logger)[-1]
    assert entry['user'] == {'source': 'http', 'user_ip': '10.0.0.7'}


def test_user_action_records_client(logger):
    app = Flask(__name__)
    with app.test_request_context('/api/games', method='POST',
                                  headers={'User-Agent': 'pytest-agent'},
                                  environ_base={'REMOTE_ADDR': '10.0.0.8'}):
        logger.log_user_action(request, 'new_game')

    entry = read_entries(logger)[-1]
    assert entry['user'] == {'source': 'http', 'user_ip': '10.0.0.8', 'user_agent': 'pytest-agent'}
    assert entry['details']['method'] == 'POST'


def test_secret_word_masked_in_responses(logger):
    data = {'success': True, 'game': {'Id': 'g1', 'SecretWord': 'blank'}}

    sanitized = logger._sanitize_response_data(data)

    assert sanitized['game']['SecretWord'] == '*****'
    assert data['game']['SecretWord'] == 'blank'
