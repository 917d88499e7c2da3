"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify

from ..errors import (
    GameFinishedError,
    GameNotFoundError,
    InvalidIdError,
    InvalidWordError,
    OutOfTurnsError,
)
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def get_game_service():
    """Get the game service attached to the running application."""
    return getattr(current_app, 'game_service', None)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_response(action, error, game_id=None):
    """Translate a game error into a logged JSON error response."""
    error_response = {
        'success': False,
        'error': str(error)
    }

    if isinstance(error, (InvalidWordError, InvalidIdError)):
        status_code = 400
    elif isinstance(error, GameNotFoundError):
        status_code = 404
    elif isinstance(error, (GameFinishedError, OutOfTurnsError)):
        status_code = 409
        game_service = get_game_service()
        try:
            error_response['state'] = game_service.status_report(game_service.retrieve(game_id))
        except GameNotFoundError:
            pass  # deleted since the error was raised
    else:
        status_code = 500
        game_logger.log_error(request, error, action, game_id)

    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status_code


@game_bp.route('/games', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        data = request.get_json(silent=True) or {}
        secret_word = data.get('secret_word') or ''

        game_logger.log_user_action(request, 'new_game', secret_supplied=bool(secret_word))

        game = game_service.create(secret_word)

        response_data = {
            'success': True,
            'game_id': game.id,
            'state': game_service.status_report(game)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game.id,
            word_length=game_service.word_length, max_attempts=game_service.max_attempts
        )

        return jsonify(response_data), 201

    except Exception as e:
        return _error_response('new_game', e)


@game_bp.route('/games/<game_id>', methods=['GET'])
def get_state(game_id):
    """Get the status summary of a game."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        game = game_service.retrieve(game_id)
        response_data = {
            'success': True,
            'state': game_service.status_report(game)
        }

        game_logger.log_server_response(request, 'get_state', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e, game_id)


@game_bp.route('/games/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and scoring."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.play(game_id, guess)

        response_data = {
            'success': True,
            'result': result
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, game_status=result.get('GameStatus')
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response('submit_guess', e, game_id)


@game_bp.route('/games/<game_id>/resign', methods=['POST'])
def resign(game_id):
    """End a game before it is won or lost."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'resign', game_id)

        response_data = {
            'success': True,
            'state': game_service.resign(game_id)
        }

        game_logger.log_server_response(request, 'resign', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('resign', e, game_id)


@game_bp.route('/games/<game_id>/describe', methods=['GET'])
def describe(game_id):
    """Full game dump including the secret word. Only served in debug or testing."""
    if not (current_app.debug or current_app.testing):
        return jsonify({'success': False, 'error': 'Not found'}), 404

    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'describe', game_id)

        response_data = {
            'success': True,
            'game': game_service.describe(game_id)
        }

        game_logger.log_server_response(request, 'describe', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('describe', e, game_id)


@game_bp.route('/games/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        game_service.delete(game_id)

        response_data = {
            'success': True
        }

        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        return _error_response('delete_game', e, game_id)


@game_bp.route('/games', methods=['DELETE'])
def purge_games():
    """Delete every game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'purge_games')

        game_service.store.purge_all()
        game_service.forget_all_games()

        response_data = {
            'success': True
        }

        game_logger.log_server_response(request, 'purge_games', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('purge_games', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.store.count() if game_service else 0,
            'dictionary': game_service.dictionary.statistics() if game_service else {}
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
