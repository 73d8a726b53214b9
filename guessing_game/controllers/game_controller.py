"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify, current_app
from dataclasses import asdict
from ..services.errors import OutOfRangeError, RoundFinishedError, UnknownDifficultyError
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _state_response(game_session, **extra):
    return {
        'success': True,
        'state': asdict(game_session.get_state()),
        **extra
    }


@game_bp.route('/game/state', methods=['GET'])
def get_state():
    """Get the current round state."""
    response_data = _state_response(current_app.game_session)
    game_logger.log_server_response(request, 'get_state', True, response_data)
    return jsonify(response_data)


@game_bp.route('/game/new', methods=['POST'])
def new_game():
    """Start a new round, optionally switching difficulty."""
    try:
        game_session = current_app.game_session

        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            error_response = {
                'success': False,
                'error': 'Request body must be a JSON object'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        difficulty = data.get('difficulty') or game_session.round.difficulty

        # Log user action
        game_logger.log_user_action(request, 'new_game', difficulty=difficulty)

        # Switching tier is locked once the first guess of a round is in
        if difficulty != game_session.round.difficulty and not game_session.can_change_difficulty:
            error_response = {
                'success': False,
                'error': 'Difficulty cannot be changed after the first guess'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 409

        game_session.start_round(difficulty)
        response_data = _state_response(game_session)
        game_logger.log_server_response(request, 'new_game', True, response_data)
        return jsonify(response_data)

    except UnknownDifficultyError as e:
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400
    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/guess', methods=['POST'])
def make_guess():
    """Submit a guess for the current round."""
    try:
        game_session = current_app.game_session

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']

        # Log user action
        game_logger.log_user_action(request, 'submit_guess', guess=guess)

        result = game_session.submit_guess(guess)
        response_data = _state_response(
            game_session,
            result={
                'guess': result.guess,
                'outcome': result.outcome.value,
                'attempts': result.attempts,
                'entry': result.entry.to_dict() if result.entry else None
            }
        )
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            outcome=result.outcome.value, attempts=result.attempts
        )
        return jsonify(response_data)

    except (OutOfRangeError, RoundFinishedError) as e:
        error_response = {
            'success': False,
            'error': str(e),
            'state': asdict(current_app.game_session.get_state())
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 400
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    """Leaderboard, optionally limited with ?limit=N (N >= 0)."""
    game_session = current_app.game_session
    limit = request.args.get('limit', type=int)
    if limit is not None and limit < 0:
        error_response = {
            'success': False,
            'error': 'limit must not be negative'
        }
        game_logger.log_server_response(request, 'get_leaderboard', False, error_response)
        return jsonify(error_response), 400

    entries = game_session.leaderboard if limit is None else game_session.top_scores(limit)

    response_data = {
        'success': True,
        'leaderboard': [entry.to_dict() for entry in entries]
    }
    game_logger.log_server_response(request, 'get_leaderboard', True, response_data, count=len(entries))
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        account_store = current_app.account_store
        game_session = current_app.game_session

        response_data = {
            'status': 'healthy',
            'logged_in': account_store.is_authenticated,
            'round_status': game_session.round.status.value,
            'leaderboard_size': len(game_session.leaderboard),
            'log_stats': game_logger.get_log_stats()
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
