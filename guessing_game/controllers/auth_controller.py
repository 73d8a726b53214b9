"""
Authentication Controller

Handles all account-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify, current_app
from ..services.errors import DuplicateEmailError, InvalidCredentialsError, MissingFieldsError
from ..utils.decorators import require_session
from ..utils.game_logger import game_logger

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new account and log it in."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({
                'success': False,
                'error': 'Request body must be a JSON object'
            }), 400

        name = data.get('name')
        email = data.get('email')

        # Log user action
        game_logger.log_user_action(request, 'register', name=name, email=email)

        account = current_app.account_store.register(name, email, data.get('password'))
        result = {'success': True, 'user': account.to_dict()}
        game_logger.log_server_response(request, 'register', True, result)
        return jsonify(result), 201

    except MissingFieldsError as e:
        result = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'register', False, result)
        return jsonify(result), 400
    except DuplicateEmailError as e:
        result = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'register', False, result)
        return jsonify(result), 409
    except Exception as e:
        game_logger.log_error(request, e, 'register')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'register', False, error_response)
        return jsonify(error_response), 500


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login with email and password."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({
                'success': False,
                'error': 'Request body must be a JSON object'
            }), 400

        email = data.get('email')

        # Log user action
        game_logger.log_user_action(request, 'login', email=email)

        account = current_app.account_store.login(email, data.get('password'))
        result = {'success': True, 'user': account.to_dict()}
        game_logger.log_server_response(request, 'login', True, result)
        return jsonify(result)

    except MissingFieldsError as e:
        result = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'login', False, result)
        return jsonify(result), 400
    except InvalidCredentialsError as e:
        result = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'login', False, result)
        return jsonify(result), 401
    except Exception as e:
        game_logger.log_error(request, e, 'login')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'login', False, error_response)
        return jsonify(error_response), 500


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout the current account. Succeeds even when nobody is logged in."""
    try:
        game_logger.log_user_action(request, 'logout')

        current_app.account_store.logout()
        result = {'success': True, 'message': 'Logged out successfully'}
        game_logger.log_server_response(request, 'logout', True, result)
        return jsonify(result)

    except Exception as e:
        game_logger.log_error(request, e, 'logout')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'logout', False, error_response)
        return jsonify(error_response), 500


@auth_bp.route('/me', methods=['GET'])
@require_session
def get_profile():
    """Get the logged-in account's profile and stats."""
    response_data = {
        'success': True,
        'user': request.account.to_dict()
    }
    game_logger.log_server_response(request, 'get_profile', True, response_data)
    return jsonify(response_data)


@auth_bp.route('/users', methods=['GET'])
def list_users():
    """List every stored account (passwords stripped)."""
    try:
        accounts = current_app.account_store.list_accounts()
        response_data = {
            'success': True,
            'users': [account.to_dict() for account in accounts]
        }
        game_logger.log_server_response(request, 'list_users', True, response_data, count=len(accounts))
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'list_users')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'list_users', False, error_response)
        return jsonify(error_response), 500
