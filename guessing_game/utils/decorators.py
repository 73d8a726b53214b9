"""
Session Decorators

Contains decorators for endpoints that need a logged-in account.
"""

from functools import wraps
from flask import request, jsonify, current_app


def require_session(f):
    """
    Decorator to require a logged-in account for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        account = current_app.account_store.current_user
        if account is None:
            return jsonify({
                'success': False,
                'error': 'Login required'
            }), 401

        # Add account to request context
        request.account = account
        return f(*args, **kwargs)

    return decorated_function
