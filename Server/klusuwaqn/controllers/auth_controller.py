"""
Authentication Controller

Handles admin sign-in and the current-user endpoint.
"""

from flask import Blueprint, request, jsonify
from ..services.auth_service import get_auth_service
from ..utils.decorators import require_auth, unauthorized
from ..utils.game_logger import game_logger

auth_bp = Blueprint('auth', __name__)
users_bp = Blueprint('users', __name__)


@auth_bp.route('', methods=['POST'])
def login():
    """Sign in with username and password and return a JWT token."""
    try:
        auth_service = get_auth_service()
        if not auth_service:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500

        data = request.get_json(silent=True)
        if not data:
            return jsonify({
                'success': False,
                'error': 'Request body is required'
            }), 400

        username = data.get('username')
        password = data.get('password')

        # Log user action
        game_logger.log_user_action(request, 'login', username=username)

        result = auth_service.login_user(username, password)

        if result['success']:
            game_logger.log_server_response(request, 'login', True, result)
            return jsonify({'token': result['token']})
        else:
            game_logger.log_server_response(request, 'login', False, result)
            return jsonify({'error': result['error']}), 401

    except Exception as e:
        game_logger.log_error(request, e, 'login')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'login', False, error_response)
        return jsonify(error_response), 500


@users_bp.route('/me', methods=['GET'])
@require_auth
def get_current_user():
    """Return the signed-in user's information."""
    try:
        auth_service = get_auth_service()
        user = auth_service.get_user(request.user)
        if user is None:
            return unauthorized()

        response_data = {'user': user.to_dict()}
        game_logger.log_server_response(request, 'get_current_user', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_current_user')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_current_user', False, error_response)
        return jsonify(error_response), 500
