"""
Authentication Decorators

Contains the decorator protecting admin HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify


def unauthorized():
    return jsonify({'message': 'Unauthorized'}), 401


def require_auth(f):
    """
    Decorator to require a bearer token for protected HTTP endpoints.

    On success the authenticated user's id is stored on request.user.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service

        auth_service = get_auth_service()
        if not auth_service:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500

        # Get token from Authorization header
        auth_header = request.headers.get('Authorization')
        if not auth_header or not auth_header.startswith('Bearer '):
            return unauthorized()

        token = auth_header.split(' ', 1)[1]

        result = auth_service.verify_token(token)
        if not result['success']:
            return unauthorized()

        request.user = result['user_id']
        return f(*args, **kwargs)

    return decorated_function
