"""
Words Controller

Handles the word catalog endpoints: the public snapshot and search, and the
admin create/update/delete routes.
"""

from flask import Blueprint, request, jsonify
from ..services.search_service import search
from ..services.word_service import get_word_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger

words_bp = Blueprint('words', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Word service unavailable'
    }), 500


def _error_response(action, result):
    game_logger.log_server_response(request, action, False, result)
    return jsonify({'error': result['error']}), result.get('status', 400)


@words_bp.route('', methods=['GET'])
def list_words():
    """Return the full word catalog."""
    try:
        word_service = get_word_service()
        if not word_service:
            return _service_unavailable()

        words = word_service.list_words()
        response_data = {'words': [word.to_dict() for word in words]}

        game_logger.log_server_response(request, 'list_words', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'list_words')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'list_words', False, error_response)
        return jsonify(error_response), 500


@words_bp.route('/search', methods=['GET'])
def search_words():
    """Fuzzy search the catalog by Mi'kmaq, English or month."""
    try:
        word_service = get_word_service()
        if not word_service:
            return _service_unavailable()

        query = request.args.get('q', '')
        game_logger.log_user_action(request, 'search_words', query=query)

        words = search(word_service.list_words(), query)
        response_data = {'words': [word.to_dict() for word in words]}

        game_logger.log_server_response(request, 'search_words', True, response_data, results=len(words))
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'search_words')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'search_words', False, error_response)
        return jsonify(error_response), 500


@words_bp.route('', methods=['POST'])
@require_auth
def create_word():
    """Create a word from a multipart form with image and audio uploads."""
    try:
        word_service = get_word_service()
        if not word_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'create_word', mikmaq=request.form.get('mikmaq'))

        result = word_service.create_word(request.form, request.files, request.user)
        if not result['success']:
            return _error_response('create_word', result)

        response_data = result['word'].to_dict()
        game_logger.log_server_response(request, 'create_word', True, response_data)
        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'create_word')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'create_word', False, error_response)
        return jsonify(error_response), 500


@words_bp.route('/<word_id>', methods=['PATCH'])
@require_auth
def update_word(word_id):
    """Update some fields of a word; uploaded media replaces the old files."""
    try:
        word_service = get_word_service()
        if not word_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'update_word', word_id=word_id)

        result = word_service.update_word(word_id, request.form, request.files)
        if not result['success']:
            return _error_response('update_word', result)

        response_data = {'word': result['word'].to_dict()}
        game_logger.log_server_response(request, 'update_word', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'update_word')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'update_word', False, error_response)
        return jsonify(error_response), 500


@words_bp.route('/<word_id>', methods=['DELETE'])
@require_auth
def delete_word(word_id):
    """Delete a word and its media files."""
    try:
        word_service = get_word_service()
        if not word_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_word', word_id=word_id)

        result = word_service.delete_word(word_id)
        if not result['success']:
            return _error_response('delete_word', result)

        response_data = {'word': result['word'].to_dict()}
        game_logger.log_server_response(request, 'delete_word', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_word')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_word', False, error_response)
        return jsonify(error_response), 500
