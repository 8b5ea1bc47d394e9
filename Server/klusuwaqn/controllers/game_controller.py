"""
Game Controller

Handles the matching game HTTP endpoints and the health check.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import get_month_label
from ..models.game import Phase
from ..services.game_service import get_game_service, serialize_state
from ..services.island_service import get_island_service
from ..services.auth_service import get_auth_service
from ..services.word_service import get_word_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

PHASE_EVENTS = {
    Phase.SHOWING_SUCCESS: 'round_won',
    Phase.SHOWING_WARNING: 'wrong_pick',
    Phase.SHOWING_FAILURE: 'game_failed',
    Phase.COMPLETED: 'game_completed',
}


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def log_phase_change(game_id, before, after, user_ip):
    """Record a game event when an action moved the game to a new phase."""
    if before is after or before.phase == after.phase:
        return
    event = PHASE_EVENTS.get(after.phase)
    if event:
        game_logger.log_game_event(
            game_id, event, user_ip,
            month=after.month, round_index=after.round_index,
            success_count=after.success_count, total_rounds=after.total_rounds
        )


@game_bp.route('/matching-game/months', methods=['GET'])
def list_months():
    """List the months that have words, with their Mi'kmaq labels."""
    try:
        word_service = get_word_service()
        words = word_service.list_words() if word_service else []

        counts = {}
        for word in words:
            counts[word.start_month] = counts.get(word.start_month, 0) + 1

        response_data = {
            'success': True,
            'months': [
                {'value': month, 'label': get_month_label(month), 'word_count': count}
                for month, count in counts.items()
            ]
        }
        game_logger.log_server_response(request, 'list_months', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'list_months')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'list_months', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/matching-game', methods=['POST'])
def new_game():
    """Create a new matching game session for a month."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        month = data.get('month')
        seed = data.get('seed')

        if seed is not None and not isinstance(seed, int):
            return jsonify({
                'success': False,
                'error': 'Seed must be an integer'
            }), 400

        game_logger.log_user_action(request, 'new_game', month=month)

        try:
            game_id = game_service.create_game(month, seed)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            month=state.month, total_rounds=state.total_rounds
        )
        if state.is_empty:
            game_logger.log_game_event(game_id, 'empty_word_set', request.remote_addr, month=state.month)

        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/matching-game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            phase=state.phase.value, round_index=state.round_index
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/matching-game/<game_id>/actions', methods=['POST'])
def apply_action(game_id):
    """Apply a player action (pick a slot, dismiss a modal, restart, ...)."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'action' not in data:
            error_response = {
                'success': False,
                'error': 'Action is required'
            }
            game_logger.log_server_response(request, 'game_action', False, error_response, game_id)
            return jsonify(error_response), 400

        action = data['action']
        game_logger.log_user_action(request, action, game_id, payload=data)

        before = game_service.get_game_state(game_id)
        if before is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 404

        try:
            state = game_service.apply_action(game_id, action, data)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, action, True, response_data, game_id,
            phase=state.phase.value, changed=state is not before
        )
        log_phase_change(game_id, before, state, request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'game_action', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'game_action', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/matching-game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Discard a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        return jsonify({'success': False, 'error': 'Game not found'}), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        island_service = get_island_service()
        auth_service = get_auth_service()
        word_service = get_word_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'active_island_games': len(island_service.games) if island_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'auth_available': auth_service is not None,
            'words_available': word_service is not None
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
