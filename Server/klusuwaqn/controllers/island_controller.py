"""
Island Controller

Handles the Goat Island quiz HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.game import Phase
from ..services.island_service import get_island_service, serialize_island_state
from ..utils.game_logger import game_logger

island_bp = Blueprint('island', __name__)

ISLAND_EVENTS = {
    Phase.SHOWING_SUCCESS: 'level_cleared',
    Phase.SHOWING_FAILURE: 'game_over',
    Phase.COMPLETED: 'victory',
}


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Island service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def log_island_change(game_id, before, after, user_ip):
    """Record a game event for a cleared level, a wrong pick, game over or victory."""
    if before is after:
        return
    if before.phase != after.phase:
        event = ISLAND_EVENTS.get(after.phase)
    elif after.wrong_attempts > before.wrong_attempts:
        event = 'wrong_pick'
    else:
        event = None
    if event:
        game_logger.log_game_event(
            game_id, event, user_ip,
            level_number=after.level_number, total_levels=after.total_levels
        )


@island_bp.route('/island-game', methods=['POST'])
def new_island_game():
    """Create a new island quiz session."""
    try:
        island_service = get_island_service()
        if not island_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        seed = data.get('seed')
        if seed is not None and not isinstance(seed, int):
            return jsonify({
                'success': False,
                'error': 'Seed must be an integer'
            }), 400

        game_logger.log_user_action(request, 'new_island_game')

        game_id = island_service.create_game(seed)
        state = island_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_island_state(state)
        }

        game_logger.log_server_response(
            request, 'new_island_game', True, response_data, game_id, total_levels=state.total_levels
        )
        return jsonify(response_data), 201

    except Exception as e:
        game_logger.log_error(request, e, 'new_island_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_island_game', False, error_response)
        return jsonify(error_response), 500


@island_bp.route('/island-game/<game_id>/state', methods=['GET'])
def get_island_state(game_id):
    """Get current island quiz state."""
    try:
        island_service = get_island_service()
        if not island_service:
            return _service_unavailable()

        state = island_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_island_state', game_id)

        response_data = {
            'success': True,
            'state': serialize_island_state(state)
        }
        game_logger.log_server_response(request, 'get_island_state', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_island_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_island_state', False, error_response, game_id)
        return jsonify(error_response), 500


@island_bp.route('/island-game/<game_id>/actions', methods=['POST'])
def apply_island_action(game_id):
    """Apply a player action (pick an animal, next level, restart)."""
    try:
        island_service = get_island_service()
        if not island_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'action' not in data:
            error_response = {
                'success': False,
                'error': 'Action is required'
            }
            game_logger.log_server_response(request, 'island_action', False, error_response, game_id)
            return jsonify(error_response), 400

        action = data['action']
        game_logger.log_user_action(request, action, game_id, payload=data)

        before = island_service.get_game_state(game_id)
        if before is None:
            return _not_found(action, game_id)

        try:
            state = island_service.apply_action(game_id, action, data)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, action, False, error_response, game_id)
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': serialize_island_state(state)
        }

        game_logger.log_server_response(
            request, action, True, response_data, game_id,
            phase=state.phase.value, changed=state is not before
        )
        log_island_change(game_id, before, state, request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'island_action', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'island_action', False, error_response, game_id)
        return jsonify(error_response), 500


@island_bp.route('/island-game/<game_id>', methods=['DELETE'])
def delete_island_game(game_id):
    """Discard an island quiz session."""
    try:
        island_service = get_island_service()
        if not island_service:
            return _service_unavailable()

        if not island_service.delete_game(game_id):
            return _not_found('delete_island_game', game_id)

        response_data = {'success': True}
        game_logger.log_server_response(request, 'delete_island_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_island_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_island_game', False, error_response, game_id)
        return jsonify(error_response), 500
