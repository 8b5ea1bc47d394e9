"""
WebSocket Event Handlers

Lets the matching game page drive its session over Socket.IO instead of
polling the HTTP endpoints.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..controllers.game_controller import log_phase_change
from ..services.game_service import get_game_service, serialize_state
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room and receive its current state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(_room(game_id))
        emit('game_state', {'game_id': game_id, 'state': serialize_state(state)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving updates for a game."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(_room(game_id))

    @socketio.on('game_action')
    def handle_game_action(data):
        """Apply a player action and broadcast the new state to the room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = data or {}
        game_id = data.get('game_id')
        action = data.get('action')
        if not game_id or not action:
            emit('error', {'error': 'Game ID and action are required'})
            return

        before = game_service.get_game_state(game_id)
        if before is None:
            emit('error', {'error': 'Game not found'})
            return

        try:
            state = game_service.apply_action(game_id, action, data)
        except ValueError as e:
            emit('error', {'error': str(e)})
            return

        # The sender gets the broadcast even if it never sent join_game
        join_room(_room(game_id))
        log_phase_change(game_id, before, state, request.remote_addr)
        game_logger.logger.info(f"WebSocket action '{action}' on game {game_id}: {state.phase.value}")

        socketio.emit(
            'game_state',
            {'game_id': game_id, 'state': serialize_state(state)},
            to=_room(game_id)
        )
