"""
Klusuwaqn Server Application Package

Backend for the Mi'kmaq word learning site: the word catalog API, admin
authentication and the server-side matching game and island quiz.
"""

import os

from flask import Flask, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    if app.config.get('ORIGIN'):
        CORS(app, origins=[app.config['ORIGIN']])
    else:
        CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.auth_controller import auth_bp, users_bp
    from .controllers.game_controller import game_bp
    from .controllers.island_controller import island_bp
    from .controllers.words_controller import words_bp

    app.register_blueprint(words_bp, url_prefix='/api/words')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(island_bp, url_prefix='/api')

    # Uploaded images and audio
    upload_dir = os.path.abspath(app.config.get('UPLOAD_DIR', 'public'))

    @app.route('/public/<path:filename>')
    def public_media(filename):
        return send_from_directory(upload_dir, filename)

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
