"""
Klusuwaqn Server - Main Entry Point

This is the main entry point for the Klusuwaqn server.
It validates the environment, initializes all services and starts the
Flask-SocketIO application.
"""

import sys
from klusuwaqn import create_app
from klusuwaqn.config import Config, validate_environment
from klusuwaqn.services.auth_service import initialize_auth_service
from klusuwaqn.services.database import connect_database, close_database
from klusuwaqn.services.game_service import initialize_game_service
from klusuwaqn.services.island_service import initialize_island_service
from klusuwaqn.services.word_service import initialize_word_service
from klusuwaqn.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    problems = validate_environment(Config)
    if problems:
        print("Invalid environment variables")
        for problem in problems:
            print(f"  - {problem}")
        sys.exit(1)

    try:
        print("Initializing services...")

        db = connect_database(Config.MONGO_URI, Config.MONGO_DB)
        print("✓ Connected to MongoDB")

        word_service = initialize_word_service(db.words, Config.UPLOAD_DIR)
        print(f"✓ Word service initialized ({len(word_service.list_words())} words)")

        auth_service = initialize_auth_service(db.users, Config.JWT_SECRET, Config.JWT_EXPIRATION_DAYS)
        if auth_service:
            print("✓ Authentication service initialized successfully")
        else:
            print("✗ Failed to initialize authentication service")

        initialize_game_service()
        print("✓ Game service initialized successfully")

        island_service = initialize_island_service()
        print(f"✓ Island service initialized ({len(island_service.levels)} levels)")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Klusuwaqn Server Starting")

        print(f"\nStarting Klusuwaqn Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Auth available: {auth_service is not None}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Klusuwaqn Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        close_database()


if __name__ == '__main__':
    main()
