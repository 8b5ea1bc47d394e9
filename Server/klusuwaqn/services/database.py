"""
Database Connection

Creates the MongoDB client shared by the word and auth services.
"""

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..utils.game_logger import game_logger

_client = None


def connect_database(mongo_uri: str, db_name: str):
    """
    Connect to MongoDB and return the application database.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    global _client
    _client = MongoClient(mongo_uri, server_api=ServerApi('1'))

    # Test connection
    try:
        _client.admin.command('ping')
        game_logger.logger.info("Successfully connected to MongoDB")
    except Exception as e:
        game_logger.logger.error(f"MongoDB connection error: {e}")
        _client.close()
        _client = None
        raise

    return _client[db_name]


def close_database():
    """Close the MongoDB connection."""
    global _client
    if _client:
        _client.close()
        _client = None
