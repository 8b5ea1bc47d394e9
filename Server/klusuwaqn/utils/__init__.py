"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_auth
from .helpers import storage_filename, save_upload, copy_media, remove_media, to_storage_url
from .game_logger import game_logger

__all__ = ['require_auth', 'storage_filename', 'save_upload', 'copy_media', 'remove_media', 'to_storage_url', 'game_logger']
