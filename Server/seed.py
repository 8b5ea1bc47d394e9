"""
Seed Script

Resets the database to the default admin account and the starter vocabulary.

Usage:
    python seed.py [media_dir]

media_dir must contain images/<word>.png and audio/<word>.mp3 for each seed
word, named after the lower-cased Mi'kmaq spelling.
"""

import os
import sys
from klusuwaqn.config import Config, SEED_WORDS, validate_seed_words_integrity
from klusuwaqn.services.auth_service import AuthService
from klusuwaqn.services.database import connect_database, close_database
from klusuwaqn.services.word_service import WordService


def seed(db, media_dir: str, upload_dir: str, jwt_secret: str) -> int:
    """Create the default user and import the seed words. Returns the word count."""
    validate_seed_words_integrity()

    auth_service = AuthService(db.users, jwt_secret)
    word_service = WordService(db.words, upload_dir)

    user = auth_service.create_default_user()
    print("✓ Added default user into the database")
    print("  username: admin  password: admin")

    imported = word_service.import_words(SEED_WORDS, media_dir, user.id)
    print(f"✓ Imported {imported} of {len(SEED_WORDS)} words")
    return imported


def main():
    media_dir = sys.argv[1] if len(sys.argv) > 1 else os.path.join(os.path.dirname(__file__), 'seed_media')

    if not Config.MONGO_URI:
        print("MONGO_URI is not set")
        sys.exit(1)

    try:
        db = connect_database(Config.MONGO_URI, Config.MONGO_DB)
        seed(db, media_dir, Config.UPLOAD_DIR, Config.JWT_SECRET or Config.SECRET_KEY)
    except ValueError as e:
        print(f"Seed data validation failed: {e}")
        sys.exit(1)
    finally:
        close_database()


if __name__ == '__main__':
    main()
