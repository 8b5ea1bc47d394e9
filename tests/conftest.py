import os
import sys
import tempfile
from itertools import count
from types import SimpleNamespace

import pytest
from bson.objectid import ObjectId

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'Server')))

# Keep test logs out of the working tree; read when the config module loads
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='klusuwaqn-logs-'))

from klusuwaqn import create_app
from klusuwaqn.config import TestingConfig
from klusuwaqn.models import Word
from klusuwaqn.services.auth_service import initialize_auth_service
from klusuwaqn.services.game_service import initialize_game_service
from klusuwaqn.services.island_service import initialize_island_service
from klusuwaqn.services.word_service import initialize_word_service


class InMemoryCollection:
    """The subset of a pymongo collection the services use, kept in a list."""

    def __init__(self):
        self.documents = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in (query or {}).items())

    def create_index(self, *args, **kwargs):
        return None

    def find(self, query=None):
        return [dict(doc) for doc in self.documents if self._matches(doc, query)]

    def find_one(self, query=None):
        for doc in self.documents:
            if self._matches(doc, query):
                return dict(doc)
        return None

    def insert_one(self, doc):
        doc.setdefault('_id', ObjectId())
        self.documents.append(dict(doc))
        return SimpleNamespace(inserted_id=doc['_id'])

    def update_one(self, query, update):
        for doc in self.documents:
            if self._matches(doc, query):
                doc.update(update.get('$set', {}))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query):
        for index, doc in enumerate(self.documents):
            if self._matches(doc, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def delete_many(self, query):
        kept = [doc for doc in self.documents if not self._matches(doc, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)


_ids = count(1)


def make_word(mikmaq, english='word', month='September', image=None, audio=None):
    number = next(_ids)
    return Word(
        id=f"w{number}",
        mikmaq=mikmaq,
        english=english,
        start_month=month,
        image_path=image or f"{mikmaq.lower()}-{number}.png",
        audio_path=audio or f"{mikmaq.lower()}-{number}.mp3",
    )


@pytest.fixture
def words():
    """Nine words over three months."""
    return [
        make_word("Ni'n", 'I (personal pronoun)', 'September'),
        make_word("Ki'l", 'You', 'September'),
        make_word('Teluisi', 'My name is', 'September'),
        make_word('Aqq', 'And', 'October'),
        make_word('Mijisi', 'Eat', 'October'),
        make_word('Wiktm', 'I like the taste of it', 'October'),
        make_word("Ta'ta", 'Dad', 'January'),
        make_word("Kiju'", 'Mother / Grandmother', 'January'),
        make_word('Nekm', 'Him or her', 'January'),
    ]


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / 'public'
    path.mkdir()
    return str(path)


@pytest.fixture
def collections():
    return SimpleNamespace(words=InMemoryCollection(), users=InMemoryCollection())


@pytest.fixture
def app(collections, upload_dir):
    class Config(TestingConfig):
        UPLOAD_DIR = upload_dir

    initialize_word_service(collections.words, upload_dir)
    initialize_auth_service(collections.users, Config.JWT_SECRET, Config.JWT_EXPIRATION_DAYS)
    initialize_game_service()
    initialize_island_service()

    app, _ = create_app(Config)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    from klusuwaqn.services.auth_service import get_auth_service
    return get_auth_service().create_default_user()


@pytest.fixture
def auth_headers(admin_user):
    from klusuwaqn.services.auth_service import get_auth_service
    token = get_auth_service().issue_token(admin_user.id)
    return {'Authorization': f'Bearer {token}'}
