"""
Word Service

Manages the word catalog: the read-only snapshot the games consume and the
admin create/update/delete operations with their image and audio uploads.
"""

import datetime
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bson.objectid import ObjectId
from bson.errors import InvalidId

from ..models.word import Month, Word
from ..utils.game_logger import game_logger
from ..utils.helpers import save_upload, copy_media, remove_media

TEXT_FIELDS = ('mikmaq', 'english')
MEDIA_FIELDS = {'image': 'imagePath', 'audio': 'audioPath'}


def _error(message: str, status: int = 400) -> Dict[str, Any]:
    return {"success": False, "error": message, "status": status}


class WordService:
    """
    Word catalog backed by a MongoDB collection.

    This class handles:
    - Listing the catalog snapshot served to the games and the dictionary
    - Validating admin input
    - Storing uploaded media and removing files that are replaced or orphaned
    """

    def __init__(self, collection, upload_dir: str = "public"):
        self.collection = collection
        self.upload_dir = upload_dir
        os.makedirs(upload_dir, exist_ok=True)

    def list_words(self) -> List[Word]:
        """Return every word in the catalog in insertion order."""
        return [Word.from_document(doc) for doc in self.collection.find()]

    def _find_document(self, word_id: str) -> Optional[Dict[str, Any]]:
        try:
            return self.collection.find_one({"_id": ObjectId(word_id)})
        except (InvalidId, TypeError):
            return None

    def get_word(self, word_id: str) -> Optional[Word]:
        """
        Look up a single word.

        Returns:
            Word or None if not found
        """
        doc = self._find_document(word_id)
        return Word.from_document(doc) if doc else None

    def _validate_fields(self, form: Mapping[str, Any], partial: bool) -> Dict[str, Any]:
        """
        Validate the text fields of a create or update request.

        Returns:
            Dictionary with either the cleaned 'data' or an error result
        """
        data = {}

        for field in TEXT_FIELDS:
            value = form.get(field)
            if value is None:
                if partial:
                    continue
                return _error(f"'{field}' is required")
            if not isinstance(value, str) or not value.strip():
                return _error(f"'{field}' must be a non-empty string")
            data[field] = value.strip()

        month_value = form.get('startMonth')
        if month_value is None:
            if not partial:
                return _error("'startMonth' is required")
        else:
            month = Month.parse(month_value)
            if month is None:
                return _error(f"'startMonth' must be one of: {', '.join(m.value for m in Month)}")
            data['startMonth'] = month.value

        return {"success": True, "data": data}

    def create_word(self, form: Mapping[str, Any], files: Mapping[str, Any], user_id: Optional[str]) -> Dict[str, Any]:
        """
        Create a word with its image and audio.

        Args:
            form: Submitted text fields (mikmaq, english, startMonth)
            files: Uploaded files; both 'image' and 'audio' are required
            user_id: Id of the admin creating the word

        Returns:
            Dictionary with success status and the created Word or error
        """
        result = self._validate_fields(form, partial=False)
        if not result["success"]:
            return result

        uploads = {name: files.get(name) for name in MEDIA_FIELDS}
        if any(upload is None or not upload.filename for upload in uploads.values()):
            return _error("Missing required uploaded files")

        doc = dict(result["data"])
        saved = []
        try:
            for name, field in MEDIA_FIELDS.items():
                doc[field] = save_upload(uploads[name], self.upload_dir)
                saved.append(doc[field])
            doc["userId"] = user_id
            doc["createdAt"] = datetime.datetime.now(datetime.timezone.utc)

            inserted = self.collection.insert_one(doc)
        except Exception:
            for filename in saved:
                remove_media(filename, self.upload_dir)
            raise
        doc["_id"] = inserted.inserted_id

        word = Word.from_document(doc)
        game_logger.logger.info(f"Word '{word.mikmaq}' created ({word.id})")
        return {"success": True, "word": word}

    def update_word(self, word_id: str, form: Mapping[str, Any], files: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Update some fields of a word; new uploads replace the old media files.

        Returns:
            Dictionary with success status and the updated Word or error
        """
        existing = self._find_document(word_id)
        if not existing:
            return _error("Word not found", 404)

        result = self._validate_fields(form, partial=True)
        if not result["success"]:
            return result

        changes = dict(result["data"])
        replaced = []
        for name, field in MEDIA_FIELDS.items():
            upload = files.get(name)
            if upload is not None and upload.filename:
                changes[field] = save_upload(upload, self.upload_dir)
                replaced.append(existing.get(field))

        if changes:
            self.collection.update_one({"_id": existing["_id"]}, {"$set": changes})

        for filename in replaced:
            remove_media(filename, self.upload_dir)

        return {"success": True, "word": Word.from_document({**existing, **changes})}

    def delete_word(self, word_id: str) -> Dict[str, Any]:
        """
        Delete a word and its media files.

        Returns:
            Dictionary with success status and the deleted Word or error
        """
        existing = self._find_document(word_id)
        if not existing:
            return _error("Word not found", 404)

        self.collection.delete_one({"_id": existing["_id"]})
        word = Word.from_document(existing)
        remove_media(word.image_path, self.upload_dir)
        remove_media(word.audio_path, self.upload_dir)

        game_logger.logger.info(f"Word '{word.mikmaq}' deleted ({word.id})")
        return {"success": True, "word": word}

    def import_words(self, records: Iterable[Mapping[str, str]], media_dir: str, user_id: Optional[str]) -> int:
        """
        Replace the catalog with records, copying media from media_dir.

        Each record needs images/<mikmaq lower>.png and audio/<mikmaq lower>.mp3
        under media_dir; records without both files are skipped.

        Returns:
            int: Number of words imported
        """
        for word in self.list_words():
            remove_media(word.image_path, self.upload_dir)
            remove_media(word.audio_path, self.upload_dir)
        self.collection.delete_many({})

        imported = 0
        for record in records:
            stem = record["mikmaq"].lower()
            image = os.path.join(media_dir, "images", f"{stem}.png")
            audio = os.path.join(media_dir, "audio", f"{stem}.mp3")
            if not (os.path.exists(image) and os.path.exists(audio)):
                game_logger.logger.warning(f"Skipping '{record['mikmaq']}': media not found in {media_dir}")
                continue

            self.collection.insert_one({
                "mikmaq": record["mikmaq"],
                "english": record["english"],
                "startMonth": record["startMonth"],
                "imagePath": copy_media(image, self.upload_dir),
                "audioPath": copy_media(audio, self.upload_dir),
                "userId": user_id,
                "createdAt": datetime.datetime.now(datetime.timezone.utc)
            })
            imported += 1

        game_logger.logger.info(f"Imported {imported} words")
        return imported


# Global service instance
_word_service = None


def get_word_service() -> Optional[WordService]:
    """Get the global word service instance."""
    return _word_service


def initialize_word_service(collection, upload_dir: str = "public") -> WordService:
    """Initialize the global word service instance."""
    global _word_service
    _word_service = WordService(collection, upload_dir)
    return _word_service
