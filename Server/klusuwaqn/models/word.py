"""
Word Data Models

Contains the vocabulary record and the month it is taught in.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class Month(Enum):
    """Month a word is introduced in; decides which game session shows it."""
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @classmethod
    def parse(cls, value: Any) -> Optional["Month"]:
        """Return the Month named by value, or None if it is not a month name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Word:
    """A vocabulary entry as stored in the catalog."""
    id: str
    mikmaq: str
    english: str
    start_month: str
    image_path: str
    audio_path: str
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Word":
        """Build a Word from a MongoDB document."""
        return cls(
            id=str(doc["_id"]),
            mikmaq=doc["mikmaq"],
            english=doc["english"],
            start_month=doc["startMonth"],
            image_path=doc.get("imagePath", ""),
            audio_path=doc.get("audioPath", ""),
            user_id=str(doc["userId"]) if doc.get("userId") is not None else None,
            created_at=doc.get("createdAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape returned by the words API."""
        return {
            "id": self.id,
            "mikmaq": self.mikmaq,
            "english": self.english,
            "startMonth": self.start_month,
            "imagePath": self.image_path,
            "audioPath": self.audio_path,
            "userId": self.user_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
