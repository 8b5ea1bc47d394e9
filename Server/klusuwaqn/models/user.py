"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class User:
    """Admin user allowed to manage the word catalog."""
    id: str
    username: str
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            id=str(doc["_id"]),
            username=doc["username"],
            name=doc.get("name", doc["username"]),
            created_at=doc.get("created_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username, "name": self.name}
