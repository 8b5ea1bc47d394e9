"""
Authentication Service

Handles admin authentication: password hashing, sign-in and JWT bearer
token management, with users stored in MongoDB.
"""

import bcrypt
import jwt
import datetime
from typing import Optional, Dict, Any
from bson.objectid import ObjectId
from bson.errors import InvalidId

from ..models.user import User
from ..utils.game_logger import game_logger

DEFAULT_USER = {
    "username": "admin",
    "name": "Admin User",
    "password": "admin",
}


class AuthService:
    """
    Authentication service for admin sign-in and token verification.
    """

    def __init__(self, users_collection, jwt_secret: str, expiration_days: int = 7):
        """
        Initialize the authentication service.

        Args:
            users_collection: MongoDB collection holding user documents
            jwt_secret: Secret key for JWT token generation
            expiration_days: Lifetime of issued tokens
        """
        self.users_collection = users_collection
        self.jwt_secret = jwt_secret
        self.expiration_days = expiration_days

        # Create unique index on username
        self.users_collection.create_index("username", unique=True)

    def hash_password(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password as string
        """
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Args:
            password: Plain text password
            hashed_password: Stored hashed password

        Returns:
            True if password matches, False otherwise
        """
        return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))

    def issue_token(self, user_id: str) -> str:
        """Create a signed token whose subject is the user id."""
        now = datetime.datetime.now(datetime.timezone.utc)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + datetime.timedelta(days=self.expiration_days)
        }
        return jwt.encode(payload, self.jwt_secret, algorithm="HS256")

    def login_user(self, username: str, password: str) -> Dict[str, Any]:
        """
        Authenticate a user and generate a JWT token.

        Args:
            username: User's username
            password: User's password

        Returns:
            Dictionary with success status and JWT token or error
        """
        try:
            if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
                return {"success": False, "error": "Invalid username or password"}

            user = self.users_collection.find_one({"username": username.strip()})
            if not user or not self.verify_password(password, user["password"]):
                return {"success": False, "error": "Invalid username or password"}

            user_id = str(user["_id"])
            self.users_collection.update_one(
                {"_id": user["_id"]},
                {"$set": {"last_login": datetime.datetime.now(datetime.timezone.utc)}}
            )

            return {"success": True, "token": self.issue_token(user_id)}

        except Exception as e:
            return {"success": False, "error": f"Login failed: {str(e)}"}

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dictionary with success status and the user id or error
        """
        try:
            if not token:
                return {"success": False, "error": "Token is required"}

            payload = jwt.decode(token, self.jwt_secret, algorithms=["HS256"])
            user_id = payload.get("sub")

            if not user_id:
                return {"success": False, "error": "Invalid token payload"}

            return {"success": True, "user_id": user_id}

        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Invalid token"}

    def get_user(self, user_id: str) -> Optional[User]:
        """
        Get user data by user ID.

        Args:
            user_id: User's unique identifier

        Returns:
            User or None if not found
        """
        try:
            user = self.users_collection.find_one({"_id": ObjectId(user_id)})
        except (InvalidId, TypeError):
            return None
        return User.from_document(user) if user else None

    def create_default_user(self) -> User:
        """
        Replace all users with the default admin account.

        Returns:
            The created User
        """
        self.users_collection.delete_many({})
        user_doc = {
            "username": DEFAULT_USER["username"],
            "name": DEFAULT_USER["name"],
            "password": self.hash_password(DEFAULT_USER["password"]),
            "created_at": datetime.datetime.now(datetime.timezone.utc),
            "last_login": None
        }
        result = self.users_collection.insert_one(user_doc)
        user_doc["_id"] = result.inserted_id

        game_logger.logger.info(f"Default user '{DEFAULT_USER['username']}' created")
        return User.from_document(user_doc)


# Global service instance
_auth_service = None


def get_auth_service() -> Optional[AuthService]:
    """Get the global auth service instance."""
    return _auth_service


def initialize_auth_service(users_collection, jwt_secret: str, expiration_days: int = 7) -> Optional[AuthService]:
    """Initialize the global auth service instance."""
    global _auth_service
    try:
        _auth_service = AuthService(users_collection, jwt_secret, expiration_days)
        return _auth_service
    except Exception as e:
        game_logger.logger.error(f"Failed to initialize authentication service: {e}")
        return None
