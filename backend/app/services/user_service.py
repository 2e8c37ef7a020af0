import logging
from typing import List, Optional
from app.api.models import User

logger = logging.getLogger(__name__)

class UserService:
    """In-memory, insertion-ordered store of user records."""

    def __init__(self):
        self._users: List[User] = []

    def count(self) -> int:
        return len(self._users)

    def create(self, user: User) -> User:
        # No uniqueness check: duplicate ids are stored as-is
        self._users.append(user)
        logger.info("Created user id=%s (total=%d)", user.id, len(self._users))
        return user

    def find_all(self) -> List[User]:
        return list(self._users)

    def find_one(self, user_id: str) -> Optional[User]:
        user = next((u for u in self._users if u.id == user_id), None)
        if user is None:
            logger.debug("No user with id=%s", user_id)
        return user
