"""
Repository for User database operations
"""

from sqlalchemy.exc import SQLAlchemyError
from db import db
from models.user import User
from exceptions import DatabaseException


class UserRepository:
    """Repository for User database operations"""

    @staticmethod
    def get_user_basic_info_by_id(user_id):
        """
        Return ({id, username, display_name, avatar, rank}, exists).
        Deleted users are reported as not existing.
        """
        if not user_id:
            return None, False
        try:
            user = db.session.get(User, user_id)
        except SQLAlchemyError as e:
            raise DatabaseException(f"failed to load user {user_id}: {e}") from e
        if user is None or user.is_deleted:
            return None, False
        info = {
            "id": user.id,
            "username": user.username,
            "display_name": user.display_name,
            "avatar": user.avatar,
            "rank": user.rank,
        }
        return info, True
