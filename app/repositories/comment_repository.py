"""
Repository for Comment database operations
"""

from db import db
from models.comment import Comment


class CommentRepository:
    """Repository for Comment database operations"""

    @staticmethod
    def get_by_id(id):
        """Get a Comment by ID, whatever its status"""
        return db.session.get(Comment, id)
