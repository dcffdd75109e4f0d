"""
Models package

Usage:
    from models import Tag, Activity
    from models.tag import Tag
"""

from .activity import Activity
from .answer import Answer
from .comment import Comment
from .question import Question
from .revision import Revision
from .tag import Tag
from .uniqid import Uniqid
from .user import User

__all__ = [
    "Activity",
    "Answer",
    "Comment",
    "Question",
    "Revision",
    "Tag",
    "Uniqid",
    "User",
]
