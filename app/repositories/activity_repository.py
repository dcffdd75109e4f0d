"""
Repository for Activity database operations
"""

from sqlalchemy.exc import SQLAlchemyError
from db import db
from models.activity import Activity
from activity_types import vote_activity_codes
from constants import ACTIVITY_CANCELLED
from exceptions import DatabaseException
from utils import now_utc


class ActivityRepository:
    """Repository for Activity database operations"""

    @staticmethod
    def get_object_all_activity(object_id, show_vote):
        """
        All activities recorded against an object, newest first.
        Vote actions are left out unless show_vote is set.
        """
        try:
            query = Activity.query.filter(Activity.original_object_id == object_id)
            if not show_vote:
                query = query.filter(Activity.activity_type.notin_(vote_activity_codes()))
            return query.order_by(Activity.id.desc()).all()
        except SQLAlchemyError as e:
            raise DatabaseException(f"failed to load activities of {object_id}: {e}") from e

    @staticmethod
    def add_activity(**kwargs):
        """Create new Activity record"""
        try:
            item = Activity(**kwargs)
            db.session.add(item)
            db.session.commit()
            db.session.refresh(item)
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"failed to add activity: {e}") from e

    @staticmethod
    def cancel_activity(activity_id):
        """Flag an activity as cancelled. Returns False if it does not exist."""
        item = db.session.get(Activity, activity_id)
        if not item:
            return False

        try:
            item.cancelled = ACTIVITY_CANCELLED
            item.cancelled_at = now_utc()
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"failed to cancel activity {activity_id}: {e}") from e
