"""
Repository for Revision database operations
"""

import json
from sqlalchemy.exc import SQLAlchemyError
from db import db
from models.revision import Revision
from constants import OBJECT_TYPE_CODES
from exceptions import DatabaseException, NotFoundException
from repositories.uniqueid_repository import get_object_type_by_object_id


class RevisionRepository:
    """Repository for Revision database operations"""

    @staticmethod
    def get_revision(revision_id):
        """Get Revision by ID, raising NotFoundException when it is missing"""
        try:
            revision_id = int(revision_id)
        except (TypeError, ValueError):
            raise NotFoundException(f"revision {revision_id!r} not found")

        try:
            item = db.session.get(Revision, revision_id)
        except SQLAlchemyError as e:
            raise DatabaseException(f"failed to load revision {revision_id}: {e}") from e
        if item is None:
            raise NotFoundException(f"revision {revision_id} not found")
        return item

    @staticmethod
    def add_revision(object_id, content, user_id="0", title="", log=""):
        """
        Store a snapshot of an object. `content` may be a dict, which is
        serialized to JSON, or an already encoded string.
        """
        if not isinstance(content, str):
            content = json.dumps(content)
        try:
            item = Revision(
                object_id=object_id,
                object_type=OBJECT_TYPE_CODES.get(get_object_type_by_object_id(object_id), 0),
                content=content,
                user_id=user_id,
                title=title,
                log=log,
            )
            db.session.add(item)
            db.session.commit()
            db.session.refresh(item)
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"failed to add revision for {object_id}: {e}") from e
