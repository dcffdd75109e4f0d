"""
Repository for generating object identifiers
"""

from sqlalchemy.exc import SQLAlchemyError
from db import db
from models.uniqid import Uniqid
from constants import OBJECT_TYPE_CODES, OBJECT_TYPE_NAMES
from exceptions import DatabaseException


class UniqueIDRepository:
    """Repository for Uniqid database operations"""

    @staticmethod
    def gen_unique_id_str(object_type):
        """
        Generate a new identifier for an object type.

        The identifier is "1" + 3-digit object type code + 13-digit sequence,
        so the type of any object can be recovered from its id.
        """
        type_code = OBJECT_TYPE_CODES.get(object_type, 0)
        try:
            item = Uniqid(uniqid_type=type_code)
            db.session.add(item)
            db.session.flush()
            return f"1{type_code:03d}{item.id:013d}"
        except SQLAlchemyError as e:
            db.session.rollback()
            raise DatabaseException(f"failed to generate unique id for {object_type}: {e}") from e


def get_object_type_by_object_id(object_id):
    """Object type name encoded in an identifier, or "" if it cannot be parsed"""
    object_id = str(object_id or "")
    if len(object_id) < 5 or not object_id.isdigit():
        return ""
    return OBJECT_TYPE_NAMES.get(int(object_id[1:4]), "")
