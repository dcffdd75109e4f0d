"""
Model: User
Only the profile columns the timeline needs.
"""

from db import db
from utils import now_utc
from constants import USER_STATUS_AVAILABLE, USER_STATUS_DELETED


class User(db.Model):
    id = db.Column(db.String(20), primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc)
    username = db.Column(db.String(50), unique=True, nullable=False)
    display_name = db.Column(db.String(30), nullable=False, default="")
    avatar = db.Column(db.String(1024), nullable=False, default="")
    rank = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.Integer, nullable=False, default=USER_STATUS_AVAILABLE)

    @property
    def is_deleted(self):
        return self.status == USER_STATUS_DELETED
