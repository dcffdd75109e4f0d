"""Activity model.

Rows are appended by whichever subsystem performs the user action; only the
cancelled flag and timestamp change afterwards.
"""

from db import db
from utils import now_utc
from constants import ACTIVITY_AVAILABLE


class Activity(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc, index=True)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    cancelled_at = db.Column(db.DateTime, nullable=True)
    user_id = db.Column(db.String(20), nullable=False, default="0", index=True)
    trigger_user_id = db.Column(db.String(20), nullable=False, default="0")
    object_id = db.Column(db.String(20), nullable=False, default="0", index=True)
    original_object_id = db.Column(db.String(20), nullable=False, default="0", index=True)
    activity_type = db.Column(db.Integer, nullable=False, index=True)
    cancelled = db.Column(db.Integer, nullable=False, default=ACTIVITY_AVAILABLE)
    rank = db.Column(db.Integer, nullable=False, default=0)
    has_rank = db.Column(db.Boolean, nullable=False, default=False)
    revision_id = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (db.Index("idx_activity_original_object", "original_object_id", "activity_type"),)
