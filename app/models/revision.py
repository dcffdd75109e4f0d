"""
Model: Revision
Snapshot of an object's content, stored as a JSON document in `content`.
"""

from db import db
from utils import now_utc


class Revision(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    user_id = db.Column(db.String(20), nullable=False, default="0")
    object_type = db.Column(db.Integer, nullable=False, default=0)
    object_id = db.Column(db.String(20), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False, default="")
    content = db.Column(db.Text, nullable=False, default="")
    log = db.Column(db.String(255), nullable=False, default="")
    status = db.Column(db.Integer, nullable=False, default=1)
