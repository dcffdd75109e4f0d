"""
Model: Comment
`object_id` is the question or answer the comment was left on.
"""

from db import db
from utils import now_utc
from constants import COMMENT_STATUS_AVAILABLE


class Comment(db.Model):
    id = db.Column(db.String(20), primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    user_id = db.Column(db.String(20), nullable=False, default="0")
    reply_user_id = db.Column(db.String(20), nullable=True)
    reply_comment_id = db.Column(db.String(20), nullable=True)
    object_id = db.Column(db.String(20), nullable=False, index=True)
    vote_count = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.Integer, nullable=False, default=COMMENT_STATUS_AVAILABLE)
    original_text = db.Column(db.Text, nullable=False, default="")
    parsed_text = db.Column(db.Text, nullable=False, default="")
