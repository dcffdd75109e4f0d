"""
Model: Tag
A tag with a non-zero main_tag_id is a synonym of that main tag.
"""

from db import db
from utils import now_utc
from constants import TAG_STATUS_AVAILABLE


class Tag(db.Model):
    id = db.Column(db.String(20), primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc, index=True)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    main_tag_id = db.Column(db.BigInteger, nullable=False, default=0, index=True)
    main_tag_slug_name = db.Column(db.String(35), nullable=False, default="")
    slug_name = db.Column(db.String(35), unique=True, nullable=False)
    display_name = db.Column(db.String(35), nullable=False, default="")
    original_text = db.Column(db.Text, nullable=False, default="")
    parsed_text = db.Column(db.Text, nullable=False, default="")
    follow_count = db.Column(db.Integer, nullable=False, default=0)
    question_count = db.Column(db.Integer, nullable=False, default=0)
    recommend = db.Column(db.Boolean, nullable=False, default=False)
    reserved = db.Column(db.Boolean, nullable=False, default=False)
    status = db.Column(db.Integer, nullable=False, default=TAG_STATUS_AVAILABLE, index=True)
    revision_id = db.Column(db.String(20), nullable=False, default="0")

    def __repr__(self):
        return f"<Tag {self.slug_name} ({self.id})>"
