"""
Model: Question
"""

from db import db
from utils import now_utc


class Question(db.Model):
    id = db.Column(db.String(20), primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    user_id = db.Column(db.String(20), nullable=False, default="0")
    title = db.Column(db.String(150), nullable=False, default="")
    original_text = db.Column(db.Text, nullable=False, default="")
    parsed_text = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.Integer, nullable=False, default=1)
    accepted_answer_id = db.Column(db.String(20), nullable=False, default="0")
    revision_id = db.Column(db.String(20), nullable=False, default="0")
