"""
Model: Answer
"""

from db import db
from utils import now_utc


class Answer(db.Model):
    id = db.Column(db.String(20), primary_key=True)
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)
    question_id = db.Column(db.String(20), nullable=False, index=True)
    user_id = db.Column(db.String(20), nullable=False, default="0")
    original_text = db.Column(db.Text, nullable=False, default="")
    parsed_text = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.Integer, nullable=False, default=1)
    adopted = db.Column(db.Boolean, nullable=False, default=False)
    revision_id = db.Column(db.String(20), nullable=False, default="0")
