"""
Model: Uniqid
One row per generated identifier; the row id is the sequence part.
"""

from db import db


class Uniqid(db.Model):
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    uniqid_type = db.Column(db.Integer, nullable=False, default=0)
