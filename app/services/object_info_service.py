"""
Resolve any object identifier to the question/answer it belongs to.

The object type is encoded in the identifier itself, see
repositories.uniqueid_repository.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict

from db import db
from models.answer import Answer
from models.comment import Comment
from models.question import Question
from models.tag import Tag
from constants import OBJECT_TYPE_QUESTION, OBJECT_TYPE_ANSWER, OBJECT_TYPE_TAG, OBJECT_TYPE_COMMENT
from exceptions import NotFoundException
from repositories.uniqueid_repository import get_object_type_by_object_id


@dataclass
class ObjectInfo:
    object_id: str
    object_type: str
    title: str = ""
    question_id: str = ""
    answer_id: str = ""
    comment_id: str = ""
    tag_id: str = ""

    def to_dict(self):
        return asdict(self)


def _get_or_404(model, object_id):
    item = db.session.get(model, object_id)
    if item is None:
        raise NotFoundException(f"{model.__name__.lower()} {object_id} not found")
    return item


def _question_info(object_id):
    question = _get_or_404(Question, object_id)
    return ObjectInfo(
        object_id=question.id,
        object_type=OBJECT_TYPE_QUESTION,
        title=question.title,
        question_id=question.id,
    )


def _answer_info(object_id):
    answer = _get_or_404(Answer, object_id)
    question = _get_or_404(Question, answer.question_id)
    return ObjectInfo(
        object_id=answer.id,
        object_type=OBJECT_TYPE_ANSWER,
        title=question.title,
        question_id=question.id,
        answer_id=answer.id,
    )


def _tag_info(object_id):
    tag = _get_or_404(Tag, object_id)
    return ObjectInfo(
        object_id=tag.id,
        object_type=OBJECT_TYPE_TAG,
        title=tag.slug_name,
        tag_id=tag.id,
    )


def _comment_info(object_id):
    comment = _get_or_404(Comment, object_id)
    parent = get_info(comment.object_id)
    return ObjectInfo(
        object_id=comment.id,
        object_type=OBJECT_TYPE_COMMENT,
        title=parent.title,
        question_id=parent.question_id,
        answer_id=parent.answer_id,
        comment_id=comment.id,
    )


RESOLVERS = {
    OBJECT_TYPE_QUESTION: _question_info,
    OBJECT_TYPE_ANSWER: _answer_info,
    OBJECT_TYPE_TAG: _tag_info,
    OBJECT_TYPE_COMMENT: _comment_info,
}


def get_info(object_id) -> ObjectInfo:
    """Title, type and owning question/answer of an object; NotFoundException otherwise"""
    object_type = get_object_type_by_object_id(object_id)
    resolver = RESOLVERS.get(object_type)
    if resolver is None:
        raise NotFoundException(f"object {object_id} not found")
    return resolver(object_id)
