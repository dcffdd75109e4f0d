"""Comment lookups shared by other services."""

from exceptions import NotFoundException
from repositories.comment_repository import CommentRepository


def get_comment(comment_id):
    comment = CommentRepository.get_by_id(comment_id)
    if comment is None:
        raise NotFoundException(f"comment {comment_id} not found")
    return comment
